"""
JSON response envelope shared by every endpoint.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

from .pagination import Pagination

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """
    Standard response envelope.

    Routes return this with ``response_model_exclude_none=True`` so that
    only the populated keys reach the client.
    """

    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None
    pagination: Optional[Pagination] = None
    errors: Optional[list[dict[str, Any]]] = None
