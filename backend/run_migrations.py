#!/usr/bin/env python3
"""
Database migration runner.

Applies the SQL files in migrations/ to the Postgres database behind
Supabase, in file name order, recording each one in a tracking table.

Usage:
    python run_migrations.py              # Apply pending migrations
    python run_migrations.py --status     # Show migration status
    python run_migrations.py --dry-run    # Show what would run

Configuration:
    Set SUPABASE_DB_URL in your .env file to the database connection URI
    (Supabase Dashboard → Settings → Database → Connection string → URI).
"""

import argparse
import hashlib
import sys
from dataclasses import dataclass
from pathlib import Path

import psycopg2
from psycopg2 import sql
from rich.console import Console
from rich.table import Table

from shared.config import get_settings

console = Console()

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
MIGRATIONS_TABLE = "_migrations"


@dataclass(frozen=True)
class Migration:
    """One SQL migration file."""

    name: str
    path: Path
    checksum: str

    def read(self) -> str:
        return self.path.read_text()


def checksum_of(content: str) -> str:
    return hashlib.sha256(content.encode()).hexdigest()[:16]


def discover_migrations(directory: Path = MIGRATIONS_DIR) -> list[Migration]:
    """List the migration files in a directory, sorted by name."""
    if not directory.exists():
        return []
    return [
        Migration(name=path.name, path=path, checksum=checksum_of(path.read_text()))
        for path in sorted(directory.glob("*.sql"))
    ]


def pending_migrations(
    migrations: list[Migration],
    applied: dict[str, str],
) -> tuple[list[Migration], list[Migration]]:
    """
    Split migrations into those still to run and those changed since they ran.

    Args:
        migrations: Migrations found on disk
        applied: Checksums of applied migrations, keyed by name

    Returns:
        (pending, modified)
    """
    pending = [m for m in migrations if m.name not in applied]
    modified = [m for m in migrations if m.name in applied and applied[m.name] != m.checksum]
    return pending, modified


def get_db_connection():
    """Open a connection to the database."""
    settings = get_settings()

    if not settings.supabase_db_url:
        console.print("[red]Error:[/red] SUPABASE_DB_URL is not set.")
        console.print("Set it in your .env file to the Postgres connection URI.")
        sys.exit(1)

    try:
        return psycopg2.connect(settings.supabase_db_url)
    except psycopg2.Error as e:
        console.print(f"[red]Database connection failed:[/red] {e}")
        sys.exit(1)


def ensure_migrations_table(conn) -> None:
    """Create the tracking table if it doesn't exist."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL("""
                CREATE TABLE IF NOT EXISTS {} (
                    id SERIAL PRIMARY KEY,
                    name VARCHAR(255) NOT NULL UNIQUE,
                    checksum VARCHAR(64) NOT NULL,
                    applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
                );
            """).format(sql.Identifier(MIGRATIONS_TABLE))
        )
    conn.commit()


def get_applied(conn) -> dict[str, tuple[str, object]]:
    """Map applied migration names to (checksum, applied_at)."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL("SELECT name, checksum, applied_at FROM {} ORDER BY name").format(
                sql.Identifier(MIGRATIONS_TABLE)
            )
        )
        return {row[0]: (row[1], row[2]) for row in cur.fetchall()}


def apply_migration(conn, migration: Migration) -> None:
    """Run one migration and record it, in a single transaction."""
    console.print(f"[blue]Running:[/blue] {migration.name}...")
    try:
        with conn.cursor() as cur:
            cur.execute(migration.read())
            cur.execute(
                sql.SQL("INSERT INTO {} (name, checksum) VALUES (%s, %s)").format(
                    sql.Identifier(MIGRATIONS_TABLE)
                ),
                (migration.name, migration.checksum),
            )
        conn.commit()
    except psycopg2.Error as e:
        conn.rollback()
        console.print(f"[red]✗[/red] {migration.name} failed: {e}")
        raise
    console.print(f"[green]✓[/green] {migration.name} applied")


def show_status(migrations: list[Migration], applied: dict[str, tuple[str, object]]) -> None:
    if not migrations and not applied:
        console.print("[dim]No migrations found.[/dim]")
        return

    table = Table(title="Migration Status")
    table.add_column("Migration", style="cyan")
    table.add_column("Status")
    table.add_column("Applied At")
    table.add_column("Checksum")

    for migration in migrations:
        if migration.name not in applied:
            table.add_row(migration.name, "[yellow]Pending[/yellow]", "", migration.checksum)
            continue
        checksum, applied_at = applied[migration.name]
        state = "[green]Applied[/green]" if checksum == migration.checksum else "[red]Modified[/red]"
        when = applied_at.strftime("%Y-%m-%d %H:%M:%S") if applied_at else ""
        table.add_row(migration.name, state, when, migration.checksum)

    console.print(table)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run Bag Store database migrations")
    parser.add_argument("--status", action="store_true", help="Show migration status without running anything")
    parser.add_argument("--dry-run", action="store_true", help="Show what would run without executing it")
    args = parser.parse_args()

    console.print("[bold]Bag Store Database Migrations[/bold]\n")

    migrations = discover_migrations()
    conn = get_db_connection()
    try:
        ensure_migrations_table(conn)
        applied = get_applied(conn)

        if args.status:
            show_status(migrations, applied)
            return

        pending, modified = pending_migrations(
            migrations, {name: checksum for name, (checksum, _) in applied.items()}
        )
        for migration in modified:
            console.print(f"[yellow]Warning:[/yellow] {migration.name} has changed since it was applied")

        if not pending:
            console.print("[green]All migrations are up to date![/green]")
            return

        for migration in pending:
            if args.dry_run:
                console.print(f"[cyan]Would run:[/cyan] {migration.name}")
            else:
                apply_migration(conn, migration)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
