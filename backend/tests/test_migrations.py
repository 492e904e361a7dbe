"""Tests for the migration runner's bookkeeping."""

from run_migrations import (
    MIGRATIONS_DIR,
    checksum_of,
    discover_migrations,
    pending_migrations,
)


class TestDiscoverMigrations:
    def test_sorted_by_name(self, tmp_path):
        (tmp_path / "002_second.sql").write_text("SELECT 2;")
        (tmp_path / "001_first.sql").write_text("SELECT 1;")
        (tmp_path / "notes.txt").write_text("ignored")

        migrations = discover_migrations(tmp_path)

        assert [m.name for m in migrations] == ["001_first.sql", "002_second.sql"]
        assert migrations[0].checksum == checksum_of("SELECT 1;")
        assert migrations[0].read() == "SELECT 1;"

    def test_missing_directory(self, tmp_path):
        assert discover_migrations(tmp_path / "absent") == []

    def test_bundled_schema(self):
        names = [m.name for m in discover_migrations(MIGRATIONS_DIR)]
        assert names == ["001_create_users.sql", "002_create_bags.sql"]


class TestPendingMigrations:
    def test_splits_pending_and_modified(self, tmp_path):
        (tmp_path / "001_first.sql").write_text("SELECT 1;")
        (tmp_path / "002_second.sql").write_text("SELECT 2;")
        (tmp_path / "003_third.sql").write_text("SELECT 3;")
        migrations = discover_migrations(tmp_path)

        applied = {
            "001_first.sql": checksum_of("SELECT 1;"),
            "002_second.sql": checksum_of("SELECT 'edited';"),
        }
        pending, modified = pending_migrations(migrations, applied)

        assert [m.name for m in pending] == ["003_third.sql"]
        assert [m.name for m in modified] == ["002_second.sql"]

    def test_nothing_applied(self, tmp_path):
        (tmp_path / "001_first.sql").write_text("SELECT 1;")
        pending, modified = pending_migrations(discover_migrations(tmp_path), {})
        assert len(pending) == 1
        assert modified == []
