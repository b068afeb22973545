"""
==============================================================================
Store File Tests
==============================================================================

Tests for reading, creating and overwriting the store file.

==============================================================================
"""

from pathlib import Path

import pytest

from bookstore.catalog import BookCatalog
from bookstore.core import BookstoreException
from bookstore.persistence import StoreFile


class TestRead:
    """Tests for raw reads."""

    def test_missing_file_created_empty(self, store_path: Path):
        """First read creates an empty file."""
        assert StoreFile(store_path).read() == ""
        assert store_path.exists()
        assert store_path.read_text() == ""

    def test_missing_parent_directories_created(self, tmp_path: Path):
        """Parent directories are created as needed."""
        path = tmp_path / "nested" / "dir" / "store.dat"
        StoreFile(path).read()
        assert path.exists()

    def test_reads_existing_content(self, store_path: Path):
        """Existing text is returned unchanged."""
        store_path.write_text("Store{books=[]}", encoding="utf-8")
        assert StoreFile(store_path).read() == "Store{books=[]}"

    def test_unreadable_path(self, tmp_path: Path):
        """A directory in place of the file is a read failure."""
        with pytest.raises(BookstoreException) as exc_info:
            StoreFile(tmp_path).read()
        assert exc_info.value.code == "STORE_READ_FAILED"

    def test_undecodable_bytes(self, store_path: Path):
        """Bytes that are not UTF-8 are a read failure."""
        store_path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(BookstoreException) as exc_info:
            StoreFile(store_path).read()
        assert exc_info.value.code == "STORE_READ_FAILED"


class TestWrite:
    """Tests for raw writes."""

    def test_overwrites_wholesale(self, store_path: Path):
        """Writes replace the previous content, never append."""
        store_file = StoreFile(store_path)
        store_file.write("first content that is long")
        store_file.write("second")
        assert store_path.read_text(encoding="utf-8") == "second"
        assert not store_path.with_name("store.dat.tmp").exists()

    def test_failed_replace_keeps_previous_file(self, store_path: Path, monkeypatch: pytest.MonkeyPatch):
        """A failed save leaves the last good file in place."""
        store_file = StoreFile(store_path)
        store_file.write("good")

        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("bookstore.persistence.store_file.os.replace", broken_replace)

        with pytest.raises(BookstoreException) as exc_info:
            store_file.write("new")

        assert exc_info.value.code == "STORE_WRITE_FAILED"
        assert "disk full" in exc_info.value.message
        assert store_path.read_text(encoding="utf-8") == "good"
        assert not store_path.with_name("store.dat.tmp").exists()

    def test_cleanup_failure_keeps_write_error(self, store_path: Path, monkeypatch: pytest.MonkeyPatch):
        """A temp file that cannot be removed does not hide the save error."""
        store_file = StoreFile(store_path)

        def broken_replace(src, dst):
            raise OSError("disk full")

        def broken_unlink(self, missing_ok=False):
            raise PermissionError("read-only directory")

        monkeypatch.setattr("bookstore.persistence.store_file.os.replace", broken_replace)
        monkeypatch.setattr(Path, "unlink", broken_unlink)

        with pytest.raises(BookstoreException) as exc_info:
            store_file.write("new")

        assert exc_info.value.code == "STORE_WRITE_FAILED"
        assert "disk full" in exc_info.value.message

    def test_unwritable_location(self, tmp_path: Path):
        """A regular file where a directory is needed fails the write."""
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        with pytest.raises(BookstoreException) as exc_info:
            StoreFile(blocker / "store.dat").write("data")
        assert exc_info.value.code == "STORE_WRITE_FAILED"


class TestCatalogPersistence:
    """Tests for load/save of a catalog."""

    def test_save_then_load(self, store_path: Path, populated_catalog: BookCatalog):
        """A saved catalog loads back identically."""
        assert StoreFile(store_path).save(populated_catalog)

        restored = BookCatalog()
        result = StoreFile(store_path).load(restored)

        assert result.ok
        assert result.inserted == 6
        assert restored.snapshot() == populated_catalog.snapshot()

    def test_load_missing_file(self, store_path: Path, catalog: BookCatalog):
        """Missing file loads as an empty catalog."""
        result = StoreFile(store_path).load(catalog)
        assert result.ok
        assert len(catalog) == 0
        assert store_path.exists()

    def test_load_read_failure_is_not_fatal(self, tmp_path: Path, catalog: BookCatalog):
        """Read errors come back as a diagnostic."""
        result = StoreFile(tmp_path).load(catalog)
        assert result.error.code == "STORE_READ_FAILED"
        assert not result.malformed
        assert len(catalog) == 0

    def test_load_malformed_keeps_prefix(self, store_path: Path, catalog: BookCatalog):
        """Malformed files load what they can."""
        store_path.write_text(
            "Store{books=[Book{isbn='1', title='a', category='A', price=1.0}, Book{isbn='2', tit",
            encoding="utf-8",
        )
        result = StoreFile(store_path).load(catalog)
        assert result.malformed
        assert [b.title for b in catalog.snapshot()] == ["a"]

    def test_save_failure_returns_false(self, tmp_path: Path, populated_catalog: BookCatalog):
        """Save errors are reported, not raised."""
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        assert StoreFile(blocker / "store.dat").save(populated_catalog) is False

    def test_path_property(self, store_path: Path):
        """Strings are accepted and exposed as Path."""
        assert StoreFile(str(store_path)).path == store_path
