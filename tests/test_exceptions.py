"""
==============================================================================
Exception Tests
==============================================================================
"""

from bookstore.core import (
    BookstoreException,
    malformed_store_data,
    store_read_failed,
    store_write_failed,
)


class TestFactories:
    """Tests for the exception factories."""

    def test_malformed_store_data(self):
        """Reason and token position end up in details."""
        exc = malformed_store_data("expected 'Book', found 'Shop'", 4)
        assert isinstance(exc, BookstoreException)
        assert exc.code == "MALFORMED_STORE_DATA"
        assert exc.details == {"reason": "expected 'Book', found 'Shop'", "token_position": 4}
        assert str(exc) == "Malformed store data: expected 'Book', found 'Shop'"

    def test_io_failures(self):
        """Read and write failures carry the path."""
        assert store_read_failed("a.dat", "denied").details["path"] == "a.dat"
        assert store_write_failed("a.dat", "full").code == "STORE_WRITE_FAILED"

    def test_to_dict(self):
        """to_dict includes details only when present."""
        plain = BookstoreException("msg", "CODE").to_dict()
        assert set(plain) == {"code", "message", "timestamp"}

        detailed = store_read_failed("a.dat", "denied").to_dict()
        assert detailed["details"] == {"path": "a.dat", "reason": "denied"}
