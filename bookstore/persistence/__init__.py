"""
==============================================================================
Persistence Package
==============================================================================

Text codec and store file for saving the catalog between runs.

==============================================================================
"""

from .codec import (
    RECORD_FIELDS,
    DecodeResult,
    decode,
    encode,
    encode_book,
    load_into,
    tokenize,
)
from .store_file import StoreFile

__all__ = [
    "RECORD_FIELDS",
    "DecodeResult",
    "decode",
    "encode",
    "encode_book",
    "load_into",
    "tokenize",
    "StoreFile",
]
