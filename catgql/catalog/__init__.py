"""
Catalog package: the cat entry model, its JSON codec and the in-memory store.
"""

from .schema import CatalogEntry, Colour, OperationRequest, SAMPLE_ENTRIES
from .codec import decode_entry, encode_entry, encode_entries
from .store import CatalogStore

__all__ = [
    'CatalogEntry',
    'Colour',
    'OperationRequest',
    'SAMPLE_ENTRIES',
    'decode_entry',
    'encode_entry',
    'encode_entries',
    'CatalogStore',
]
