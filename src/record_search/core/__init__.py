"""
Core module - dual-index record store

Hash index for exact ids, prefix trie for names, one facade over both.
"""

from .key_index import KeyIndex
from .record import Record
from .store import RecordStore
from .text_trie import TextTrie, normalize_label

__all__ = [
    "KeyIndex",
    "Record",
    "RecordStore",
    "TextTrie",
    "normalize_label",
]
