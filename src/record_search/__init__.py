"""Record Search - in-memory id and name-prefix lookup."""

from .core import KeyIndex, Record, RecordStore, TextTrie, normalize_label

__version__ = "0.1.0"

__all__ = [
    "KeyIndex",
    "Record",
    "RecordStore",
    "TextTrie",
    "normalize_label",
]
