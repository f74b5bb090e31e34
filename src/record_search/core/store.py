"""
RecordStore - hash index for ids, trie for names

Both indexes receive the same Record reference on insert and never talk to
each other. Overwriting a key replaces the key index entry only; the trie
keeps every label it has seen.
"""

import logging
from typing import Any, Dict, List, Optional

from ..config import StoreConfig, get_store_config
from .key_index import KeyIndex
from .record import Record
from .text_trie import TextTrie

logger = logging.getLogger(__name__)


class RecordStore:
    def __init__(self, config: Optional[StoreConfig] = None):
        config = config or get_store_config()
        self.config = config
        self.key_index = KeyIndex(config.initial_capacity, config.load_factor_threshold)
        self.name_trie = TextTrie()

    def add(self, record: Record) -> None:
        previous = self.key_index.search(record.key)
        if previous is not None and previous.label != record.label:
            logger.debug(
                f"Key {record.key!r} relabelled {previous.label!r} -> {record.label!r}; "
                f"name trie keeps both paths"
            )
        self.key_index.insert(record)
        self.name_trie.insert(record)

    def add_record(self, key: str, label: str, score: float) -> None:
        self.add(Record(key=key, label=label, score=score))

    def search_by_id(self, key: str) -> Optional[Record]:
        return self.key_index.search(key)

    def search_by_name(self, prefix: Optional[str]) -> List[Record]:
        return self.name_trie.search_by_prefix(prefix)

    def search_by_exact_name(self, name: Optional[str]) -> List[Record]:
        return self.name_trie.search_by_exact_name(name)

    def all_records(self) -> List[Record]:
        return self.key_index.all_records()

    def size(self) -> int:
        return self.key_index.size()

    def is_empty(self) -> bool:
        return self.key_index.size() == 0

    def stats(self) -> Dict[str, Any]:
        return {
            "record_count": self.size(),
            "key_index": self.key_index.stats(),
            "name_trie": self.name_trie.stats(),
        }

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"RecordStore(size={self.size()}, config={self.config!r})"
