"""
TextTrie - prefix tree over normalized labels

Every node on a label's path stores the record, so a prefix lookup is a walk
of len(prefix) edges followed by a list copy. Nodes live in a flat arena and
link to children by arena index; the root is slot 0 and never holds records.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .record import Record

ROOT = 0

_NON_LETTERS = re.compile(r"[^a-z]")


def normalize_label(text: Optional[str]) -> str:
    """Lowercase and drop everything outside a-z."""
    if not text:
        return ""
    return _NON_LETTERS.sub("", text.lower())


@dataclass
class TrieNode:
    children: Dict[str, int] = field(default_factory=dict)
    records: List[Record] = field(default_factory=list)
    terminal: bool = False


class TextTrie:
    """26-way prefix tree with per-node result lists"""

    def __init__(self):
        self._nodes: List[TrieNode] = [TrieNode()]
        self._record_count = 0

    def insert(self, record: Record) -> None:
        name = normalize_label(record.label)
        if not name:
            return

        current = ROOT
        for char in name:
            child = self._nodes[current].children.get(char)
            if child is None:
                child = len(self._nodes)
                self._nodes.append(TrieNode())
                self._nodes[current].children[char] = child
            self._nodes[child].records.append(record)
            current = child

        self._nodes[current].terminal = True
        self._record_count += 1

    def search_by_prefix(self, prefix: Optional[str]) -> List[Record]:
        if not prefix or not prefix.strip():
            return []

        node = self._find(normalize_label(prefix))
        if node is None:
            return []
        return list(node.records)

    def search_by_exact_name(self, name: Optional[str]) -> List[Record]:
        target = normalize_label(name)
        return [
            record for record in self.search_by_prefix(name)
            if normalize_label(record.label) == target
        ]

    def is_empty(self) -> bool:
        return self._record_count == 0

    def is_word(self, name: Optional[str]) -> bool:
        """True if some inserted label normalizes exactly to name."""
        normalized = normalize_label(name)
        node = self._find(normalized) if normalized else None
        return node is not None and node.terminal

    @property
    def record_count(self) -> int:
        return self._record_count

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def stats(self) -> Dict[str, Any]:
        return {
            "records_indexed": self._record_count,
            "node_count": len(self._nodes),
            "terminal_nodes": sum(1 for node in self._nodes if node.terminal),
        }

    def __len__(self) -> int:
        return self._record_count

    def _find(self, path: str) -> Optional[TrieNode]:
        # Read-only walk: never allocates nodes
        current = ROOT
        for char in path:
            current = self._nodes[current].children.get(char)
            if current is None:
                return None
        return self._nodes[current]
