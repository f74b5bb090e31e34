"""Record value type shared by both indexes."""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class Record:
    key: str
    label: str
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return f"ID: {self.key:<10} | Name: {self.label:<30} | Score: {self.score:.2f}"
