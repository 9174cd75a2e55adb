"""
Data shapes shared between the API service and the client.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum

from dacite import Config, from_dict


class StorageMode(Enum):
    """Which backend the leaderboard reads from and writes to."""

    LOCAL = "local"
    REMOTE = "remote"


@dataclass
class Participant:
    """A named leaderboard entry holding a non-negative integer score."""

    id: str
    name: str
    score: int = 0

    def as_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Participant":
        if not isinstance(data, dict):
            raise TypeError(f"participant must be an object, got {type(data).__name__}")
        # Extra keys such as created_at are dropped; ids arrive as str or int.
        return from_dict(
            data_class=cls,
            data=data,
            config=Config(cast=[str], strict=False),
        )
