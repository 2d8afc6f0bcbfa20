from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Move:
    """A single stone relocated from the picked pit to the pit it landed in."""
    from_pit: int
    to_pit: int

    def as_dict(self) -> Dict[str, int]:
        return {'fromPitIndex': self.from_pit, 'toPitIndex': self.to_pit}
