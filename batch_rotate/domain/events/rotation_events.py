"""Rotation domain events."""
from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class RotationProgress:
    """Event: one file was rotated and written."""
    processed: int
    total: int
    source_path: str
    destination_path: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
