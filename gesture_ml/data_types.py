"""
Core data structures for triaxial gesture recordings
"""
from __future__ import annotations

from dataclasses import dataclass, field

from .errors import EmptyDataError


@dataclass(frozen=True)
class XYZData:
    """Three equally long axis series from one recording."""

    x: tuple[float, ...]
    y: tuple[float, ...]
    z: tuple[float, ...]

    def __post_init__(self):
        # Store plain float tuples so samples stay immutable
        for axis in ("x", "y", "z"):
            object.__setattr__(self, axis, tuple(float(v) for v in getattr(self, axis)))

    def __len__(self) -> int:
        return len(self.x)

    def axes(self) -> dict[str, tuple[float, ...]]:
        return {"x": self.x, "y": self.y, "z": self.z}

    def validate(self):
        """Raise if any axis is empty or the axes differ in length."""
        for axis, values in self.axes().items():
            if len(values) == 0:
                msg = f"Empty {axis} data"
                raise EmptyDataError(msg)
        if not len(self.x) == len(self.y) == len(self.z):
            msg = (
                "Axes must have equal length, got "
                f"x={len(self.x)}, y={len(self.y)}, z={len(self.z)}"
            )
            raise ValueError(msg)


@dataclass(frozen=True)
class Recording:
    """One captured or generated gesture example."""

    id: int
    data: XYZData
    is_generated: bool = False


@dataclass
class ActionData:
    """A named gesture class and its example recordings."""

    id: int
    name: str
    recordings: list[Recording] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.recordings)
