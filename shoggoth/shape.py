"""Layer dimensions and layer calculation flags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCalc(Enum):
    """How a layer computes its neuron errors."""

    NONE = "NONE"
    LEARNING = "LEARNING"
    VALUE = "VALUE"


class WeightCalc(Enum):
    """Whether a layer computes the weights of its incoming nerves."""

    NONE = "NONE"
    CALC = "CALC"


@dataclass(frozen=True)
class Size3:
    """Integer three-dimensional size or position."""

    x: int = 0
    y: int = 0
    z: int = 0

    def volume(self) -> int:
        """Number of cells in a box of this size."""
        return self.x * self.y * self.z

    def pos_by_index(self, index: int) -> Size3:
        """Position of the cell with the given linear index."""
        if not 0 <= index < self.volume():
            raise IndexError(f"index {index} out of range for size {self}")
        plane = self.x * self.y
        return Size3(index % self.x, (index % plane) // self.x, index // plane)

    def index_by_pos(self, pos: Size3) -> int:
        """Linear index of a position inside a box of this size."""
        return pos.x + pos.y * self.x + pos.z * self.x * self.y