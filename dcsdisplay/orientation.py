"""Display rotation, orientation and framebuffer memory mapping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InvalidAngleError(ValueError):
    """Raised when an angle is not an integer multiple of 90 degrees."""


class Rotation(Enum):
    """Clockwise display rotation."""

    DEG0 = 0
    DEG90 = 90
    DEG180 = 180
    DEG270 = 270

    @property
    def degree(self) -> int:
        """The rotation in degrees."""
        return self.value

    @classmethod
    def from_degree(cls, angle: int) -> Rotation:
        """Convert an angle into a rotation.

        Raises InvalidAngleError if the angle is not a multiple of 90 degrees.
        """
        if angle < 0 or angle > 270:
            angle %= 360
        try:
            return cls(angle)
        except ValueError:
            raise InvalidAngleError(f"invalid rotation angle: {angle}") from None

    def rotate(self, other: Rotation) -> Rotation:
        """Rotate this rotation by another rotation."""
        return Rotation.from_degree(self.value + other.value)

    def is_horizontal(self) -> bool:
        """True for 0 and 180 degrees."""
        return self in (Rotation.DEG0, Rotation.DEG180)

    def is_vertical(self) -> bool:
        """True for 90 and 270 degrees."""
        return self in (Rotation.DEG90, Rotation.DEG270)


@dataclass(frozen=True)
class Orientation:
    """How display content is oriented relative to the display's default."""

    rotation: Rotation = Rotation.DEG0
    mirrored: bool = False

    def rotate(self, rotation: Rotation) -> Orientation:
        """Return the orientation rotated by ``rotation``."""
        return Orientation(self.rotation.rotate(rotation), self.mirrored)

    def _flip_horizontal_absolute(self) -> Orientation:
        return Orientation(self.rotation, not self.mirrored)

    def _flip_vertical_absolute(self) -> Orientation:
        return Orientation(self.rotation.rotate(Rotation.DEG180), not self.mirrored)

    def flip_horizontal(self) -> Orientation:
        """Flip the orientation across the horizontal axis."""
        if self.rotation.is_vertical():
            return self._flip_vertical_absolute()
        return self._flip_horizontal_absolute()

    def flip_vertical(self) -> Orientation:
        """Flip the orientation across the vertical axis."""
        if self.rotation.is_vertical():
            return self._flip_horizontal_absolute()
        return self._flip_vertical_absolute()


_REVERSALS = {
    Rotation.DEG0: (False, False),
    Rotation.DEG90: (False, True),
    Rotation.DEG180: (True, True),
    Rotation.DEG270: (True, False),
}


@dataclass(frozen=True)
class MemoryMapping:
    """How a framebuffer maps onto the physical rows and columns of a display."""

    swap_rows_and_columns: bool = False
    reverse_rows: bool = False
    reverse_columns: bool = False

    @classmethod
    def from_orientation(cls, orientation: Orientation) -> MemoryMapping:
        """Derive the memory mapping for an orientation."""
        reverse_rows, reverse_columns = _REVERSALS[orientation.rotation]
        return cls(
            swap_rows_and_columns=orientation.rotation.is_vertical(),
            reverse_rows=reverse_rows,
            reverse_columns=reverse_columns ^ orientation.mirrored,
        )