"""A framebuffer storing pixels as raw bytes ready to send to a display."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Tuple, Type, Union


def _check_channel(name: str, value: int, maximum: int) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} channel must be in 0..{maximum}, got {value}")


@dataclass(frozen=True)
class Rgb565:
    """16-bit color: 5 bits red, 6 bits green, 5 bits blue."""

    r: int
    g: int
    b: int

    BYTES_PER_PIXEL: ClassVar[int] = 2

    def __post_init__(self) -> None:
        _check_channel("red", self.r, 31)
        _check_channel("green", self.g, 63)
        _check_channel("blue", self.b, 31)

    def to_bytes(self) -> bytes:
        """The big-endian 16-bit raw value."""
        return ((self.r << 11) | (self.g << 5) | self.b).to_bytes(2, "big")


@dataclass(frozen=True)
class Rgb888:
    """24-bit color with 8 bits per channel."""

    r: int
    g: int
    b: int

    BYTES_PER_PIXEL: ClassVar[int] = 3

    def __post_init__(self) -> None:
        _check_channel("red", self.r, 255)
        _check_channel("green", self.g, 255)
        _check_channel("blue", self.b, 255)

    def to_bytes(self) -> bytes:
        """The red, green and blue bytes in that order."""
        return bytes((self.r, self.g, self.b))


Color = Union[Rgb565, Rgb888]


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("rectangle size must not be negative")

    def intersection(self, other: Rectangle) -> Rectangle:
        """The overlapping area, or a zero-sized rectangle if there is none."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.x + self.width, other.x + other.width)
        bottom = min(self.y + self.height, other.y + other.height)
        if right <= left or bottom <= top:
            return Rectangle(0, 0, 0, 0)
        return Rectangle(left, top, right - left, bottom - top)

    def is_zero_sized(self) -> bool:
        """True if the rectangle covers no pixels."""
        return self.width == 0 or self.height == 0


class RawFrameBuf:
    """Draw target that writes raw pixel bytes into a caller-supplied buffer."""

    def __init__(
        self,
        buffer: Any,
        width: int,
        height: int,
        color_type: Type[Color] = Rgb565,
    ) -> None:
        view = memoryview(buffer).cast("B")
        if view.readonly:
            raise TypeError("RawFrameBuf needs a writable buffer")
        self._bpp = color_type.BYTES_PER_PIXEL
        expected = width * height * self._bpp
        if len(view) < expected:
            raise ValueError(
                "RawFrameBuf underlying buffer is too small. "
                f"Expected at least {expected}, got {len(view)}."
            )
        self._view = view
        self.width = width
        self.height = height
        self.color_type = color_type

    @property
    def size(self) -> Tuple[int, int]:
        """Width and height in pixels."""
        return (self.width, self.height)

    @property
    def _active_len(self) -> int:
        return self.width * self.height * self._bpp

    def as_bytes(self) -> memoryview:
        """A writable view of the active part of the buffer."""
        return self._view[: self._active_len]

    def bounding_box(self) -> Rectangle:
        """The rectangle covering the whole framebuffer."""
        return Rectangle(0, 0, self.width, self.height)

    def _color_bytes(self, color: Color) -> bytes:
        if not isinstance(color, self.color_type):
            raise TypeError(
                f"expected a {self.color_type.__name__} color, got {type(color).__name__}"
            )
        return color.to_bytes()

    def draw_iter(self, pixels: Iterable[Tuple[Tuple[int, int], Color]]) -> None:
        """Draw ``((x, y), color)`` pixels; those outside the buffer are ignored."""
        n = self._bpp
        for (x, y), color in pixels:
            if 0 <= x < self.width and 0 <= y < self.height:
                index = (y * self.width + x) * n
                self._view[index : index + n] = self._color_bytes(color)

    def clear(self, color: Color) -> None:
        """Fill the whole framebuffer with one color."""
        self._view[: self._active_len] = self._color_bytes(color) * (self.width * self.height)

    def fill_solid(self, area: Rectangle, color: Color) -> None:
        """Fill the part of ``area`` that lies inside the framebuffer."""
        drawable = area.intersection(self.bounding_box())
        if drawable.is_zero_sized():
            return
        row = self._color_bytes(color) * drawable.width
        for y in range(drawable.y, drawable.y + drawable.height):
            start = (y * self.width + drawable.x) * self._bpp
            self._view[start : start + len(row)] = row