"""Model options and the small value types they are built from."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Tuple

from dcsdisplay.orientation import Orientation


class ColorInversion(Enum):
    """Color inversion."""

    NORMAL = "normal"
    INVERTED = "inverted"


class VerticalRefreshOrder(Enum):
    """Vertical refresh order."""

    TOP_TO_BOTTOM = "top_to_bottom"
    BOTTOM_TO_TOP = "bottom_to_top"

    def flip(self) -> VerticalRefreshOrder:
        """Return the opposite refresh order."""
        if self is VerticalRefreshOrder.TOP_TO_BOTTOM:
            return VerticalRefreshOrder.BOTTOM_TO_TOP
        return VerticalRefreshOrder.TOP_TO_BOTTOM


class HorizontalRefreshOrder(Enum):
    """Horizontal refresh order."""

    LEFT_TO_RIGHT = "left_to_right"
    RIGHT_TO_LEFT = "right_to_left"

    def flip(self) -> HorizontalRefreshOrder:
        """Return the opposite refresh order."""
        if self is HorizontalRefreshOrder.LEFT_TO_RIGHT:
            return HorizontalRefreshOrder.RIGHT_TO_LEFT
        return HorizontalRefreshOrder.LEFT_TO_RIGHT


@dataclass(frozen=True)
class RefreshOrder:
    """Display refresh order; defaults to left to right, top to bottom."""

    vertical: VerticalRefreshOrder = VerticalRefreshOrder.TOP_TO_BOTTOM
    horizontal: HorizontalRefreshOrder = HorizontalRefreshOrder.LEFT_TO_RIGHT

    def flip_vertical(self) -> RefreshOrder:
        """Return a refresh order with the vertical order flipped."""
        return replace(self, vertical=self.vertical.flip())

    def flip_horizontal(self) -> RefreshOrder:
        """Return a refresh order with the horizontal order flipped."""
        return replace(self, horizontal=self.horizontal.flip())


class TearingEffect(Enum):
    """Tearing effect output setting."""

    OFF = "off"
    VERTICAL = "vertical"
    HORIZONTAL_AND_VERTICAL = "horizontal_and_vertical"


class ColorOrder(Enum):
    """Subpixel order."""

    RGB = "rgb"
    BGR = "bgr"


@dataclass
class ModelOptions:
    """Options handed to a display model when it is initialised."""

    display_size: Tuple[int, int]
    display_offset: Tuple[int, int] = (0, 0)
    color_order: ColorOrder = ColorOrder.RGB
    orientation: Orientation = field(default_factory=Orientation)
    invert_colors: ColorInversion = ColorInversion.NORMAL
    refresh_order: RefreshOrder = field(default_factory=RefreshOrder)

    @classmethod
    def full_size(cls, model: Any) -> ModelOptions:
        """Options covering the model's entire framebuffer."""
        return cls(display_size=tuple(model.FRAMEBUFFER_SIZE), display_offset=(0, 0))

    @classmethod
    def with_all(
        cls, display_size: Tuple[int, int], display_offset: Tuple[int, int]
    ) -> ModelOptions:
        """Options for the given size and offset, everything else default."""
        return cls(display_size=tuple(display_size), display_offset=tuple(display_offset))

    def oriented_size(self) -> Tuple[int, int]:
        """The display size as seen in the current orientation."""
        width, height = self.display_size
        if self.orientation.rotation.is_horizontal():
            return (width, height)
        return (height, width)