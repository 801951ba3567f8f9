"""MIPI Display Command Set (DCS) commands and helpers for sending them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable, Union

from dcsdisplay.options import (
    ColorInversion,
    ColorOrder,
    HorizontalRefreshOrder,
    ModelOptions,
    RefreshOrder,
    TearingEffect,
    VerticalRefreshOrder,
)
from dcsdisplay.orientation import MemoryMapping, Orientation

_U16_MAX = 0xFFFF


def _u16(value: int, name: str) -> bytes:
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{name} must fit in 16 bits, got {value}")
    return value.to_bytes(2, "big")


class DcsCommand(ABC):
    """A DCS command: an instruction code followed by parameter bytes."""

    @property
    @abstractmethod
    def instruction(self) -> int:
        """The instruction code."""

    @abstractmethod
    def params(self) -> bytes:
        """The parameter bytes sent after the instruction code."""


@dataclass(frozen=True)
class BasicCommand(DcsCommand):
    """A DCS command that takes no parameters."""

    code: int
    name: str = ""

    @property
    def instruction(self) -> int:
        return self.code

    def params(self) -> bytes:
        return b""


SOFT_RESET = BasicCommand(0x01, "SoftReset")
ENTER_SLEEP_MODE = BasicCommand(0x10, "EnterSleepMode")
EXIT_SLEEP_MODE = BasicCommand(0x11, "ExitSleepMode")
ENTER_PARTIAL_MODE = BasicCommand(0x12, "EnterPartialMode")
ENTER_NORMAL_MODE = BasicCommand(0x13, "EnterNormalMode")
SET_DISPLAY_OFF = BasicCommand(0x28, "SetDisplayOff")
SET_DISPLAY_ON = BasicCommand(0x29, "SetDisplayOn")
EXIT_IDLE_MODE = BasicCommand(0x38, "ExitIdleMode")
ENTER_IDLE_MODE = BasicCommand(0x39, "EnterIdleMode")
WRITE_MEMORY_START = BasicCommand(0x2C, "WriteMemoryStart")


_REFRESH_BITS = {
    (VerticalRefreshOrder.TOP_TO_BOTTOM, HorizontalRefreshOrder.LEFT_TO_RIGHT): 0b0000_0000,
    (VerticalRefreshOrder.TOP_TO_BOTTOM, HorizontalRefreshOrder.RIGHT_TO_LEFT): 0b0000_0100,
    (VerticalRefreshOrder.BOTTOM_TO_TOP, HorizontalRefreshOrder.LEFT_TO_RIGHT): 0b0001_0000,
    (VerticalRefreshOrder.BOTTOM_TO_TOP, HorizontalRefreshOrder.RIGHT_TO_LEFT): 0b0001_0100,
}


@dataclass(frozen=True)
class SetAddressMode(DcsCommand):
    """Set Address Mode (MADCTL)."""

    value: int = 0

    @classmethod
    def from_parts(
        cls,
        color_order: ColorOrder,
        orientation: Orientation,
        refresh_order: RefreshOrder,
    ) -> SetAddressMode:
        """Build a MADCTL command from its three settings."""
        return (
            cls()
            .with_color_order(color_order)
            .with_orientation(orientation)
            .with_refresh_order(refresh_order)
        )

    @classmethod
    def from_options(cls, options: ModelOptions) -> SetAddressMode:
        """Build a MADCTL command from model options."""
        return cls.from_parts(options.color_order, options.orientation, options.refresh_order)

    def with_color_order(self, color_order: ColorOrder) -> SetAddressMode:
        """Return a copy with the color order bit set."""
        if color_order is ColorOrder.BGR:
            return SetAddressMode(self.value | 0b0000_1000)
        return SetAddressMode(self.value & 0b1111_0111)

    def with_orientation(self, orientation: Orientation) -> SetAddressMode:
        """Return a copy with the orientation bits set."""
        result = self.value & 0b0001_1111
        mapping = MemoryMapping.from_orientation(orientation)
        if mapping.reverse_rows:
            result |= 1 << 7
        if mapping.reverse_columns:
            result |= 1 << 6
        if mapping.swap_rows_and_columns:
            result |= 1 << 5
        return SetAddressMode(result)

    def with_refresh_order(self, refresh_order: RefreshOrder) -> SetAddressMode:
        """Return a copy with the refresh order bits set."""
        bits = _REFRESH_BITS[(refresh_order.vertical, refresh_order.horizontal)]
        return SetAddressMode((self.value & 0b1110_1011) | bits)

    @property
    def instruction(self) -> int:
        return 0x36

    def params(self) -> bytes:
        return bytes([self.value])


@dataclass(frozen=True)
class SetColumnAddress(DcsCommand):
    """Set Column Address (CASET)."""

    start_column: int
    end_column: int

    @property
    def instruction(self) -> int:
        return 0x2A

    def params(self) -> bytes:
        return _u16(self.start_column, "start_column") + _u16(self.end_column, "end_column")


@dataclass(frozen=True)
class SetPageAddress(DcsCommand):
    """Set Page Address (RASET)."""

    start_row: int
    end_row: int

    @property
    def instruction(self) -> int:
        return 0x2B

    def params(self) -> bytes:
        return _u16(self.start_row, "start_row") + _u16(self.end_row, "end_row")


class BitsPerPixel(IntEnum):
    """Bits per pixel for the DPI and DBI fields of a pixel format."""

    THREE = 0b001
    EIGHT = 0b010
    TWELVE = 0b011
    SIXTEEN = 0b101
    EIGHTEEN = 0b110
    TWENTY_FOUR = 0b111


@dataclass(frozen=True)
class PixelFormat:
    """Pixel format as a combination of DPI and DBI bit depths."""

    dpi: BitsPerPixel
    dbi: BitsPerPixel

    @classmethod
    def with_all(cls, bpp: BitsPerPixel) -> PixelFormat:
        """Use the same bit depth for DPI and DBI."""
        return cls(bpp, bpp)

    def to_byte(self) -> int:
        """The COLMOD byte holding both DPI and DBI bits."""
        return (int(self.dpi) << 4) | int(self.dbi)


@dataclass(frozen=True)
class SetPixelFormat(DcsCommand):
    """Set Pixel Format (COLMOD)."""

    pixel_format: PixelFormat

    @property
    def instruction(self) -> int:
        return 0x3A

    def params(self) -> bytes:
        return bytes([self.pixel_format.to_byte()])


@dataclass(frozen=True)
class SetScrollArea(DcsCommand):
    """Set Scroll Area (VSCRDEF): top fixed, vertical scroll and bottom fixed areas."""

    tfa: int
    vsa: int
    bfa: int

    @property
    def instruction(self) -> int:
        return 0x33

    def params(self) -> bytes:
        return _u16(self.tfa, "tfa") + _u16(self.vsa, "vsa") + _u16(self.bfa, "bfa")


@dataclass(frozen=True)
class SetScrollStart(DcsCommand):
    """Set Scroll Start (VSCAD)."""

    offset: int

    @property
    def instruction(self) -> int:
        return 0x37

    def params(self) -> bytes:
        return _u16(self.offset, "offset")


@dataclass(frozen=True)
class SetTearingEffect(DcsCommand):
    """Set Tearing Effect output (TEOFF / TEON)."""

    tearing_effect: TearingEffect

    @property
    def instruction(self) -> int:
        if self.tearing_effect is TearingEffect.OFF:
            return 0x34
        return 0x35

    def params(self) -> bytes:
        if self.tearing_effect is TearingEffect.OFF:
            return b""
        if self.tearing_effect is TearingEffect.VERTICAL:
            return b"\x00"
        return b"\x01"


@dataclass(frozen=True)
class SetInvertMode(DcsCommand):
    """Set Invert Mode (INVOFF / INVON)."""

    color_inversion: ColorInversion

    @property
    def instruction(self) -> int:
        if self.color_inversion is ColorInversion.NORMAL:
            return 0x20
        return 0x21

    def params(self) -> bytes:
        return b""


async def write_command(di: Any, command: DcsCommand) -> None:
    """Send a DCS command to the display interface."""
    await di.send_command(command.instruction, command.params())


async def write_raw(
    di: Any, instruction: int, params: Union[bytes, Iterable[int]] = b""
) -> None:
    """Send a raw instruction with optional parameter bytes to the interface."""
    await di.send_command(instruction, bytes(params))