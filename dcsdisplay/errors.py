"""Exceptions raised while configuring and driving a display."""

from __future__ import annotations

from typing import Optional


class DisplayError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(DisplayError):
    """The requested display configuration is not valid."""

    default_message = "invalid display configuration"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class UnsupportedInterfaceError(ConfigurationError):
    """The display model cannot be driven over the given interface."""

    default_message = "the display model does not support this interface"


class InvalidDisplaySizeError(ConfigurationError):
    """The display size is zero or larger than the model's framebuffer."""

    default_message = "invalid display size"


class InvalidDisplayOffsetError(ConfigurationError):
    """The display offset pushes the display outside the framebuffer."""

    default_message = "invalid display offset"


class ResetPinError(DisplayError):
    """Driving the reset pin failed."""

    def __init__(self, pin_error: BaseException) -> None:
        super().__init__(f"reset pin error: {pin_error!r}")
        self.pin_error = pin_error