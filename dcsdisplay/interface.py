"""Display interfaces: SPI and parallel buses, plus an asyncio delay source."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Iterable, Tuple

from dcsdisplay.errors import DisplayError


class InterfaceKind(Enum):
    """Kind of physical interface a display is attached through."""

    SERIAL_4LINE = "serial_4line"
    PARALLEL_8BIT = "parallel_8bit"
    PARALLEL_16BIT = "parallel_16bit"


class Interface(ABC):
    """A command and pixel data interface to a display controller."""

    kind: InterfaceKind

    @abstractmethod
    async def send_command(self, command: int, args: bytes = b"") -> None:
        """Send a command byte followed by its parameter bytes."""

    @abstractmethod
    async def send_data(self, data: Any) -> None:
        """Send pre-formatted pixel data after a memory write command."""


class SpiError(DisplayError):
    """Error raised by the SPI interface; ``source`` is ``"spi"`` or ``"dc"``."""

    def __init__(self, source: str, error: BaseException) -> None:
        super().__init__(f"{source} error: {error!r}")
        self.source = source
        self.error = error


class ParallelError(DisplayError):
    """Error raised by the parallel interface; ``source`` is ``"bus"``, ``"dc"`` or ``"wr"``."""

    def __init__(self, source: str, error: BaseException) -> None:
        super().__init__(f"{source} error: {error!r}")
        self.source = source
        self.error = error


class SpiInterface(Interface):
    """4-line serial interface: an async SPI device and a data/command pin.

    ``spi`` must provide ``async write(data)``; ``dc`` must provide
    ``set_low()`` and ``set_high()``.
    """

    kind = InterfaceKind.SERIAL_4LINE

    def __init__(self, spi: Any, dc: Any) -> None:
        self._spi = spi
        self._dc = dc

    def _set_dc(self, action: Callable[[], Any]) -> None:
        try:
            action()
        except Exception as exc:
            raise SpiError("dc", exc) from exc

    async def _write(self, data: Any) -> None:
        try:
            await self._spi.write(data)
        except Exception as exc:
            raise SpiError("spi", exc) from exc

    async def send_command(self, command: int, args: bytes = b"") -> None:
        self._set_dc(self._dc.set_low)
        await self._write(bytes([command]))
        self._set_dc(self._dc.set_high)
        await self._write(bytes(args))

    async def send_data(self, data: Any) -> None:
        await self._write(data)

    def release(self) -> Tuple[Any, Any]:
        """Return the SPI device and the DC pin."""
        return self._spi, self._dc


class ParallelInterface(Interface):
    """Parallel interface: an output bus plus data/command and write pins.

    ``bus`` must provide ``set_value(word)`` and a ``kind`` attribute;
    ``dc`` and ``wr`` must provide ``set_low()`` and ``set_high()``.
    """

    def __init__(self, bus: Any, dc: Any, wr: Any) -> None:
        self._bus = bus
        self._dc = dc
        self._wr = wr

    @property
    def kind(self) -> InterfaceKind:  # type: ignore[override]
        return self._bus.kind

    @staticmethod
    def _call(source: str, action: Callable[..., Any], *args: Any) -> None:
        try:
            action(*args)
        except Exception as exc:
            raise ParallelError(source, exc) from exc

    async def _send_word(self, word: int) -> None:
        self._call("wr", self._wr.set_low)
        self._call("bus", self._bus.set_value, word)
        self._call("wr", self._wr.set_high)

    async def send_command(self, command: int, args: bytes = b"") -> None:
        self._call("dc", self._dc.set_low)
        await self._send_word(command)
        self._call("dc", self._dc.set_high)
        for arg in bytes(args):
            await self._send_word(arg)

    async def send_data(self, data: Iterable[int]) -> None:
        for word in data:
            await self._send_word(word)

    def release(self) -> Tuple[Any, Any, Any]:
        """Return the bus, the DC pin and the WR pin."""
        return self._bus, self._dc, self._wr


class AsyncioDelay:
    """Delay source that waits with ``asyncio.sleep``."""

    @staticmethod
    def _check(value: float) -> None:
        if value < 0:
            raise ValueError(f"delay must not be negative, got {value}")

    async def delay_ns(self, ns: int) -> None:
        """Wait for ``ns`` nanoseconds."""
        self._check(ns)
        await asyncio.sleep(ns / 1_000_000_000)

    async def delay_us(self, us: int) -> None:
        """Wait for ``us`` microseconds."""
        self._check(us)
        await asyncio.sleep(us / 1_000_000)

    async def delay_ms(self, ms: int) -> None:
        """Wait for ``ms`` milliseconds."""
        self._check(ms)
        await asyncio.sleep(ms / 1_000)