# dcsdisplay

Asynchronous building blocks for small TFT displays whose controllers
implement the MIPI Display Command Set (DCS). The package turns settings such
as "rotate by 90°, BGR subpixels" or "address this rectangle" into the
command and parameter bytes a controller expects, and sends them over a
serial (SPI) or parallel bus.

It has no runtime dependencies beyond the standard library.

## Installing

```
pip install dcsdisplay
```

## What is here

| Module                       | Contents |
|------------------------------|----------|
| `dcsdisplay.orientation`     | `Rotation`, `Orientation`, `MemoryMapping`, `InvalidAngleError` |
| `dcsdisplay.options`         | `ModelOptions`, `ColorOrder`, `ColorInversion`, `RefreshOrder`, `VerticalRefreshOrder`, `HorizontalRefreshOrder`, `TearingEffect` |
| `dcsdisplay.dcs`             | DCS command classes, `write_command`, `write_raw` |
| `dcsdisplay.interface`       | `Interface`, `InterfaceKind`, `SpiInterface`, `ParallelInterface`, `SpiError`, `ParallelError`, `AsyncioDelay` |
| `dcsdisplay.raw_framebuf`    | `RawFrameBuf`, `Rgb565`, `Rgb888`, `Rectangle` |
| `dcsdisplay.models.ilitek`   | `init_ili934x`, `init_ili948x` start-up sequences |
| `dcsdisplay.errors`          | `DisplayError` and its subclasses |

## Interfaces

`SpiInterface(spi, dc)` takes an SPI device with an asynchronous
`write(data)` method and a data/command pin with `set_low()` and
`set_high()`. `send_command` drives DC low for the command byte and high for
its parameters; `send_data` writes pixel data as it is. Failures are raised as
`SpiError`, whose `source` is `"spi"` or `"dc"`.

`ParallelInterface(bus, dc, wr)` takes a bus with `set_value(word)` and a
`kind` attribute (an `InterfaceKind`), plus DC and WR pins. Each word is
latched by pulsing WR low, setting the bus, then WR high. Failures are raised
as `ParallelError`, whose `source` is `"bus"`, `"dc"` or `"wr"`.

Both have `release()` to hand back what they were built from.
`AsyncioDelay` offers `delay_ns`, `delay_us` and `delay_ms` on top of
`asyncio.sleep` and rejects negative values with `ValueError`.

## Example

```python
from dcsdisplay import dcs
from dcsdisplay.dcs import BitsPerPixel, PixelFormat
from dcsdisplay.interface import AsyncioDelay, SpiInterface
from dcsdisplay.models.ilitek import init_ili934x
from dcsdisplay.options import ColorOrder, ModelOptions
from dcsdisplay.orientation import Orientation, Rotation


async def run(spi, dc_pin):
    delay = AsyncioDelay()
    di = SpiInterface(spi, dc_pin)

    options = ModelOptions.with_all((240, 320), (0, 0))
    options.color_order = ColorOrder.BGR
    options.orientation = Orientation().rotate(Rotation.from_degree(90))

    await dcs.write_command(di, dcs.SOFT_RESET)
    madctl = await init_ili934x(
        di, delay, options, PixelFormat.with_all(BitsPerPixel.SIXTEEN)
    )

    # Fill a 10x10 square with RGB565 white.
    await dcs.write_command(di, dcs.SetColumnAddress(0, 9))
    await dcs.write_command(di, dcs.SetPageAddress(0, 9))
    await dcs.write_command(di, dcs.WRITE_MEMORY_START)
    await di.send_data(b"\xff\xff" * 100)
```

The init functions return the `SetAddressMode` (MADCTL) command they sent.

## Commands

`dcsdisplay.dcs` has constants for the parameterless commands
(`SOFT_RESET`, `ENTER_SLEEP_MODE`, `EXIT_SLEEP_MODE`, `ENTER_PARTIAL_MODE`,
`ENTER_NORMAL_MODE`, `SET_DISPLAY_OFF`, `SET_DISPLAY_ON`, `EXIT_IDLE_MODE`,
`ENTER_IDLE_MODE`, `WRITE_MEMORY_START`) and classes for the rest:
`SetAddressMode`, `SetColumnAddress`, `SetPageAddress`, `SetPixelFormat`
(with `PixelFormat` and `BitsPerPixel`), `SetScrollArea`, `SetScrollStart`,
`SetTearingEffect` and `SetInvertMode`. Each has an `instruction` code and a
`params()` method returning the parameter bytes; 16-bit values outside
`0..0xFFFF` raise `ValueError`.

`SetAddressMode.from_options(options)` or `from_parts(color_order,
orientation, refresh_order)` builds the MADCTL byte; `with_color_order`,
`with_orientation` and `with_refresh_order` return updated copies.

Send commands with `write_command(di, command)`, and vendor-specific ones with
`write_raw(di, instruction, params)`.

## Orientation

`Orientation` combines a `Rotation` with a mirror flag. `rotate`,
`flip_horizontal` and `flip_vertical` return new orientations, and the order
of the operations matters. `Rotation.from_degree` accepts any multiple of 90
(negative ones too) and raises `InvalidAngleError`, a `ValueError`, otherwise.
`MemoryMapping.from_orientation` gives the row/column swap and reversal an
orientation needs.

`ModelOptions.full_size(model)` covers the framebuffer given by the model's
`FRAMEBUFFER_SIZE` attribute; `oriented_size()` returns the size as seen in
the current orientation.

## Drawing into a buffer

`RawFrameBuf(buffer, width, height, color_type=Rgb565)` writes pixels as the
raw bytes the display expects (`Rgb565` as two big-endian bytes, `Rgb888` as
three) into any writable buffer such as a `bytearray`. A buffer that is too
small raises `ValueError`; a read-only one raises `TypeError`. Draw with
`draw_iter` (pixels as `((x, y), color)`, those outside ignored), `clear` and
`fill_solid(Rectangle(...), color)`, then pass `as_bytes()` to
`Interface.send_data`.

## What the package does not do

There is no display object that keeps state for you: nothing tracks the
current orientation or sleep state, applies the display offset to address
windows, or checks a requested size and offset against a controller's
framebuffer. There are no ready-made controller classes; of the controller
start-up sequences, only the shared Ilitek ones are provided, and everything
else is done by sending commands yourself. The configuration error classes in
`dcsdisplay.errors` (`ConfigurationError`, `UnsupportedInterfaceError`,
`InvalidDisplaySizeError`, `InvalidDisplayOffsetError`, `ResetPinError`) are
available for such code, but nothing in the package raises them.

## Running the tests

```
pip install -e ".[test]"
pytest
```