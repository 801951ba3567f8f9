"""Shared initialisation sequences for Ilitek ILI934x and ILI948x controllers."""

from __future__ import annotations

from typing import Any

from dcsdisplay import dcs
from dcsdisplay.dcs import PixelFormat, SetAddressMode
from dcsdisplay.options import ModelOptions


async def init_ili934x(
    di: Any, delay: Any, options: ModelOptions, pixel_format: PixelFormat
) -> SetAddressMode:
    """Common init for all ILI934x controllers and color formats."""
    madctl = SetAddressMode.from_options(options)

    # Commands must wait 5 ms after a hardware or software reset.
    await delay.delay_us(5_000)

    await dcs.write_command(di, madctl)
    await dcs.write_raw(di, 0xB4, [0x00])
    await dcs.write_command(di, dcs.SetInvertMode(options.invert_colors))
    await dcs.write_command(di, dcs.SetPixelFormat(pixel_format))

    await dcs.write_command(di, dcs.ENTER_NORMAL_MODE)

    # Sleep Out may only follow an implicit Sleep In after 120 ms.
    await delay.delay_us(120_000)

    await dcs.write_command(di, dcs.EXIT_SLEEP_MODE)

    # Power-on sequence: 60 ms + 80 ms after SLPOUT.
    await delay.delay_us(140_000)

    await dcs.write_command(di, dcs.SET_DISPLAY_ON)
    return madctl


async def init_ili948x(
    di: Any, delay: Any, options: ModelOptions, pixel_format: PixelFormat
) -> SetAddressMode:
    """Common init for all ILI948x controllers and color formats."""
    madctl = SetAddressMode.from_options(options)
    await dcs.write_command(di, dcs.EXIT_SLEEP_MODE)
    await dcs.write_command(di, dcs.SetPixelFormat(pixel_format))
    await dcs.write_command(di, madctl)
    await dcs.write_command(di, dcs.SetInvertMode(options.invert_colors))

    await dcs.write_raw(di, 0xB6, [0b0000_0010, 0x02, 0x3B])  # display function control
    await dcs.write_command(di, dcs.ENTER_NORMAL_MODE)
    await dcs.write_command(di, dcs.SET_DISPLAY_ON)

    # DISPON needs time to settle before pixel data is sent.
    await delay.delay_us(120_000)
    return madctl