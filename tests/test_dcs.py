import pytest

from dcsdisplay.dcs import (
    ENTER_SLEEP_MODE,
    EXIT_SLEEP_MODE,
    SET_DISPLAY_ON,
    SOFT_RESET,
    WRITE_MEMORY_START,
    BitsPerPixel,
    PixelFormat,
    SetAddressMode,
    SetColumnAddress,
    SetInvertMode,
    SetPageAddress,
    SetPixelFormat,
    SetScrollArea,
    SetScrollStart,
    SetTearingEffect,
    write_command,
    write_raw,
)
from dcsdisplay.options import (
    ColorInversion,
    ColorOrder,
    HorizontalRefreshOrder,
    ModelOptions,
    RefreshOrder,
    TearingEffect,
    VerticalRefreshOrder,
)
from dcsdisplay.orientation import Orientation, Rotation


class RecordingInterface:
    def __init__(self):
        self.sent = []

    async def send_command(self, command, args):
        self.sent.append((command, bytes(args)))

    async def send_data(self, data):
        self.sent.append(("data", bytes(data)))


def test_madctl_bit_operations():
    madctl = (
        SetAddressMode()
        .with_color_order(ColorOrder.BGR)
        .with_refresh_order(
            RefreshOrder(
                VerticalRefreshOrder.BOTTOM_TO_TOP,
                HorizontalRefreshOrder.RIGHT_TO_LEFT,
            )
        )
        .with_orientation(Orientation().rotate(Rotation.DEG270))
    )
    assert madctl.params() == bytes([0b1011_1100])

    madctl = madctl.with_orientation(Orientation())
    assert madctl.params() == bytes([0b0001_1100])

    madctl = madctl.with_color_order(ColorOrder.RGB)
    assert madctl.params() == bytes([0b0001_0100])

    madctl = madctl.with_refresh_order(RefreshOrder())
    assert madctl.params() == bytes([0b0000_0000])


def test_madctl_instruction():
    assert SetAddressMode().instruction == 0x36


def test_madctl_from_parts_matches_chain():
    orientation = Orientation().rotate(Rotation.DEG90)
    madctl = SetAddressMode.from_parts(ColorOrder.BGR, orientation, RefreshOrder())
    assert madctl.params() == bytes([0b0110_1000])


def test_madctl_from_options():
    options = ModelOptions.with_all((240, 320), (0, 0))
    assert SetAddressMode.from_options(options).value == 0
    options.color_order = ColorOrder.BGR
    assert SetAddressMode.from_options(options).value == 0b0000_1000


def test_caset_fills_data_properly():
    caset = SetColumnAddress(0, 320)
    assert caset.instruction == 0x2A
    assert caset.params() == bytes([0, 0, 0x1, 0x40])


def test_raset_fills_data_properly():
    raset = SetPageAddress(0, 320)
    assert raset.instruction == 0x2B
    assert raset.params() == bytes([0, 0, 0x1, 0x40])


def test_address_out_of_range_raises():
    with pytest.raises(ValueError):
        SetColumnAddress(0, 0x10000).params()
    with pytest.raises(ValueError):
        SetPageAddress(-1, 10).params()


def test_set_invert_mode_chooses_correct_instruction():
    ste = SetInvertMode(ColorInversion.INVERTED)
    assert ste.instruction == 0x21
    assert ste.params() == b""
    assert SetInvertMode(ColorInversion.NORMAL).instruction == 0x20


def test_colmod_rgb565_is_16bit():
    colmod = SetPixelFormat(PixelFormat(BitsPerPixel.SIXTEEN, BitsPerPixel.SIXTEEN))
    assert colmod.params() == bytes([0b0101_0101])


def test_colmod_rgb666_is_18bit():
    colmod = SetPixelFormat(PixelFormat(BitsPerPixel.EIGHTEEN, BitsPerPixel.EIGHTEEN))
    assert colmod.params() == bytes([0b0110_0110])


def test_colmod_rgb888_is_24bit():
    colmod = SetPixelFormat(PixelFormat(BitsPerPixel.EIGHTEEN, BitsPerPixel.TWENTY_FOUR))
    assert colmod.params() == bytes([0b0110_0111])
    assert colmod.instruction == 0x3A


def test_pixel_format_as_u8():
    pf = PixelFormat(BitsPerPixel.SIXTEEN, BitsPerPixel.TWENTY_FOUR)
    assert pf.to_byte() == 0b0101_0111


def test_pixel_format_with_all():
    assert PixelFormat.with_all(BitsPerPixel.SIXTEEN) == PixelFormat(
        BitsPerPixel.SIXTEEN, BitsPerPixel.SIXTEEN
    )


def test_vscrdef_fills_buffer_properly():
    vscrdef = SetScrollArea(0, 320, 0)
    assert vscrdef.instruction == 0x33
    assert vscrdef.params() == bytes([0, 0, 0x1, 0x40, 0, 0])


def test_vscad_fills_offset_properly():
    vscad = SetScrollStart(320)
    assert vscad.instruction == 0x37
    assert vscad.params() == bytes([0x1, 0x40])


def test_set_tearing_effect_both_fills_param_properly():
    ste = SetTearingEffect(TearingEffect.HORIZONTAL_AND_VERTICAL)
    assert ste.instruction == 0x35
    assert ste.params() == bytes([0x1])


def test_set_tearing_effect_vertical():
    ste = SetTearingEffect(TearingEffect.VERTICAL)
    assert ste.instruction == 0x35
    assert ste.params() == bytes([0x0])


def test_set_tearing_effect_off_fills_param_properly():
    ste = SetTearingEffect(TearingEffect.OFF)
    assert ste.instruction == 0x34
    assert ste.params() == b""


@pytest.mark.parametrize(
    "command, code",
    [
        (SOFT_RESET, 0x01),
        (ENTER_SLEEP_MODE, 0x10),
        (EXIT_SLEEP_MODE, 0x11),
        (SET_DISPLAY_ON, 0x29),
        (WRITE_MEMORY_START, 0x2C),
    ],
)
def test_basic_commands(command, code):
    assert command.instruction == code
    assert command.params() == b""


@pytest.mark.asyncio
async def test_write_command_sends_instruction_and_params():
    di = RecordingInterface()
    await write_command(di, SetColumnAddress(0, 320))
    await write_command(di, SOFT_RESET)
    assert di.sent == [(0x2A, bytes([0, 0, 1, 0x40])), (0x01, b"")]


@pytest.mark.asyncio
async def test_write_raw_sends_bytes():
    di = RecordingInterface()
    await write_raw(di, 0xB6, [0x00, 0x20])
    await write_raw(di, 0xFE)
    assert di.sent == [(0xB6, b"\x00\x20"), (0xFE, b"")]