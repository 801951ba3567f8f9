from dcsdisplay.errors import (
    ConfigurationError,
    DisplayError,
    InvalidDisplayOffsetError,
    InvalidDisplaySizeError,
    ResetPinError,
    UnsupportedInterfaceError,
)


def test_unsupported_interface_default_message():
    err = UnsupportedInterfaceError()
    assert str(err) == UnsupportedInterfaceError.default_message
    assert isinstance(err, ConfigurationError)
    assert isinstance(err, DisplayError)


def test_invalid_display_size_default_message():
    err = InvalidDisplaySizeError()
    assert str(err) == InvalidDisplaySizeError.default_message
    assert isinstance(err, ConfigurationError)
    assert isinstance(err, DisplayError)


def test_invalid_display_offset_default_message():
    err = InvalidDisplayOffsetError()
    assert str(err) == InvalidDisplayOffsetError.default_message
    assert isinstance(err, ConfigurationError)
    assert isinstance(err, DisplayError)


def test_custom_message_replaces_default():
    err = InvalidDisplaySizeError("custom text")
    assert str(err) == "custom text"
    assert err.args == ("custom text",)


def test_default_messages_are_distinct():
    messages = {
        str(UnsupportedInterfaceError()),
        str(InvalidDisplaySizeError()),
        str(InvalidDisplayOffsetError()),
    }
    assert len(messages) == 3
    assert all(messages)


def test_reset_pin_error_keeps_pin_error():
    cause = OSError("gpio busy")
    err = ResetPinError(cause)
    assert err.pin_error is cause
    assert "gpio busy" in str(err)
    assert isinstance(err, DisplayError)


def test_reset_pin_error_is_not_configuration_error():
    cause = RuntimeError("x")
    err = ResetPinError(cause)
    assert not isinstance(err, ConfigurationError)
    assert err.pin_error is cause