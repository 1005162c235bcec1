import pytest

from hd44780 import instructions as ins


def _byte(payload):
    return payload.high_bits << 4 | payload.low_bits


@pytest.mark.parametrize("value", range(256))
def test_nibbles_round_trip(value):
    high = ins.get_high_4bits(value)
    low = ins.get_low_4bits(value)
    assert 0 <= high <= 0xF
    assert 0 <= low <= 0xF
    assert high << 4 | low == value


def test_nibbles_ignore_higher_bits():
    assert ins.get_high_4bits(0x1F0) == ins.get_high_4bits(0xF0)
    assert ins.get_low_4bits(0x1F) == ins.get_low_4bits(0x0F)


@pytest.mark.parametrize("value", [0, 1, 0x55, 0xAA, 0x80, 0xFF])
def test_val_pos_reconstructs_value(value):
    bits = [ins.val_pos(pos, value) for pos in range(8)]
    assert set(bits) <= {0, 1}
    assert sum(bit << pos for pos, bit in enumerate(bits)) == value


def test_send_payload_flags():
    instruction = ins.send_instruction(0x3C)
    data = ins.send_data_payload(0x3C)
    only_high = ins.send_instruction_only_high(0x3C)
    assert instruction.rs is False and instruction.only_high is False
    assert data.rs is True and data.only_high is False
    assert only_high.rs is False and only_high.only_high is True
    assert _byte(instruction) == _byte(data) == _byte(only_high) == 0x3C


def test_send_payload_default_only_high():
    assert ins.send_payload(0x41, True) == ins.send_data_payload(0x41)


@pytest.mark.parametrize("char", "1234567890abcdfefghiJKLMNOPQRSTUVWXYZ>)]")
def test_data_payload_carries_character(char):
    payload = ins.send_data_payload(ord(char))
    assert payload.rs is True
    assert chr(_byte(payload)) == char


def test_display_clear_and_return_home():
    assert _byte(ins.display_clear()) == 0x01
    assert _byte(ins.return_home()) == 0x02
    assert ins.display_clear().rs is False


@pytest.mark.parametrize("increment", [0, 1])
@pytest.mark.parametrize("shift", [0, 1])
def test_entry_mode_set_bits(increment, shift):
    value = _byte(ins.entry_mode_set(increment, shift))
    assert value & 0xFC == 0x04
    assert ins.val_pos(1, value) == increment
    assert ins.val_pos(0, value) == shift


def test_entry_mode_set_masks_arguments():
    assert ins.entry_mode_set(3, 5) == ins.entry_mode_set(1, 1)
    assert ins.entry_mode_set(2, 4) == ins.entry_mode_set(0, 0)


@pytest.mark.parametrize("display", [0, 1])
@pytest.mark.parametrize("cursor", [0, 1])
@pytest.mark.parametrize("blink", [0, 1])
def test_display_control_bits(display, cursor, blink):
    value = _byte(ins.display_control(display, cursor, blink))
    assert value & 0xF8 == 0x08
    assert ins.val_pos(2, value) == display
    assert ins.val_pos(1, value) == cursor
    assert ins.val_pos(0, value) == blink


def test_display_control_masks_arguments():
    assert ins.display_control(3, 2, 7) == ins.display_control(1, 0, 1)


@pytest.mark.parametrize("sc", [0, 1])
@pytest.mark.parametrize("rl", [0, 1])
def test_cursor_display_shift_bits(sc, rl):
    value = _byte(ins.cursor_display_shift(sc, rl))
    assert value & 0xF0 == 0x10
    assert ins.val_pos(3, value) == sc
    assert ins.val_pos(2, value) == rl
    assert value & 0x03 == 0


def test_function_set_matches_configuration():
    full = ins.function_set()
    half = ins.function_set_half()
    value = _byte(full)
    assert value & 0xE0 == 0x20
    assert ins.val_pos(4, value) == ins.CONFIG_DL_DATA_LENGTH
    assert ins.val_pos(3, value) == ins.CONFIG_N_DISPLAY_LINES
    assert ins.val_pos(2, value) == ins.CONFIG_F_CHARACTER_FONT
    assert half.only_high is True and full.only_high is False
    assert (half.high_bits, half.low_bits) == (full.high_bits, full.low_bits)


@pytest.mark.parametrize("address", [0, 1, 0x15, 0x3F, 0x40, 0x7F, 0xFF])
def test_set_cgram_address(address):
    value = _byte(ins.set_cgram_address(address))
    assert value & 0xC0 == 0x40
    assert value & 0x3F == address & 0x3F


@pytest.mark.parametrize("address", [0, 1, 0x27, 0x40, 0x67, 0x7F, 0xFF])
def test_set_ddram_address(address):
    payload = ins.set_ddram_address(address)
    value = _byte(payload)
    assert payload.rs is False
    assert value & 0x80 == 0x80
    assert value & 0x7F == address & 0x7F


def test_line_addresses():
    assert ins.START_ADD_L1 == 0x00
    assert ins.START_ADD_L2 == 0x40
    assert ins.START_ADD_L3 - ins.START_ADD_L1 == ins.ROW_LENGTH_ACTUAL
    assert ins.START_ADD_L4 - ins.START_ADD_L2 == ins.ROW_LENGTH_ACTUAL
    lines = [ins.set_ddram_l1(), ins.set_ddram_l2(), ins.set_ddram_l3(), ins.set_ddram_l4()]
    for payload, start in zip(lines, ins.LINE_START_LOCATIONS):
        assert payload == ins.set_ddram_address(start)
    assert len({_byte(p) for p in lines}) == 4


def test_payload_str():
    assert str(ins.display_clear()) == "HighBits: 0000 LowBits: 0001 RS: 0 OnlyH: 0"


def test_payload_str_reflects_flags():
    text = str(ins.function_set_half())
    assert text.endswith("RS: 0 OnlyH: 1")
    data_text = str(ins.send_data_payload(ord("A")))
    assert "RS: 1" in data_text


def test_payload_is_immutable():
    payload = ins.display_clear()
    with pytest.raises(AttributeError):
        payload.rs = True
    assert payload.rs is False
    assert payload == ins.display_clear()


def test_pin_count_matches_data_length():
    assert ins.PIN_COUNT == (8 if ins.CONFIG_DL_DATA_LENGTH == 1 else 4)
    payload = ins.send_data_payload(0xFF)
    assert payload.high_bits == (1 << ins.PIN_COUNT) - 1
    assert payload.low_bits == (1 << ins.PIN_COUNT) - 1