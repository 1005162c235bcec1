"""HD44780 instruction encoding for a 4-bit data bus.

Every instruction or data byte is carried as a :class:`Payload`. The payload
holds the two nibbles sent over DB7..DB4 and the state of the RS line.
"""

from __future__ import annotations

from dataclasses import dataclass

# Hardware configuration of the unit.
CONFIG_DL_DATA_LENGTH = 0  # 0: 4-bit bus, 1: 8-bit bus
CONFIG_N_DISPLAY_LINES = 1  # 0: one line, 1: two lines
CONFIG_F_CHARACTER_FONT = 0

# Display configuration.
CONFIG_D_DISPLAY_ONOFF = 1
CONFIG_C_CURSOR_ONOFF = 1
CONFIG_C_CURSOR_BLINK = 0

# Cursor configuration.
CONFIG_ID_INCREMENT_DIRECTION = 1  # 0: left, 1: right
CONFIG_SHIFT_CURSOR = 1

# Limits of the official specification.
MAX_FREQ_HZ = 250_000
MIN_PERIOD_US = 1_000_000 // MAX_FREQ_HZ
POWERON_DELAY_MS = 100
INST_CLEAR_DISPLAY_MS = 10
INST_DELAY_US = 80

# Display geometry.
NROW = 4
ROW_LENGTH = 21
ROW_LENGTH_ACTUAL = 20

START_ADD_L1 = 0x00
START_ADD_L2 = 0x40
START_ADD_L3 = START_ADD_L1 + ROW_LENGTH_ACTUAL
START_ADD_L4 = START_ADD_L2 + ROW_LENGTH_ACTUAL
LINE_START_LOCATIONS = (START_ADD_L1, START_ADD_L2, START_ADD_L3, START_ADD_L4)

PIN_COUNT = 8 if CONFIG_DL_DATA_LENGTH == 1 else 4


def get_high_4bits(value: int) -> int:
    """Return bits 7..4 of ``value`` as a nibble."""
    return (value & 0xF0) >> 4


def get_low_4bits(value: int) -> int:
    """Return bits 3..0 of ``value``."""
    return value & 0x0F


def val_pos(pos: int, vals: int) -> int:
    """Return the bit of ``vals`` at ``pos`` as 1 or 0."""
    return 1 if vals & (1 << pos) else 0


@dataclass(frozen=True)
class Payload:
    """A byte split into the nibbles sent over a 4-bit bus.

    ``only_high`` marks payloads of which only the high nibble is sent,
    as in the switch from 8-bit to 4-bit mode.
    """

    rs: bool
    high_bits: int
    low_bits: int
    only_high: bool = False

    def __str__(self) -> str:
        return (
            f"HighBits: {self.high_bits & 0xF:04b}"
            f" LowBits: {self.low_bits & 0xF:04b}"
            f" RS: {int(self.rs)}"
            f" OnlyH: {int(self.only_high)}"
        )


def send_payload(value: int, rs: bool, only_high: bool = False) -> Payload:
    """Build the payload for ``value`` with the given RS line."""
    return Payload(
        rs=bool(rs),
        high_bits=get_high_4bits(value),
        low_bits=get_low_4bits(value),
        only_high=bool(only_high),
    )


def send_instruction(value: int) -> Payload:
    """Build an instruction payload (RS low)."""
    return send_payload(value, False)


def send_instruction_only_high(value: int) -> Payload:
    """Build an instruction payload of which only the high nibble is sent."""
    return send_payload(value, False, True)


def send_data_payload(value: int) -> Payload:
    """Build a data payload (RS high)."""
    return send_payload(value, True)


def display_clear() -> Payload:
    """Clear display instruction."""
    return send_instruction(0x01)


def return_home() -> Payload:
    """Return home instruction."""
    return send_instruction(0x02)


def entry_mode_set(increment: int, shift: int) -> Payload:
    """Entry mode set: cursor direction and shift after write."""
    value = 0x04 | (increment & 0x01) << 1 | (shift & 0x01)
    return send_instruction(value)


def display_control(display: int, cursor: int, blink: int) -> Payload:
    """Display on/off control: display, cursor and cursor blink."""
    value = 0x08 | (display & 0x01) << 2 | (cursor & 0x01) << 1 | (blink & 0x01)
    return send_instruction(value)


def cursor_display_shift(sc: int, rl: int) -> Payload:
    """Cursor or display shift.

    ``sc`` selects display (1) or cursor (0); ``rl`` selects right (1) or
    left (0).
    """
    value = 0x10 | sc << 3 | rl << 2
    return send_instruction(value)


def _function_set_value() -> int:
    return (
        0x20
        | CONFIG_DL_DATA_LENGTH << 4
        | CONFIG_N_DISPLAY_LINES << 3
        | CONFIG_F_CHARACTER_FONT << 2
    )


def function_set_half() -> Payload:
    """Function set sent as a high nibble only, to enter 4-bit mode."""
    return send_instruction_only_high(_function_set_value())


def function_set() -> Payload:
    """Function set: bus width, number of lines and font."""
    return send_instruction(_function_set_value())


def set_cgram_address(address: int) -> Payload:
    """Set the CGRAM address (6 bits)."""
    return send_instruction(0x40 | (address & 0x3F))


def set_ddram_address(address: int) -> Payload:
    """Set the DDRAM address (7 bits)."""
    return send_instruction(0x80 | (address & 0x7F))


def set_ddram_l1() -> Payload:
    """Move to the start of the first line."""
    return set_ddram_address(START_ADD_L1)


def set_ddram_l2() -> Payload:
    """Move to the start of the second line."""
    return set_ddram_address(START_ADD_L2)


def set_ddram_l3() -> Payload:
    """Move to the start of the third line."""
    return set_ddram_address(START_ADD_L3)


def set_ddram_l4() -> Payload:
    """Move to the start of the fourth line."""
    return set_ddram_address(START_ADD_L4)