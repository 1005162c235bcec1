"""Integer conversions between time and controller clock cycles."""

from __future__ import annotations

MS = 1_000
US = 1_000_000
NS = 1_000_000_000
TIME_BASE = NS
FHZ = 250_000
HFHZ = 2 * FHZ


def cycle_to_time(cycle: int) -> int:
    """Whole seconds elapsed after ``cycle`` clock cycles."""
    return cycle // FHZ


def cycle_to_us(cycle: int) -> int:
    """Microseconds elapsed after ``cycle`` clock cycles."""
    return cycle_to_time(cycle * US)


def cycle_to_ms(cycle: int) -> int:
    """Milliseconds elapsed after ``cycle`` clock cycles."""
    return cycle_to_time(cycle * MS)


def period_on_base(freq: int) -> int:
    """Period of ``freq`` expressed in units of the time base."""
    return TIME_BASE // freq


def _nonzero(value: int, time: int, unit: str) -> int:
    if not value:
        raise ValueError(f"{time} {unit} is shorter than one cycle")
    return value


def seconds_to_cycles(time: int) -> int:
    """Clock cycles in ``time`` seconds."""
    return time * FHZ


def milliseconds_to_cycles(time: int) -> int:
    """Clock cycles in ``time`` milliseconds; raises if that is none."""
    return _nonzero(seconds_to_cycles(time) // MS, time, "ms")


def microseconds_to_cycles(time: int) -> int:
    """Clock cycles in ``time`` microseconds; raises if that is none."""
    return _nonzero(seconds_to_cycles(time) // US, time, "us")


def nanoseconds_to_cycles(time: int) -> int:
    """Clock cycles in ``time`` nanoseconds; raises if that is none."""
    return _nonzero(seconds_to_cycles(time) // NS, time, "ns")


def seconds_to_half_cycles(time: int) -> int:
    """Clock half cycles in ``time`` seconds."""
    return time * HFHZ


def milliseconds_to_half_cycles(time: int) -> int:
    """Clock half cycles in ``time`` milliseconds; raises if that is none."""
    return _nonzero(seconds_to_half_cycles(time) // MS, time, "ms")


def microseconds_to_half_cycles(time: int) -> int:
    """Clock half cycles in ``time`` microseconds; raises if that is none."""
    return _nonzero(seconds_to_half_cycles(time) // US, time, "us")


def nanoseconds_to_half_cycles(time: int) -> int:
    """Clock half cycles in ``time`` nanoseconds; raises if that is none."""
    return _nonzero(seconds_to_half_cycles(time) // NS, time, "ns")


PERIOD_FHZ = period_on_base(FHZ)
PERIOD_HFHZ = period_on_base(HFHZ)
MAX_COMMAND_WAIT_SENT = seconds_to_half_cycles(1)