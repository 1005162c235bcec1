"""Instruction encoding, pin-state snapshots and timing helpers for HD44780 controllers."""

__version__ = "0.1.0"
__all__ = ["instructions", "state", "timing"]