"""Snapshot of the controller's signals and checks against the reference model."""

from __future__ import annotations

from dataclasses import dataclass

from hd44780.instructions import Payload


@dataclass(eq=False)
class HD44780State:
    """Values of the controller's ports at one instant."""

    clk: int = 0
    rst: int = 0
    trg: int = 0
    busy: int = 0
    busy_reset: int = 0
    busy_print: int = 0
    e: int = 0
    rs: int = 0
    db: int = 0
    idataaddr: int = 0
    idataaddr_rdy: int = 0
    idata: int = 0

    def _key(self) -> tuple[int, ...]:
        return (self.rst, self.clk, self.trg, self.busy, self.e, self.rs, self.db)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HD44780State):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    def compare_outputs(self, other: HD44780State) -> bool:
        """Compare only the pins driven towards the display: E, RS and DB."""
        return (self.e, self.rs, self.db) == (other.e, other.rs, other.db)

    def __str__(self) -> str:
        # Once DB is shown in hex, the remaining plain numbers stay in hex.
        return (
            f" Rst: {self.rst & 0xFF}"
            f" Clk: {self.clk & 0xFF}"
            f" Trg: {self.trg & 0xFF}"
            f" Busy: {self.busy & 0xFF}"
            f" E: {self.e & 0xFF}"
            f" RS: {self.rs & 0xFF}"
            f" DB (h): {self.db & 0xFF:x}"
            f" DB (b): {self.db & 0xF:04b}"
            f" IData: {self.idata & 0xFF:08b}"
            f" IDataAddr: {self.idataaddr & 0xFF:x}"
            f" IDataAddrRdy: {self.idataaddr_rdy & 0xFF:x}"
        )


class ModelMismatchError(AssertionError):
    """The simulated outputs differ from what the instruction model expects."""

    def __init__(self, state: HD44780State, payload: Payload, value: int) -> None:
        self.state = state
        self.payload = payload
        self.value = value
        super().__init__(
            "Model and simulation differ"
            f"\n- Model RS: {int(payload.rs)} DB: {value & 0xFF}"
            f"\n- Simul RS: {state.rs & 0xFF} DB: {state.db & 0xFF}"
        )


def compare_model_and_simulation(
    state: HD44780State, payload: Payload, value: int
) -> bool:
    """Check RS and DB of ``state`` against ``payload`` carrying ``value``.

    Raises :class:`ModelMismatchError` when they differ.
    """
    if state.rs != int(payload.rs) or state.db != value:
        raise ModelMismatchError(state, payload, value)
    return True


def compare_model_and_simulation_high(state: HD44780State, payload: Payload) -> bool:
    """Check the state against the payload's high nibble."""
    return compare_model_and_simulation(state, payload, payload.high_bits)


def compare_model_and_simulation_low(state: HD44780State, payload: Payload) -> bool:
    """Check the state against the payload's low nibble."""
    return compare_model_and_simulation(state, payload, payload.low_bits)