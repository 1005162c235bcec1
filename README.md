# hd44780

Helpers for checking an HD44780 character LCD controller that is driven over a
4-bit data bus, for example an FPGA design under simulation. The package
encodes the instructions such a controller should send, records snapshots of
its pins, and converts between time and clock cycles.

## Modules

### `hd44780.instructions`

This module encodes controller instructions as `Payload` objects. `Payload` is
a frozen dataclass with these fields:

- `rs`
- `high_bits`
- `low_bits`
- `only_high`, which marks payloads of which only the high nibble is sent.

`str(payload)` gives text such as `HighBits: 0000 LowBits: 1110 RS: 0 OnlyH: 0`.

The module has these builders:

- `send_payload(value, rs, only_high=False)`.
- `send_instruction(value)` sets RS low.
- `send_instruction_only_high(value)` sets RS low and sends only the high nibble.
- `send_data_payload(value)` sets RS high.
- Instructions: `display_clear()`, `return_home()`,
  `entry_mode_set(increment, shift)`, `display_control(display, cursor, blink)`,
  `cursor_display_shift(sc, rl)`, `function_set_half()` (high nibble only, used
  to enter 4-bit mode), `function_set()`, `set_cgram_address(address)` and
  `set_ddram_address(address)`.
- Line starts: `set_ddram_l1()` to `set_ddram_l4()`. They use the addresses
  0x00, 0x40, 0x14 and 0x54 of a 4 × 20 display.
- Bit helpers: `get_high_4bits(value)`, `get_low_4bits(value)` and
  `val_pos(pos, vals)`.

The configuration and the limits from the specification are module constants:

- `CONFIG_*`
- `POWERON_DELAY_MS`
- `INST_CLEAR_DISPLAY_MS`
- `INST_DELAY_US`
- `START_ADD_L1` to `START_ADD_L4`
- `LINE_START_LOCATIONS`

### `hd44780.state`

`HD44780State` is a dataclass that holds the values of the controller's ports
at one instant:

- `clk`, `rst`, `trg`
- `busy`, `busy_reset`, `busy_print`
- `e`, `rs`, `db`
- `idataaddr`, `idataaddr_rdy`, `idata`

Equality compares `rst`, `clk`, `trg`, `busy`, `e`, `rs` and `db`.
`compare_outputs(other)` compares only the pins driven towards the display,
which are E, RS and DB. `str(state)` gives a one-line dump of the state.

`compare_model_and_simulation(state, payload, value)` checks RS and DB of an
observed state against an expected payload and returns `True`. When they
differ it raises `ModelMismatchError`, a subclass of `AssertionError`.
`compare_model_and_simulation_high` and `compare_model_and_simulation_low`
check against the payload's high nibble or its low nibble.

### `hd44780.timing`

This module converts between time and clock cycles as integers. It assumes a
250 kHz interface clock (`FHZ`) and counts half cycles at `HFHZ`.

- `seconds_to_cycles`, `milliseconds_to_cycles`, `microseconds_to_cycles` and
  `nanoseconds_to_cycles` convert a time to clock cycles.
- The `*_to_half_cycles` functions convert a time to half cycles.
- `cycle_to_time`, `cycle_to_us` and `cycle_to_ms` convert a cycle count back
  to a time.
- `period_on_base(freq)` gives a period in units of the time base.

The millisecond, microsecond and nanosecond conversions raise `ValueError`
when the time is shorter than one cycle or half cycle. `MAX_COMMAND_WAIT_SENT`
is one second in half cycles.

## Example

```python
from hd44780.instructions import display_control
from hd44780.state import HD44780State, compare_model_and_simulation_high
from hd44780.timing import milliseconds_to_half_cycles

payload = display_control(1, 1, 0)
print(payload)            # HighBits: 0000 LowBits: 1110 RS: 0 OnlyH: 0

observed = HD44780State(e=0, rs=0, db=payload.high_bits)
compare_model_and_simulation_high(observed, payload)  # raises on mismatch

print(milliseconds_to_half_cycles(100))  # 50000
```

## What it does not do

The package does not simulate the controller and does not drive its clock.
It has no test bench that runs a design through its reset or printing
sequence. To use it, you produce the `HD44780State` snapshots yourself, for
example from your own simulator, and check them against the payloads and
timings given here.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```