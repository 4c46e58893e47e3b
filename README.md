# cobcsw

Building blocks for the software of a small satellite's on-board computer,
usable and testable on an ordinary machine. The package has no runtime
dependencies.

## Modules

### `cobcsw.serial`

Fixed-size, little-endian (de)serialization.

- `Primitive` describes a scalar by a `struct` format character. Ready-made
  kinds: `BYTE`, `CHAR`, `BOOL`, `INT8`, `UINT8`, `INT16`, `UINT16`, `INT32`,
  `UINT32`, `INT64`, `UINT64`, `FLOAT`, `DOUBLE`. `CHAR` values are
  one-character strings.
- `Layout` describes a record: a tuple of `(name, kind)` fields serialized one
  after another. Field values are taken from attributes or mapping keys, and
  decoded fields are passed as keyword arguments to `factory` (`dict` by
  default).
- `serialize(value, kind)` and `deserialize(kind, data)` work on whole
  buffers. `deserialize` requires exactly `serial_size(kind)` bytes.
- `serialize_to(buffer, offset, value, kind)` writes into a `bytearray` and
  returns the next offset. `deserialize_from(data, offset, kind)` returns
  `(value, next_offset)`.
- `serial_size(kind)` returns 0 for anything that is not a `Primitive` or a
  `Layout`. `total_serial_size(*kinds)` sums the sizes.
  `is_trivially_serializable(kind)` is true only for a `Primitive`.
- `byte(number)` keeps the lowest eight bits of a non-negative number.

Wrong buffer lengths and values out of range raise `ValueError`. Kinds that
cannot be serialized raise `TypeError`.

### `cobcsw.crc32`

`crc32(data)` returns the CRC-32/MPEG-2 checksum: polynomial `0x04C11DB7`,
initial value `0xFFFFFFFF`, no reflection and no final XOR.

### `cobcsw.command_parser`

- `CommandId`: `TURN_EDU_ON` (`"1"`), `TURN_EDU_OFF` (`"2"`) and
  `BUILD_QUEUE` (`"4"`).
- `GsCommandHeader`: a frozen dataclass with the fields `start_character`,
  `utc`, `command_id` and `length`, laid out as char, int32, int8 and int16
  (8 bytes). Read one with `GsCommandHeader.deserialize(data)` or
  `GsCommandHeader.deserialize_from(data, offset)`.

### `cobcsw.time_utils`

The on-board clock counts nanoseconds since 2000-01-01.

- `unix_to_rodos_time(seconds)` converts 32-bit Unix seconds to that scale.
  Values outside the 32-bit range raise `ValueError`.
- `unix_utc(rodos_utc)` converts back to whole Unix seconds, wrapped to
  32 bits.
- `format_utc(rodos_utc)` returns text of the form
  `DateUTC(DD/MM/YYYY HH:MIN:SS) : 01/01/2000 00:00:00`.
  `print_formatted_utc(rodos_utc)` prints that text.

### `cobcsw.communication`

Helpers for any object with `write(data) -> int`, `read(size) -> bytes` and
`write_read(data, capacity) -> bytes`:

- `write_to(interface, data)` calls `write` until all of the data has been
  sent. A negative return value raises `OSError`. Strings are sent as UTF-8.
- `read_from(interface, size)` calls `read` until exactly `size` bytes have
  arrived.
- `write_to_read_from(interface, message, capacity)` returns a
  `WriteReadResult(n_received, answer)`. The answer is cut at the first
  NUL byte.
- `transfer(interface, data)` sends the bytes and returns as many bytes as
  were sent. Missing bytes are filled with zeros.

### `cobcsw.gpio`

- `Pin` names the MCU pins (`PA0` … `PD2`) with their global GPIO numbers.
- Module constants give the board wiring, for example `LED_PIN`,
  `EDU_ENABLED_PIN`, `FLASH_CS_PIN`, and the UART and SPI indices and pins.
- `GpioPin(pin, hardware=None)` provides `direction(PinDirection.IN/OUT)`,
  `set()`, `reset()` and `read() -> PinState`.
- `SimulatedGpio` is the in-memory driver used when no hardware object is
  given. Output pins read back what was written. Input pins read the level
  applied with `drive(value)`.

### `cobcsw.topics`

- `Topic(topic_id, name)` has `subscribe(buffer)`, which returns the buffer,
  and `publish(value)`, which returns the number of buffers that received the
  value.
- `CommBuffer(default)` holds the latest value and provides thread-safe
  `put` and `get`.
- Predefined topics: `edu_is_alive_topic`, with three subscribed buffers, and
  `next_program_start_delay_topic`, with one. The thread priority constants
  are `EDU_POWER_MANAGEMENT_THREAD_PRIORITY` and related names.

## Example

```python
from cobcsw.crc32 import crc32
from cobcsw.serial import INT32, deserialize, serialize

data = serialize(-2, INT32)            # b'\xfe\xff\xff\xff'
assert deserialize(INT32, data) == -2
print(hex(crc32(b"123456789")))        # 0x376e6e7
```

## What it does not do

The package contains no drivers for real UARTs, SPI buses or GPIO
controllers. Communication helpers and `GpioPin` need an object that you
supply, or they use `SimulatedGpio`. The package also has no command-line
program and no command-processing loop: it parses command headers but does
not execute commands.

## Running the tests

```
pip install -e .[test]
pytest
```