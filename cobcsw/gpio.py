"""GPIO pins of the on-board computer and a single-pin driver."""

from __future__ import annotations

import enum
from typing import Optional, Protocol


class Pin(enum.IntEnum):
    """MCU pin names and their global GPIO numbers."""

    PA0 = 0
    PA1 = 1
    PA2 = 2
    PA3 = 3
    PA5 = 5
    PA6 = 6
    PA7 = 7
    PA8 = 8
    PA9 = 9
    PA10 = 10
    PA11 = 11
    PA12 = 12
    PA13 = 13
    PA14 = 14
    PA15 = 15

    PB0 = 16
    PB1 = 17
    PB3 = 19
    PB4 = 20
    PB5 = 21
    PB6 = 22
    PB7 = 23
    PB8 = 24
    PB9 = 25
    PB12 = 28
    PB13 = 29
    PB14 = 30
    PB15 = 31

    PC0 = 32
    PC1 = 33
    PC2 = 34
    PC3 = 35
    PC4 = 36
    PC5 = 37
    PC6 = 38
    PC7 = 39
    PC8 = 40
    PC9 = 41
    PC10 = 42
    PC11 = 43
    PC12 = 44
    PC13 = 45
    PC14 = 46
    PC15 = 47

    PD2 = 50


# Board wiring
LED_PIN = Pin.PA13

EPS_BATTERY_GOOD_PIN = Pin.PC15
EPS_CHARGING_PIN = Pin.PC14

EDU_ENABLED_PIN = Pin.PB0
EDU_HEARTBEAT_PIN = Pin.PC5
EDU_UPDATE_PIN = Pin.PB1

EDU_UART_INDEX = 1
EDU_UART_RX_PIN = Pin.PA10
EDU_UART_TX_PIN = Pin.PA15

UCI_UART_INDEX = 2
UCI_UART_TX_PIN = Pin.PA2
UCI_UART_RX_PIN = Pin.PA3

FLASH_SPI_INDEX = 1
FLASH_SPI_SCK_PIN = Pin.PA5
FLASH_SPI_MISO_PIN = Pin.PA6
FLASH_SPI_MOSI_PIN = Pin.PA7
FLASH_CS_PIN = Pin.PB9
FLASH_WRITE_PROTECTION_PIN = Pin.PC4

FRAM_SPI_INDEX = 2
FRAM_SPI_SCK_PIN = Pin.PC7
FRAM_SPI_MISO_PIN = Pin.PC2
FRAM_SPI_MOSI_PIN = Pin.PC3
FRAM_CS_PIN = Pin.PB9  # same as FLASH_CS_PIN on purpose

COBC_SPI_INDEX = 3
COBC_SPI_SCK_PIN = Pin.PC10
COBC_SPI_MISO_PIN = Pin.PC11
COBC_SPI_MOSI_PIN = Pin.PC12

RF_SPI_INDEX = 4
RF_SPI_SCK_PIN = Pin.PB13
RF_SPI_MISO_PIN = Pin.PA11
RF_SPI_MOSI_PIN = Pin.PA1
RF_CS_PIN = Pin.PA8
RF_NIRQ_PIN = Pin.PB6
RF_SDN_PIN = Pin.PB14
RF_GPIO0_PIN = Pin.PC6
RF_GPIO1_PIN = Pin.PC8


class PinDirection(enum.Enum):
    IN = "in"
    OUT = "out"


class PinState(enum.Enum):
    SET = "set"
    RESET = "reset"


class GpioHardware(Protocol):
    """Low-level access to a group of GPIO pins."""

    def reset(self) -> None: ...

    def init(self, is_output: bool, num_pins: int, init_value: int) -> None: ...

    def set_pins(self, value: int) -> None: ...

    def read_pins(self) -> int: ...


class SimulatedGpio:
    """In-memory GPIO that behaves like the hardware driver.

    Output pins read back what was written; input pins read what was applied
    with :meth:`drive`.
    """

    def __init__(self, pin: Pin | int) -> None:
        self.pin = Pin(pin)
        self.is_output = False
        self.num_pins = 1
        self._value = 0
        self._input_level = 0

    @property
    def _mask(self) -> int:
        return (1 << self.num_pins) - 1

    def reset(self) -> None:
        """Return to the unconfigured state: input, output latch cleared."""
        self.is_output = False
        self.num_pins = 1
        self._value = 0

    def init(self, is_output: bool, num_pins: int, init_value: int) -> None:
        """Configure direction, width and initial output value."""
        if num_pins < 1:
            raise ValueError(f"num_pins must be positive: {num_pins}")
        self.is_output = bool(is_output)
        self.num_pins = num_pins
        self._value = init_value & self._mask

    def set_pins(self, value: int) -> None:
        """Drive output pins; ignored while configured as input."""
        if self.is_output:
            self._value = value & self._mask

    def read_pins(self) -> int:
        """Read the current level of the pins."""
        if self.is_output:
            return self._value
        return self._input_level & self._mask

    def drive(self, value: int) -> None:
        """Apply an external level to the pins (used when they are inputs)."""
        self._input_level = value


class GpioPin:
    """A single GPIO pin."""

    def __init__(self, pin: Pin | int, hardware: Optional[GpioHardware] = None) -> None:
        self.pin = Pin(pin)
        self.hardware: GpioHardware = hardware if hardware is not None else SimulatedGpio(self.pin)

    def direction(self, pin_direction: PinDirection) -> None:
        """Configure the pin as input or output, initially low."""
        self.hardware.reset()
        self.hardware.init(pin_direction is PinDirection.OUT, 1, 0)

    def set(self) -> None:
        self.hardware.set_pins(1)

    def reset(self) -> None:
        self.hardware.set_pins(0)

    def read(self) -> PinState:
        return PinState.RESET if self.hardware.read_pins() == 0 else PinState.SET