"""Driver for the ADS1243 24-bit delta-sigma ADC over SPI."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from enum import IntEnum
from operator import index as _as_index

FULL_SCALE = 1 << 23
"""Magnitude of a full-scale conversion code."""

MAX_CODE = 0xFFFFFF
MAX_CHANNEL = 7

SETUP_DEFAULT = 0x04
MUX_DEFAULT = 0x01

RESET_DELAY = 0.1
"""Seconds to wait after a reset command."""
CONVERSION_DELAY = 0.003
"""Seconds to wait between the read-data command and clocking out the result."""
CALIBRATE_DELAY = 0.2
"""Seconds to wait after a self-calibration command."""


class Command(IntEnum):
    """Command opcodes understood by the converter."""

    RESET = 0xFE
    RDATA = 0x01
    RDATAC = 0x03
    SDATAC = 0x0F
    RREG = 0x10
    WREG = 0x50
    SELFCAL = 0xF0
    SELFOCAL = 0xF1
    SELFGCAL = 0xF2
    SYSOCAL = 0xF3
    SYSGCAL = 0xF4
    WAKEUP = 0xFD
    DSYNC = 0xFC
    SLEEP = 0xFD


class Register(IntEnum):
    """Addresses of the converter's registers."""

    SETUP = 0x00
    MUX = 0x01
    ACR = 0x02
    ODAC = 0x03
    DIO = 0x04
    DIR = 0x05
    IOCON = 0x06
    OCR0 = 0x07
    OCR1 = 0x08
    OCR2 = 0x09
    FSR0 = 0x0A
    FSR1 = 0x0B
    FSR2 = 0x0C


def _check_byte(value: int, what: str) -> int:
    byte = _as_index(value)
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"{what} must be a byte (0..255), got {byte}")
    return byte


class SpiBus:
    """SPI master with a software-driven, active-low chip-select line.

    ``exchange`` shifts one byte out and returns the byte shifted in.
    ``select``, if given, is called with the new level of the chip-select
    line (False for asserted, True for released).
    """

    def __init__(
        self,
        exchange: Callable[[int], int],
        select: Callable[[bool], None] | None = None,
    ) -> None:
        self._exchange = exchange
        self._select = select
        self.selected = False

    def transfer(self, data: int) -> int:
        """Send one byte and return the byte received at the same time."""
        return _as_index(self._exchange(_check_byte(data, "data"))) & 0xFF

    def cs_low(self) -> None:
        """Assert chip select."""
        self.selected = True
        if self._select is not None:
            self._select(False)

    def cs_high(self) -> None:
        """Release chip select."""
        self.selected = False
        if self._select is not None:
            self._select(True)


class Ads1243:
    """ADS1243 converter attached to an SPI bus."""

    def __init__(
        self, spi: SpiBus, delay: Callable[[float], None] = time.sleep
    ) -> None:
        self.spi = spi
        self.delay = delay

    @contextmanager
    def _selected(self) -> Iterator[None]:
        self.spi.cs_low()
        try:
            yield
        finally:
            self.spi.cs_high()

    def _send(self, *data: int) -> list[int]:
        with self._selected():
            return [self.spi.transfer(byte) for byte in data]

    def init(self) -> None:
        """Reset the converter and load the default setup and input mux."""
        self.spi.cs_high()
        self.reset()
        self.write_reg(Register.SETUP, SETUP_DEFAULT)
        self.write_reg(Register.MUX, MUX_DEFAULT)

    def reset(self) -> None:
        """Issue a reset and wait for the converter to come back."""
        self._send(Command.RESET)
        self.delay(RESET_DELAY)

    def write_reg(self, reg: int, value: int) -> None:
        """Write one register."""
        address = Register(reg)
        self._send(Command.WREG | address, 0x00, _check_byte(value, "value"))

    def read_reg(self, reg: int) -> int:
        """Read one register."""
        address = Register(reg)
        return self._send(Command.RREG | address, 0x00, 0x00)[-1]

    def read_adc(self) -> int:
        """Read the latest conversion as a raw 24-bit code."""
        with self._selected():
            self.spi.transfer(Command.RDATA)
            self.delay(CONVERSION_DELAY)
            code = 0
            for _ in range(3):
                code = (code << 8) | self.spi.transfer(0x00)
        return code

    def set_channel(self, channel: int) -> None:
        """Select the positive input channel (0..7) against AINCOM."""
        channel = _as_index(channel)
        if not 0 <= channel <= MAX_CHANNEL:
            raise ValueError(f"channel must be within 0..{MAX_CHANNEL}, got {channel}")
        self.write_reg(Register.MUX, (channel << 4) | 0x01)

    def calibrate(self) -> None:
        """Run a self-calibration and wait for it to finish."""
        self._send(Command.SELFCAL)
        self.delay(CALIBRATE_DELAY)


def to_voltage(adc_value: int, vref: float) -> float:
    """Convert a 24-bit two's-complement conversion code to volts."""
    code = _as_index(adc_value)
    if not 0 <= code <= MAX_CODE:
        raise ValueError(f"conversion code must be within 0..{MAX_CODE:#x}, got {code}")
    if code & 0x800000:
        magnitude = (-code) & MAX_CODE
        return -(magnitude * vref) / FULL_SCALE
    return (code * vref) / FULL_SCALE