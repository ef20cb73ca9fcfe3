"""Temperature readout from an RTD through an ADS1243 or MCP3201 front end."""

from __future__ import annotations

from operator import index as _as_index
from typing import Protocol

from rtdconv.ads1243 import SpiBus, to_voltage
from rtdconv.rtd import Rtd, RtdType

VREF = 2.5
"""ADS1243 reference voltage in volts."""
RREF = 4000.0
"""Reference resistor in the excitation path, in ohms."""
PT1000_THRESHOLD = 400.0
"""Resistances above this are taken to come from a Pt1000."""

MCP3201_VREF = 3.3
MCP3201_MAX_CODE = 4095
MCP3201_RREF = 100.0
MCP3201_ALPHA = 0.00385
MCP3201_GAIN = 5.0
MCP3201_EXCITATION = 1.0e-3


class ConversionSource(Protocol):
    def read_adc(self) -> int: ...


def read_rtd_resistance(
    adc: ConversionSource, vref: float = VREF, rref: float = RREF
) -> float:
    """Read one conversion and return the RTD resistance in ohms."""
    voltage = to_voltage(adc.read_adc(), vref)
    current = vref / rref
    return voltage / current


def select_rtd_type(resistance: float) -> RtdType:
    """Guess the sensor type from a measured resistance."""
    return RtdType.PT1000 if resistance > PT1000_THRESHOLD else RtdType.PT100


def measure_temperature(
    adc: ConversionSource, sensor: Rtd, vref: float = VREF, rref: float = RREF
) -> float:
    """Read the RTD, set the sensor's type from the reading and return degrees Celsius."""
    resistance = read_rtd_resistance(adc, vref, rref)
    sensor.rtd_type = select_rtd_type(resistance)
    return sensor.celsius(resistance)


def decode_mcp3201(high: int, low: int) -> int:
    """Extract the 12-bit result from the two bytes clocked out of an MCP3201."""
    bytes_ = [_as_index(high), _as_index(low)]
    if any(not 0 <= b <= 0xFF for b in bytes_):
        raise ValueError(f"MCP3201 bytes must be within 0..255, got {bytes_}")
    return (((bytes_[0] << 8) | bytes_[1]) >> 1) & 0x0FFF


def read_mcp3201(spi: SpiBus) -> int:
    """Clock one 12-bit conversion out of an MCP3201."""
    spi.cs_low()
    try:
        high = spi.transfer(0xFF)
        low = spi.transfer(0xFF)
    finally:
        spi.cs_high()
    return decode_mcp3201(high, low)


def calculate_temperature(adc_val: int) -> float:
    """Linear Pt100 temperature from a 12-bit MCP3201 reading of the amplified sensor voltage."""
    code = _as_index(adc_val)
    if not 0 <= code <= MCP3201_MAX_CODE:
        raise ValueError(f"MCP3201 code must be within 0..{MCP3201_MAX_CODE}, got {code}")
    v_adc = (code / MCP3201_MAX_CODE) * MCP3201_VREF
    v_pt = v_adc / MCP3201_GAIN
    r_pt = v_pt / MCP3201_EXCITATION
    return (r_pt - MCP3201_RREF) / (MCP3201_RREF * MCP3201_ALPHA)