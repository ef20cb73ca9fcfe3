"""Platinum RTD (Pt100 / Pt1000) resistance and temperature conversions."""

from __future__ import annotations

import math
from bisect import bisect_left
from enum import IntEnum
from itertools import accumulate
from operator import index as _as_index

_PT100_START_X100 = 1852

# Step in hundredths of an ohm from one whole degree to the next, from
# -200 C up to 850 C.  Ten steps per line, the first line has nine.
_PT100_STEPS_X100 = """
44 43 43 43 43 43 43 43 43
43 43 43 43 43 42 42 43 43 42
43 42 43 42 43 42 43 42 42 43
42 42 42 43 42 42 41 42 42 42
42 42 42 42 42 41 42 42 42 42
41 42 42 41 42 41 42 42 41 41
42 41 42 41 41 42 40 41 42 41
41 41 41 41 41 42 41 41 41 41
41 41 40 41 41 41 41 41 41 40
41 41 40 41 41 40 41 41 40 41
41 41 40 41 39 42 40 41 40 41
39 40 41 40 40 40 41 40 40 40
41 40 40 40 40 40 40 40 40 40
40 40 40 40 40 40 40 40 40 40
40 40 40 39 40 40 40 39 40 40
40 39 40 40 39 40 40 39 40 40
39 40 39 40 39 40 39 40 39 40
39 40 39 39 40 39 40 39 39 40
39 39 40 39 39 39 40 39 39 39
40 39 39 39 39 39 40 39 39 39
39 39 39 39 39 39 39 39 39 39
39 39 39 39 39 39 39 39 39 38
39 39 39 39 39 38 39 39 39 38
39 39 39 38 39 39 38 39 39 38
39 39 38 39 38 39 38 39 38 39
39 38 38 39 38 39 38 39 38 39
38 38 39 38 38 40 38 38 39 38
38 38 39 38 38 38 39 38 38 38
38 38 39 38 38 38 38 38 38 38
38 38 38 38 38 38 38 38 38 38
38 38 38 38 38 36 38 38 38 38
38 37 38 38 38 38 38 38 38 37
38 38 37 38 38 37 38 38 37 38
37 38 37 38 38 37 38 37 38 37
37 37 37 39 37 38 37 38 37 38
37 38 37 37 38 37 36 38 37 37
37 38 37 37 37 37 37 38 37 37
37 37 37 37 37 37 38 37 37 37
37 37 37 37 37 37 36 37 37 37
37 37 37 36 37 37 38 36 37 37
37 37 36 37 37 37 36 37 37 36
37 37 36 37 36 37 37 36 37 36
37 36 37 36 37 36 37 36 37 36
37 36 36 37 36 36 37 36 36 37
36 36 37 36 36 36 38 36 36 36
36 37 36 36 36 35 36 36 36 37
36 36 36 36 36 36 36 36 36 36
36 36 36 35 36 36 36 36 36 36
36 35 36 36 36 37 35 36 36 36
35 36 36 35 36 36 35 36 36 35
36 35 36 36 35 36 36 36 35 36
35 36 35 36 35 36 34 35 36 35
36 35 35 36 35 35 36 35 35 35
36 35 35 35 36 36 35 35 35 35
36 35 35 35 35 35 35 35 35 35
36 35 35 35 35 35 34 35 35 35
35 35 35 35 34 35 35 35 35 35
35 35 35 35 34 35 35 35 34 35
35 34 35 35 34 35 34 35 35 34
35 34 35 34 35 34 35 34 35 34
35 34 35 34 34 35 34 35 34 34
35 36 32 34 35 34 35 35 34 34
34 34 35 34 34 34 34 34 35 34
34 34 34 34 34 34 34 34 34 34
34 34 34 34 34 34 35 34 33 34
34 34 34 34 34 33 34 34 34 33
34 34 34 33 34 34 33 34 34 33
34 34 33 34 33 34 34 33 34 33
34 33 34 33 34 33 35 33 33 34
33 34 33 33 34 33 33 34 33 33
34 33 33 33 34 33 33 33 33 34
33 33 33 33 33 33 35 33 33 33
33 33 33 33 33 33 33 33 33 33
33 33 33 32 33 33 34 33 33 33
32 33 33 33 33 32 33 33 33 32
33 33 32 33 33 32 33 33 32 33
32 33 33 32 33 32 33 32 33 32
33 32 33 32 32 33 32 33 32 32
33 32 32 33 32 32 33 32 32 32
33 32 32 33 33 32 33 32 32 32
32 33 32 32 32 32 32 32 32 32
32 32 32 32 32 32 33 32 32 32
31 32 32 32 32 32 31 31 32 32
32 31 32 32 32 31 33 32 32 31
32 31 32 32 31 32 32 31 32 31
32 31 32 31 32 31 32 31 32 31
32 31 31 32 31 32 32 31 32 31
31 32 31 31 31 32 31 31 31 32
31 31 31 31 31 32 32 31 30 32
31 31 31 31 31 31 31 31 31 31
31 31 31 31 31 31 32 31 30 31
31 31 31 31 30 31 31 31 31 30
31 31 30 31 31 30 31 31 30 31
31 30 31 30 31 31 31 31 30 31
30 31 30 31 30 31 30 30 31 30
31 30 30 31 30 30 31 30 30 30
31 30 30 30 31 30 31 30 30 31
30 30 30 30 30 30 30 31 30 30
30 30 30 30 30 30 31 30 30 29
30 30 30 30 30 30 30 29 30 30
30 30 29 30 30 30 30 30 30 30
29 30 30 29 30 30 29 30 29 30
30 29 30 29 30 29 30 29 30 29
30 29 29 30 29 30 30 29 30 29
30 29 29 29 30 29 30 30 29 29
29
"""

# Pt100 resistance in hundredths of an ohm, one entry per degree Celsius.
PT100_TABLE: tuple[int, ...] = tuple(
    accumulate(map(int, _PT100_STEPS_X100.split()), initial=_PT100_START_X100)
)

CELSIUS_MIN = -50
CELSIUS_MAX = 150

PT100_NOMINAL = 100.0
PT1000_NOMINAL = 1000.0

_PT1000_RATIO = 10.0
_MAX_OHMS_X100 = 0xFFFF

_CVD_A = 3.9083e-3
_CVD_B = -5.775e-7


class RtdType(IntEnum):
    """Kind of platinum sensor."""

    PT100 = 0
    PT1000 = 1


def _check_ohms_x100(ohms_x100: int) -> int:
    value = _as_index(ohms_x100)
    if not 0 <= value <= _MAX_OHMS_X100:
        raise ValueError(
            f"resistance in hundredths of an ohm must be within 0..{_MAX_OHMS_X100}, got {value}"
        )
    return value


def _check_finite(value: float, what: str) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{what} must be a finite number, got {value!r}")
    return value


def _table_celsius(scaled_x100: int) -> float:
    """Interpolate a Pt100 reading that lies strictly inside the table."""
    index = bisect_left(PT100_TABLE, scaled_x100)
    whole = index - 1 + CELSIUS_MIN
    r_lower = PT100_TABLE[index - 1]
    r_upper = PT100_TABLE[index]
    if scaled_x100 == r_upper:
        return float(whole + 1)
    hundredths = (100 * (scaled_x100 - r_lower)) // (r_upper - r_lower)
    return whole + hundredths / 100.0


class Rtd:
    """Converter between RTD resistance and temperature for one sensor type."""

    def __init__(self, rtd_type: RtdType = RtdType.PT100) -> None:
        self.rtd_type = RtdType(rtd_type)

    def __repr__(self) -> str:
        return f"Rtd({self.rtd_type.name})"

    @property
    def nominal_resistance(self) -> float:
        """Resistance at 0 degrees Celsius for the current sensor type."""
        return PT100_NOMINAL if self.rtd_type is RtdType.PT100 else PT1000_NOMINAL

    def _scale(self, ohms: float) -> float:
        if self.rtd_type is RtdType.PT100:
            return ohms
        return ohms / _PT1000_RATIO

    def _scale_x100(self, ohms_x100: int) -> int:
        if self.rtd_type is RtdType.PT100:
            return ohms_x100
        return int(ohms_x100 / _PT1000_RATIO)

    def _inverse_scale(self, ohms: float) -> float:
        if self.rtd_type is RtdType.PT100:
            return ohms
        return ohms * _PT1000_RATIO

    def celsius_from_ohms_x100(self, ohms_x100: int) -> float:
        """Temperature from a 16-bit resistance reading in hundredths of an ohm.

        Readings at or beyond the ends of the table are clamped to
        CELSIUS_MIN and CELSIUS_MAX.
        """
        scaled = self._scale_x100(_check_ohms_x100(ohms_x100))
        if scaled <= PT100_TABLE[0]:
            return float(CELSIUS_MIN)
        if scaled >= PT100_TABLE[-1]:
            return float(CELSIUS_MAX)
        return _table_celsius(scaled)

    def celsius(self, ohms: float) -> float:
        """Temperature from a resistance in ohms, by table lookup."""
        scaled = self._scale(_check_finite(ohms, "resistance"))
        return self.celsius_from_ohms_x100(math.floor(scaled * 100.0))

    def celsius_to_rtd_ohms(self, celsius: float) -> float:
        """Sensor resistance in ohms for a temperature, by table lookup."""
        celsius = _check_finite(celsius, "temperature")
        if celsius < CELSIUS_MIN:
            r_lower, r_fraction = PT100_TABLE[0], 0
        elif celsius > CELSIUS_MAX:
            r_lower, r_fraction = PT100_TABLE[-1], 0
        else:
            lower = math.floor(celsius) - CELSIUS_MIN
            upper = math.ceil(celsius) - CELSIUS_MIN
            r_lower = PT100_TABLE[lower]
            r_delta = PT100_TABLE[upper] - r_lower
            t_delta = celsius - math.floor(celsius)
            r_fraction = math.floor(0.5 + t_delta * r_delta)
        return self._inverse_scale((r_lower + r_fraction) / 100.0)

    def celsius_cvd(self, ohms: float) -> float:
        """Temperature from the Callendar-Van Dusen equation (0 C and above).

        Returns NaN where the equation has no real solution.
        """
        scaled = self._scale(ohms)
        z1 = -_CVD_A
        z2 = _CVD_A * _CVD_A - 4 * _CVD_B
        z3 = (4 * _CVD_B) / PT100_NOMINAL
        z4 = 2 * _CVD_B
        discriminant = z2 + z3 * scaled
        if not discriminant >= 0:
            return math.nan
        return (math.sqrt(discriminant) + z1) / z4

    def celsius_cubic(self, ohms: float) -> float:
        """Temperature from a cubic fit of the Pt100 curve."""
        r = self._scale(ohms)
        return -247.29 + r * (2.3992 + r * (0.00063962 + 1.0241e-6 * r))

    def celsius_polynomial(self, ohms: float) -> float:
        """Temperature from a fifth-order polynomial fit of the Pt100 curve."""
        r = self._scale(ohms)
        return (
            -242.02
            + 2.2228 * r
            + 2.5859e-3 * r**2
            - 4.8260e-6 * r**3
            - 2.8183e-8 * r**4
            + 1.5243e-10 * r**5
        )

    def celsius_rationalpolynomial(self, ohms: float) -> float:
        """Temperature from a rational-polynomial fit of the Pt100 curve."""
        r = self._scale(ohms)
        c0, c1, c2, c3, c4 = -245.19, 2.5293, -0.066046, 4.0422e-3, -2.0697e-6
        c5, c6, c7 = -0.025422, 1.6883e-3, -1.3601e-6
        numerator = r * (c1 + r * (c2 + r * (c3 + r * c4)))
        denominator = 1.0 + r * (c5 + r * (c6 + r * c7))
        return c0 + numerator / denominator