# rtdconv

Resistance/temperature conversion for platinum RTDs (Pt100 and Pt1000), a
driver for the ADS1243 24-bit ADC that talks through an SPI bus you supply,
and helpers for reading an RTD through an MCP3201 12-bit ADC.

The package has no runtime dependencies.

```
pip install .
```

## `rtdconv.rtd`: resistance and temperature

`Rtd(rtd_type=RtdType.PT100)` converts for one sensor type. Its `rtd_type`
attribute can be changed at any time; `nominal_resistance` gives 100.0 for
`RtdType.PT100` and 1000.0 for `RtdType.PT1000`. A Pt1000 resistance is divided
by ten before conversion, and `celsius_to_rtd_ohms` multiplies its result by
ten for a Pt1000.

Table-based conversions use `PT100_TABLE`, a tuple of Pt100 resistances in
hundredths of an ohm, one entry per degree:

- `celsius(ohms)` floors the resistance to hundredths of an ohm and passes it
  to `celsius_from_ohms_x100`. The value must be finite, otherwise
  `ValueError` is raised.
- `celsius_from_ohms_x100(ohms_x100)` takes an integer from 0 to 65535
  (`ValueError` otherwise). Readings at or below the first table entry return
  `CELSIUS_MIN` (-50.0), readings at or above the last return `CELSIUS_MAX`
  (150.0). Anything between is located in the table by binary search and
  returned as `CELSIUS_MIN` plus the table position, interpolated to
  hundredths of a degree.
- `celsius_to_rtd_ohms(celsius)` works the other way: below `CELSIUS_MIN` it
  returns the first table entry, above `CELSIUS_MAX` the last, and otherwise
  the entry at `floor(celsius) - CELSIUS_MIN`, linearly interpolated towards
  the next one and rounded to hundredths of an ohm.

Closed-form approximations, each taking ohms:

- `celsius_cvd` — inverse Callendar-Van Dusen equation (A = 3.9083e-3,
  B = -5.775e-7); returns `math.nan` where there is no real solution.
- `celsius_cubic` — cubic fit.
- `celsius_polynomial` — fifth-order polynomial fit.
- `celsius_rationalpolynomial` — rational-polynomial fit.

```python
from rtdconv.rtd import Rtd, RtdType

sensor = Rtd(RtdType.PT100)
sensor.celsius_cvd(100.0)         # approximately 0.0
sensor.celsius_cubic(138.5)

sensor.rtd_type = RtdType.PT1000
sensor.celsius_polynomial(1385.0)
```

## `rtdconv.ads1243`: the ADC driver

`SpiBus(exchange, select=None)` wraps your hardware access. `exchange(byte)`
must shift one byte out and return the byte shifted in; `select(level)`, if
given, is called with `False` when chip select is asserted (`cs_low`) and
`True` when it is released (`cs_high`). The `selected` attribute tracks the
current state. `transfer(data)` accepts only 0..255.

`Ads1243(spi, delay=time.sleep)` sends each command inside one chip-select
frame and calls `delay(seconds)` for the settling waits (`RESET_DELAY`,
`CONVERSION_DELAY`, `CALIBRATE_DELAY`):

- `init()` — reset, then write `SETUP_DEFAULT` (0x04) to SETUP and
  `MUX_DEFAULT` (0x01) to MUX.
- `reset()`, `calibrate()` — reset and self-calibration commands.
- `write_reg(reg, value)`, `read_reg(reg)` — `reg` must be a `Register`
  address, `value` a byte; `ValueError` otherwise.
- `read_adc()` — the latest conversion as a raw 24-bit code.
- `set_channel(channel)` — select input 0..7 against AINCOM; `ValueError`
  outside that range.

`Command` and `Register` hold the opcodes and register addresses.
`to_voltage(adc_value, vref)` turns a 24-bit two's-complement code
(0..0xFFFFFF) into volts, scaling by `FULL_SCALE` (2**23).

```python
from rtdconv.ads1243 import Ads1243, SpiBus, to_voltage

spi = SpiBus(exchange=my_exchange, select=my_chip_select)
adc = Ads1243(spi)
adc.init()
adc.calibrate()
adc.set_channel(0)
volts = to_voltage(adc.read_adc(), 2.5)
```

## `rtdconv.monitor`: putting it together

- `read_rtd_resistance(adc, vref=VREF, rref=RREF)` — one conversion from any
  object with `read_adc()`, converted to ohms for the excitation current
  `vref / rref` (defaults 2.5 V and 4000 Ω).
- `select_rtd_type(resistance)` — `RtdType.PT1000` above
  `PT1000_THRESHOLD` (400 Ω), otherwise `RtdType.PT100`.
- `measure_temperature(adc, sensor, vref=VREF, rref=RREF)` — reads the
  resistance, sets `sensor.rtd_type` from it and returns `sensor.celsius(...)`.

```python
from rtdconv.monitor import measure_temperature
from rtdconv.rtd import Rtd

temperature = measure_temperature(adc, Rtd())
```

For an MCP3201:

- `read_mcp3201(spi)` — clocks two bytes out of the converter on a `SpiBus`
  and returns the 12-bit code.
- `decode_mcp3201(high, low)` — the same decoding from two raw bytes.
- `calculate_temperature(adc_val)` — linear Pt100 model for codes 0..4095:
  3.3 V reference, ×5 gain, 1 mA excitation, 100 Ω at 0 °C and
  α = 0.00385. `ValueError` outside the code range.

## What it does not do

There is no command-line program and no loop that polls a sensor; call the
functions from your own code. The package does not open any SPI device
itself: all bus traffic goes through the `exchange` and `select` callables
you give `SpiBus`.