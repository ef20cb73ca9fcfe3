"""Pt100/Pt1000 RTD conversion, an ADS1243 ADC driver and MCP3201 readout helpers."""

__version__ = "0.1.0"
__all__ = ["rtd", "ads1243", "monitor"]