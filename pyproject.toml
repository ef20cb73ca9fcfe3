[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtdconv"
version = "0.1.0"
description = "Pt100/Pt1000 RTD resistance-temperature conversion, ADS1243 ADC driver and MCP3201 readout helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["rtd", "pt100", "pt1000", "temperature", "ads1243", "mcp3201", "adc", "spi", "callendar-van-dusen"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["rtdconv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
