[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hlsfft"
version = "0.1.0"
description = "Bit-accurate models of a fixed-point multiply-accumulate block and a real-input FFT pipeline"
requires-python = ">=3.10"
dependencies = []
keywords = ["fft", "fixed-point", "fpga", "dsp", "window-function", "signal-processing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hlsfft-spectrum = "hlsfft.spectrum:main"

[tool.hatch.build.targets.wheel]
packages = ["hlsfft"]

[tool.hatch.build.targets.sdist]
include = ["hlsfft", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
