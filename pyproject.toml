[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sigwidgets"
version = "0.3.0"
description = "Display models and formatting helpers for signal-analysis widgets: LCD, histogram, phase and polarization views"
requires-python = ">=3.10"
dependencies = []
keywords = ["signal", "sdr", "widgets", "histogram", "lcd", "phase", "polarization", "formatting"]
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
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sigwidgets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
