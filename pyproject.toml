[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hd44780"
version = "0.1.0"
description = "Instruction encoding, state snapshots and timing helpers for verifying HD44780 character LCD controllers"
requires-python = ">=3.10"
dependencies = []
keywords = ["hd44780", "lcd", "fpga", "verification", "embedded"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hd44780"]

[tool.pytest.ini_options]
addopts = "-ra"
