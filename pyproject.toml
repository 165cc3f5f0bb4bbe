[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "remy"
version = "0.0.1"
description = "Memory abstractions and NES ROM, cartridge and memory-map handling for console emulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "nes", "ines", "nes2", "memory", "rom", "cartridge"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
romdump = "remy.romdump:main"

[tool.hatch.build.targets.wheel]
packages = ["remy"]

[tool.pytest.ini_options]
addopts = "-ra"
