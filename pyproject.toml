[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lynxcore"
version = "0.1.0"
description = "Building blocks of an Atari Lynx emulator: Suzy math unit, sprite line decoder, boot ROM, colour packing and checksums"
requires-python = ">=3.10"
dependencies = []
keywords = ["lynx", "emulator", "suzy", "sprite", "crc32", "md5"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[tool.hatch.build.targets.wheel]
packages = ["lynxcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
