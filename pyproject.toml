[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cobcsw"
version = "0.1.0"
description = "Serialization, CRC-32/MPEG-2, command headers, time helpers and simulated HAL primitives for small-satellite on-board computer software"
requires-python = ">=3.10"
dependencies = []
keywords = ["cubesat", "embedded", "serialization", "crc32", "gpio", "satellite"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cobcsw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
