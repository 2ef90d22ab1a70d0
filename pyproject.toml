[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iso8583"
version = "0.1.0"
description = "Field encoders, bitmaps, message type indicators and display helpers for ISO 8583 financial messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["iso8583", "payments", "bcd", "ebcdic", "bitmap", "tlv", "emv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iso8583"]

[tool.pytest.ini_options]
addopts = "-ra"
