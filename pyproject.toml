[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlab"
version = "0.1.0"
description = "Computer-networks lab toolkit: error detection, framing, line coding, routing, ARQ and small socket services"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "networking",
    "crc",
    "checksum",
    "hamming",
    "bit-stuffing",
    "byte-stuffing",
    "manchester",
    "routing",
    "dijkstra",
    "arq",
    "sockets",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netlab = "netlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["netlab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
