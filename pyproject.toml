[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tronwallet"
version = "0.1.0"
description = "Helpers for hex encoding, 256-bit words and smart-contract return data used by a TRON wallet"
requires-python = ">=3.10"
dependencies = [
    "protobuf",
]
keywords = ["tron", "wallet", "hex", "uint256", "abi", "smart-contract", "protobuf"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tronwallet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
