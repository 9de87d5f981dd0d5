[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swapwallet"
version = "0.1.0"
description = "Coin bookkeeping for a coinswap wallet: spend info, a classified UTXO cache, balances and HD index tracking"
requires-python = ">=3.10"
keywords = ["bitcoin", "coinswap", "wallet", "utxo", "htlc"]
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
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["swapwallet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
