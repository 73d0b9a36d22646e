[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tradeagg"
version = "0.1.0"
description = "Aggregate raw taker trades into modular candles using time, tick, volume or price rules"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "trading",
    "candles",
    "ohlc",
    "aggregation",
    "market-data",
    "time-bars",
    "volume-bars",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tradeagg = "tradeagg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tradeagg"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
