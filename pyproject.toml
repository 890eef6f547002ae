[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crossbow_toolkit"
version = "0.1.0"
description = "Small office utilities: a command-line calculator with history, invoice totals and a persistent item register."
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "invoice", "inventory", "erp", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
crossbow-calc = "crossbow_toolkit.calc_cli:main"
crossbow-invoice = "crossbow_toolkit.invoice:main"
crossbow-inventory = "crossbow_toolkit.inventory:main"

[tool.hatch.build.targets.wheel]
packages = ["crossbow_toolkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
