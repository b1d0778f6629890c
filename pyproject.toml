[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cppnine"
version = "0.1.0"
description = "Three small command-line tools: a bitcoin price lookup, an RPN calculator and a merge sort timer"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitcoin", "rpn", "calculator", "merge-sort", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
btc = "cppnine.bitcoin_exchange:main"
rpn = "cppnine.rpn:main"
pmergeme = "cppnine.pmergeme:main"

[tool.hatch.build.targets.wheel]
packages = ["cppnine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
