[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iccfix"
version = "0.1.0"
description = "Clean up construction cost index (ICC) CSV files: dates, decimals, encoded level names and a classifier column"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "icc", "construction cost index", "data cleaning"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
iccfix = "iccfix.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["iccfix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
