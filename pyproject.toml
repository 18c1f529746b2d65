[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gsheet_source"
version = "1.0.0"
description = "A polling data source that runs a script exporting spreadsheet rows as JSON and yields them one record at a time"
requires-python = ">=3.10"
dependencies = []
keywords = ["google-sheets", "data-source", "plugin", "json", "polling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gsheet_source"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
