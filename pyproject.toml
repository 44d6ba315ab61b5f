[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdbkit"
version = "0.1.0"
description = "Helpers around Access database content: SQL search-argument trees, query state, CSV/JSON/INSERT formatting, stored-query SQL, catalog listings, C code generation and CSV import conversion"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "access",
    "mdb",
    "jet",
    "database",
    "sql",
    "export",
    "csv",
    "json",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mdb-parsecsv = "mdbkit.parsecsv:main"

[tool.hatch.build.targets.wheel]
packages = ["mdbkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
