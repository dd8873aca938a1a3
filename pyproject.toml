[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inventaris"
version = "0.1.0"
description = "Small point-of-sale inventory: items, sales transactions, JSON storage and an audit log"
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "point-of-sale", "cashier", "stock", "transactions", "audit-log"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["inventaris"]

[tool.hatch.build.targets.sdist]
include = ["inventaris", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
