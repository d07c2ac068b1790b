[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ztoolkit"
version = "0.1.0"
description = "Utility toolkit: string and time helpers, a recycling resource pool, INI handling, portable error codes and a MySQL connection"
requires-python = ">=3.10"
keywords = ["utilities", "resource-pool", "ini", "errno", "mysql", "hexdump"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Database :: Front-Ends",
]
dependencies = [
    "pymysql",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ztoolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
