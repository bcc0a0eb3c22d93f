[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contactbook"
version = "0.1.0"
description = "An address book with navigation, search, binary save files and vCard export, plus a small steerable car model."
requires-python = ">=3.10"
dependencies = []
keywords = ["address book", "contacts", "vcard", "datastream"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Email :: Address Book",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
contactbook = "contactbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["contactbook"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
