[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "txtscan"
version = "0.1.0"
description = "Scan a directory tree for .txt files, count their lines and report the most frequent words"
requires-python = ">=3.10"
dependencies = []
keywords = ["text", "word count", "line count", "scanner", "cli"]
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
    "Topic :: Text Processing :: General",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
txtscan = "txtscan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["txtscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
