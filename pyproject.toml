[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boggleht"
version = "0.1.0"
description = "Open-addressing hash table with linear and double-hash probing, a base-36 string hash, and a straight-line Boggle solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "double hashing", "open addressing", "string hash", "boggle", "mt19937"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
boggle-driver = "boggleht.boggle:main"
str-hash-test = "boggleht.strhash:main"
ht-test = "boggleht.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["boggleht"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
