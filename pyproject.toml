[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordtally"
version = "0.1.0"
description = "Count word frequencies in a text file and print the most common terms"
requires-python = ">=3.10"
dependencies = []
keywords = ["word frequency", "tokenizer", "text", "word count", "cli"]
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
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordfrequency = "wordtally.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordtally"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
