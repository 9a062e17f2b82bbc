[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordtally"
version = "0.1.0"
description = "Count the words in a text file and list them by how often they occur"
requires-python = ">=3.10"
dependencies = []
keywords = ["word count", "text", "frequency", "linked list", "quicksort"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordtally = "wordtally.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordtally"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
