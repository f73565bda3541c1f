[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eqset"
version = "0.1.0"
description = "A set driven by a custom equality predicate, plus a small text statistics tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["set", "equality", "collection", "text statistics", "word count"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
eqset-demo = "eqset.demo:main"
eqset-textstats = "eqset.textstats:main"

[tool.hatch.build.targets.wheel]
packages = ["eqset"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
