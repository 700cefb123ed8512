[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "innex"
version = "0.1.0"
description = "Small building blocks: an id-keyed slot pool, binary search helpers, text content addressed by a running index, character classification and homogeneous transform matrices."
requires-python = ">=3.10"
dependencies = []
keywords = ["pool", "binary-search", "text", "matrix", "transform"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["innex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
