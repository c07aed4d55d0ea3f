[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libmini"
version = "0.1.0"
description = "Small string, linked-list and line-reading helpers, plus a shell syntax-tree model with text dumps"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "parsing", "linked-list", "line-reader", "ast", "shell"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["libmini"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
