[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minift"
version = "0.1.0"
description = "Small character, number, byte-buffer and output helpers with a printf-style formatter"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "formatting", "itoa", "atoi", "strings", "buffers"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minift"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
