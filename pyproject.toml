[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eposlib"
version = "0.1.0"
description = "Small runtime library: ASCII character classes, byte order, fixed point, math functions, integer parsing, quicksort, an in-memory framebuffer and a bubble-sort animation"
requires-python = ">=3.10"
dependencies = []
keywords = ["ctype", "fixed-point", "qsort", "framebuffer", "bresenham", "strtol", "park-miller"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
test = ["pytest", "hypothesis"]

[project.scripts]
eposlib-sortviz = "eposlib.sortviz:main"

[tool.hatch.build.targets.wheel]
packages = ["eposlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
