[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "applab"
version = "0.1.0"
description = "Qn fixed-point arithmetic, integer square roots, sample equations, word containers and CPU timers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fixed point",
    "qn format",
    "integer square root",
    "quadratic",
    "fibonacci",
    "linked list",
    "dynamic array",
    "timer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
applab-fib = "applab.fibonacci:main"
applab-fixedpoint = "applab.fixedpoint:main"
applab-quadratic = "applab.quadratic:main"
applab-qn-demo = "applab.qn_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["applab"]

[tool.hatch.build.targets.sdist]
include = ["applab", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
