[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "willow"
version = "0.1.0"
description = "Front-end pieces of the Willow language compiler: syntax tree, checked types, semantic errors, diagnostics and control-flow graph construction"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "ast", "type-checker", "control-flow-graph", "diagnostics"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["willow"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
