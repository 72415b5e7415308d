[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hiboulang"
version = "0.1.0"
description = "Interaction terms for sequence diagrams: syntax, pruning, lifeline elimination, frontiers and execution semantics"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sequence diagrams",
    "interactions",
    "operational semantics",
    "formal methods",
    "lifelines",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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
packages = ["hiboulang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
