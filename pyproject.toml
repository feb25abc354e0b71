[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rdtcore"
version = "0.1.0"
description = "Strongly typed physical units, robot motion data types and a bounded trajectory queue"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "units", "joints", "trajectory", "motion control", "ring buffer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rdtcore-demo = "rdtcore.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["rdtcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
