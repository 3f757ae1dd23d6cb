[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exercisekit"
version = "0.1.0"
description = "Command-line runner that compiles, tests and watches a set of small programming exercises"
requires-python = ">=3.11"
dependencies = [
    "watchdog",
]
keywords = ["exercises", "learning", "teaching", "compiler", "watch"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
exercisekit = "exercisekit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["exercisekit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
