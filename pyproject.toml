[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "golings"
version = "0.1.0"
description = "Command-line helper for small Go exercises: list them, run them, verify them, watch them and get hints"
requires-python = ">=3.11"
keywords = ["go", "golang", "exercises", "learning", "education", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = [
    "termcolor",
    "tabulate",
    "tqdm",
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
golings = "golings.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["golings"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
