[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ferrules"
version = "5.4.0"
description = "A terminal runner for small Rust exercises that compiles, tests, lints and tracks progress, with worked solutions as Python modules"
requires-python = ">=3.11"
keywords = ["exercises", "learning", "teaching", "rust", "compiler", "watch", "progress"]
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
    "rich",
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ferrules = "ferrules.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ferrules"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
