[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "musicstack"
version = "0.1.0"
description = "Music theory, rhythm, notation and planner data primitives: pitches, intervals, scales, chords, keys, meters, tempos, time grids, dynamics and engraving geometry."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "music",
    "theory",
    "pitch",
    "chord",
    "scale",
    "tempo",
    "rhythm",
    "notation",
    "dynamics",
    "engraving",
]
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
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["musicstack"]

[tool.hatch.build.targets.sdist]
include = [
    "musicstack",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP", "SIM"]

[tool.mypy]
python_version = "3.10"
strict = true
