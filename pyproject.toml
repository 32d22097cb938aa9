[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "learnkit"
version = "0.1.0"
description = "Small command-line tools and libraries: a calculator, integer sorter, in-process game chat server, music library shell and a raw HTTP HEAD client"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "calculator",
    "sorting",
    "quicksort",
    "bubble-sort",
    "ipc",
    "chat",
    "music-library",
    "http",
    "command-line",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
learnkit-calc = "learnkit.calc:main"
learnkit-sorter = "learnkit.sorter:main"
learnkit-cgss = "learnkit.cgss:main"
learnkit-mplayer = "learnkit.mplayer:main"
learnkit-simplehttp = "learnkit.simplehttp:main"

[tool.hatch.build.targets.wheel]
packages = ["learnkit"]

[tool.hatch.build.targets.sdist]
include = ["learnkit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
