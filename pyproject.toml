[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pgnboard"
version = "0.1.0"
description = "Chess plies, PGN tag lists, FEN conversion and board positions for game records"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "pgn", "fen", "san", "board", "position"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pgnboard"]

[tool.pytest.ini_options]
addopts = "-ra"
