[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketdemos"
version = "0.1.0"
description = "Small console programs and the functions behind them: arithmetic, text, matrices, games and web lookups."
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = [
    "education",
    "console",
    "exercises",
    "games",
    "tic-tac-toe",
    "minimax",
    "arithmetic",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
pocketdemos-arith = "pocketdemos.arith:main"
pocketdemos-arrays = "pocketdemos.arrays:main"
pocketdemos-calculator = "pocketdemos.calculator:main"
pocketdemos-complex = "pocketdemos.complexnum:main"
pocketdemos-matrix = "pocketdemos.matrix:main"
pocketdemos-text = "pocketdemos.text:main"
pocketdemos-patterns = "pocketdemos.patterns:main"
pocketdemos-tictactoe = "pocketdemos.tictactoe:main"
pocketdemos-guess = "pocketdemos.guessing:main"
pocketdemos-rps = "pocketdemos.rps:main"
pocketdemos-colour = "pocketdemos.colour:main"
pocketdemos-contacts = "pocketdemos.contacts:main"
pocketdemos-examples = "pocketdemos.examples:main"
pocketdemos-web = "pocketdemos.web:main"

[tool.hatch.build.targets.wheel]
packages = ["pocketdemos"]

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
