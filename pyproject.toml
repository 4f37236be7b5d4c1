[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "creationkit"
version = "0.1.0"
description = "Small, tested implementations of the classic creational design patterns and the SOLID principles"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "builder",
    "factory",
    "prototype",
    "singleton",
    "multiton",
    "specification",
    "solid",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
creationkit-walls = "creationkit.walls:main"

[tool.hatch.build.targets.wheel]
packages = ["creationkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
