[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridfront"
version = "0.1.0"
description = "Front-end state for a grid-based text editor: cursor and window animation, keyboard input, fonts and settings."
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "grid", "cursor", "animation", "keyboard", "settings", "easing"]
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
    "Topic :: Text Editors",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["gridfront"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
