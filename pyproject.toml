[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bubblepopper"
version = "0.1.0"
description = "A small arcade game: ride bubbles up to catch stars and dodge the birds."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "pygame", "bubbles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bubblepopper = "bubblepopper.main:main"

[tool.hatch.build.targets.wheel]
packages = ["bubblepopper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
