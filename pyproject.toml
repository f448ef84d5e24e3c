[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tola"
version = "0.6.5"
description = "Building blocks for a Typst-based static site generator: page and asset paths, page metadata, asset copying, dependency tracking and command-line parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["blog", "static", "typst", "ssg", "static-site-generator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Site Management",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tola"]

[tool.hatch.build.targets.sdist]
include = ["tola", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
