[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minibrowser"
version = "0.1.0"
description = "A toy browser engine: HTML and CSS parsing, selector matching and style trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["browser", "html", "css", "parser", "style", "dom"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Browsers",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minibrowser = "minibrowser.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minibrowser"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
