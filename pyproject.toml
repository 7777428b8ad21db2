[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lipstyk"
version = "0.2.0"
description = "Rules that score machine-generated slop patterns in Python code, Markdown and prose"
requires-python = ">=3.10"
dependencies = []
keywords = ["lint", "code-quality", "static-analysis", "markdown", "python"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lipstyk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
