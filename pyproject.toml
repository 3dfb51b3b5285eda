[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oxideui"
version = "0.1.0"
description = "Declarative widgets that build render-object trees, with scrolling and clipping helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "widgets", "declarative", "render tree", "scrolling", "clipping"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oxideui"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
