[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tuigallery"
version = "0.1.0"
description = "A gallery of small terminal user interface demos: a counter, buttons, bar charts, canvases, charts, layout constraints and colour palettes."
requires-python = ">=3.10"
keywords = ["terminal", "tui", "widgets", "layout", "charts", "demo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]
dependencies = [
    "rich",
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tuigallery-elm = "tuigallery.elm:main"
tuigallery-button = "tuigallery.button:main"
tuigallery-explorer = "tuigallery.explorer:main"
tuigallery-constraints = "tuigallery.constraints:main"
tuigallery-barchart = "tuigallery.barchart:main"
tuigallery-canvas = "tuigallery.canvas_demo:main"
tuigallery-chart = "tuigallery.chart_demo:main"
tuigallery-demo = "tuigallery.demo_main:main"
tuigallery-grouped = "tuigallery.grouped:main"
tuigallery-colors = "tuigallery.colors:main"

[tool.hatch.build.targets.wheel]
packages = ["tuigallery"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
