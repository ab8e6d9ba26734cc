[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic algorithms and data structures: searching, sorting, combinatorics, trees and lists, CPU scheduling simulation and BMP edge filters."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "searching",
    "combinatorics",
    "kmp",
    "scheduling",
    "bmp",
    "sobel",
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-schedule = "algolab.scheduling:main"
algolab-filters = "algolab.filters:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
addopts = "-ra"
