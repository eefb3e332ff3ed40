[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "streamcat"
version = "0.1.0"
description = "A small terminal catalogue of series, episodes and movies with ratings and durations"
requires-python = ">=3.10"
dependencies = []
keywords = ["streaming", "catalog", "series", "movies", "episodes", "ratings", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
streamcat = "streamcat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["streamcat"]

[tool.pytest.ini_options]
addopts = "-ra"
