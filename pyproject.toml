[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gdregress"
version = "0.1.0"
description = "Linear regression trained by batch gradient descent on numeric CSV data"
requires-python = ">=3.10"
dependencies = []
keywords = ["linear regression", "gradient descent", "csv", "mean squared error"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gdregress = "gdregress.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gdregress"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
