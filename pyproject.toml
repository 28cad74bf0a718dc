[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "f1designer"
version = "1.0.0"
description = "Design, save and compare Formula One car aero configurations"
requires-python = ">=3.10"
dependencies = []
keywords = ["formula one", "car design", "aerodynamics", "simulation", "comparison"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools]
packages = ["f1designer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
