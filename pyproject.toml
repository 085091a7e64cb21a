[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stressville"
version = "0.1.0"
description = "A small text-mode economy game about money, pills, stress and houses"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "text-based", "simulation", "economy", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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

[project.scripts]
stressville = "stressville.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["stressville"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
