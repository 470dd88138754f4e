[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schedsim"
version = "0.1.0"
description = "A small round-robin process scheduling simulator for teaching operating-system concepts"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "operating-systems", "simulation", "round-robin", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
schedsim = "schedsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["schedsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
