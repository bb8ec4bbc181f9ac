[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leakreport"
version = "0.1.0"
description = "Track allocated buffers and report the ones that were never released."
requires-python = ">=3.10"
dependencies = []
keywords = ["memory", "leak", "debugging", "allocation", "tracking", "guid"]
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
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
leakreport-demo = "leakreport.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["leakreport"]

[tool.pytest.ini_options]
addopts = "-ra"
