[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robotkit"
version = "0.1.0"
description = "Process, module and memory-map inspection with small geometry and range helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["process", "modules", "procfs", "maps", "geometry", "range"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["robotkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
