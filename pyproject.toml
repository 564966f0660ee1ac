[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainlite"
version = "0.1.0"
description = "A small teaching blockchain with Merkle trees, integrity checks and an interactive console"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "merkle", "sha256", "education", "demo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
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
chainlite = "chainlite.main:main"

[tool.hatch.build.targets.wheel]
packages = ["chainlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
