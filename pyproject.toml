[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doremid"
version = "0.1.0"
description = "Generate and convert musical-note based identifiers such as 'doremifa-0a3b1'."
requires-python = ">=3.10"
dependencies = []
keywords = ["id", "identifier", "generator", "music", "solfege"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
doremid-demo = "doremid.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["doremid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
