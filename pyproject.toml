[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clinica"
version = "0.1.0"
description = "Interactive terminal system for managing patients, doctors, nurses, departments, medicines and appointments"
requires-python = ">=3.10"
dependencies = []
keywords = ["clinic", "health", "appointments", "medical records", "prescriptions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Healthcare Industry",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clinica = "clinica.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clinica"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
