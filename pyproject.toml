[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glframe"
version = "0.1.0"
description = "Window-independent building blocks for a small UI framework: colours, regions, translations, log formatting and configuration defaults."
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "framework", "configuration", "localization", "geometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
