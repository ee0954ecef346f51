[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "happyparts"
version = "1.0.0"
description = "Compose APIs from stackable parts: wrappers, static data, default values and change-tracking fields"
requires-python = ">=3.10"
dependencies = []
keywords = ["composition", "mixins", "parts", "api", "crtp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[project.scripts]
happyparts-demo = "happyparts.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["happyparts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
