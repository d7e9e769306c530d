[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mallsecurity"
version = "1.0.0"
description = "Domain model, plain-text storage and controller for a shopping-mall security robot service"
requires-python = ">=3.10"
dependencies = []
keywords = ["security", "mall", "operators", "faq", "alarms"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mallsecurity"]

[tool.pytest.ini_options]
addopts = "-ra"
