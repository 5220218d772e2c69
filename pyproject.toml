[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gposecurity"
version = "0.1.0"
description = "Model, read and write the Security Settings sections of Group Policy Object INF templates."
requires-python = ">=3.10"
dependencies = []
keywords = ["group policy", "gpo", "active directory", "inf", "security settings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration :: Authentication/Directory",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gposecurity"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
