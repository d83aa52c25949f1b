[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "missiondesk"
version = "0.1.0"
description = "Data models, in-memory repositories, a callback slot and view mappings for tasks, missions, power presets and frequency presets"
requires-python = ">=3.10"
dependencies = []
keywords = ["models", "repository", "presets", "missions", "tasks", "view-mapping"]
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
packages = ["missiondesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
