[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clusterbot"
version = "0.1.0"
description = "Command parsing, parameter handling, modal state helpers and request verification for a cluster-launching chat bot"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "bot", "slack", "commands", "clusters", "modals"]
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
    "Topic :: Communications :: Chat",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["clusterbot"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
