[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "convertkit"
version = "1.0.0"
description = "Uniform, pluggable value conversion with optional results, fallbacks and interchangeable converters"
requires-python = ">=3.10"
dependencies = []
keywords = ["conversion", "lexical-cast", "strtol", "printf", "parsing", "formatting", "optional"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
convertkit-demo = "convertkit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["convertkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
