[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metricskit"
version = "0.1.0"
description = "Thread-safe in-process metrics with a background writer that appends aggregated values to a log file"
requires-python = ">=3.10"
dependencies = []
keywords = ["metrics", "monitoring", "telemetry", "concurrency", "logging"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
metricskit-demo = "metricskit.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["metricskit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
