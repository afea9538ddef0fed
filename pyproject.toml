[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xrtcsdk"
version = "0.1.0"
description = "Building blocks for a real-time streaming client: JSON values, stream URL parsing, background HTTP requests, task threads and media chains."
requires-python = ">=3.10"
keywords = ["rtc", "streaming", "media-pipeline", "signaling", "json"]
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
    "Topic :: Communications :: Conferencing",
    "Topic :: Multimedia :: Video",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xrtcsdk"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
