[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toolup"
version = "0.1.0"
description = "Toolchain installer building blocks: resumable downloads, progress display, terminal output, prompts and error types"
requires-python = ">=3.10"
dependencies = [
    "markdown-it-py",
]
keywords = ["toolchain", "installer", "download", "resume", "progress", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Software Distribution",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["toolup"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
