[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toonenc"
version = "0.1.1"
description = "Encode JSON values as TOON, a compact line-oriented notation"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "toon", "serialization", "encoding", "llm"]
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
    "Topic :: File Formats :: JSON",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["toonenc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
