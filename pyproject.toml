[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simplemenu"
version = "0.1.0"
description = "ROM naming, game ordering, favorites, screen text and device helpers for a handheld console launcher"
requires-python = ">=3.10"
dependencies = []
keywords = ["launcher", "frontend", "emulation", "roms", "favorites", "handheld"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: System :: Emulators",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["simplemenu"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
