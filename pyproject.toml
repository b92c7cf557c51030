[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wanderer"
version = "0.1.0"
description = "A small top-down 2D game with a start menu, an animated walking character and polygon collision."
requires-python = ">=3.10"
keywords = ["game", "2d", "pygame", "collision", "sprite", "animation", "top-down"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Typing :: Typed",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wanderer = "wanderer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wanderer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
