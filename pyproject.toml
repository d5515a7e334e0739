[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grassdoom"
version = "0.1.0"
description = "A tiny textured raycasting first-person maze walker"
requires-python = ">=3.10"
keywords = ["raycaster", "game", "first-person", "pygame", "retro"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
grassdoom = "grassdoom.app:main"

[tool.hatch.build.targets.wheel]
packages = ["grassdoom"]

[tool.pytest.ini_options]
addopts = "-ra"
