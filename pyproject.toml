[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vertexos"
version = "0.1.0"
description = "A small simulated desktop with a calculator, tic-tac-toe, calendar, dice roller, file tool, notepad, audio player and task manager"
requires-python = ">=3.10"
keywords = ["desktop", "simulation", "tkinter", "task-manager", "mini-apps"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]
dependencies = [
    "pillow",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
vertexos = "vertexos.desktop:main"

[tool.hatch.build.targets.wheel]
packages = ["vertexos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
