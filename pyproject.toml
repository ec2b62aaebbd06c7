[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "relinput"
version = "0.1.0"
description = "Line-based mouse and keyboard event format, key tables, and a server that replays events on an X display through xdotool"
requires-python = ">=3.10"
dependencies = []
keywords = ["remote desktop", "input", "mouse", "keyboard", "xdotool", "relay"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
relinput-server = "relinput.server:main"

[tool.hatch.build.targets.wheel]
packages = ["relinput"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
