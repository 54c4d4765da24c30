[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zwmconf"
version = "0.16.0"
description = "Window geometry, key and mouse bindings, config-line parsing and status sockets for a stacking/tiling window manager"
requires-python = ">=3.10"
dependencies = []
keywords = ["window-manager", "tiling", "geometry", "keybindings", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zwmconf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
