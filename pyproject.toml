[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wlkeymap"
version = "0.1.0"
description = "A unified interface for setting the keyboard layout in Wayland compositors"
requires-python = ">=3.10"
dependencies = []
keywords = ["wayland", "keyboard", "keymap", "xkb", "layout", "compositor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wlkeymap = "wlkeymap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wlkeymap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
