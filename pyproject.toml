[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clipstash"
version = "0.1.0"
description = "Keyboard-driven clipboard history picker backed by GPaste"
requires-python = ">=3.10"
keywords = ["clipboard", "gpaste", "gnome", "history", "desktop", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Gnome",
    "Topic :: Utilities",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
clipstash = "clipstash.app:main"

[tool.hatch.build.targets.wheel]
packages = ["clipstash"]

[tool.pytest.ini_options]
addopts = "-ra"
