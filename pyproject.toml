[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ps2suitcase"
version = "0.1.0"
description = "Workspace tools for PlayStation 2 save folders: archive sizing, folder watching, icon preview helpers and PCSX2 launching"
requires-python = ">=3.10"
keywords = ["ps2", "psu", "pcsx2", "save", "memory card", "icon"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]
dependencies = [
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ps2suitcase = "ps2suitcase.app:main"
ps2suitcase-bundle = "ps2suitcase.bundle:main"

[tool.hatch.build.targets.wheel]
packages = ["ps2suitcase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
