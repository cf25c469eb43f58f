[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "birthdaycard"
version = "1.0.0"
description = "An animated birthday card: an envelope slides in, opens, and reveals the card inside."
requires-python = ">=3.10"
keywords = ["birthday", "card", "greeting", "animation", "pygame", "arena", "allocator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
birthdaycard = "birthdaycard.app:main"

[tool.hatch.build.targets.wheel]
packages = ["birthdaycard"]

[tool.pytest.ini_options]
addopts = "-ra"
