[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loopchat"
version = "0.1.0"
description = "Console chat between two terminals over a loopback TCP connection, with a user and message model and a pure-Python SHA-1"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "tcp", "console", "sha1", "loopback"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
loopchat = "loopchat.tcpchat:main"

[tool.hatch.build.targets.wheel]
packages = ["loopchat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
