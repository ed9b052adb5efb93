[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hassdiscovery"
version = "0.1.0"
description = "Build and publish Home Assistant MQTT discovery payloads"
requires-python = ">=3.10"
dependencies = [
    "paho-mqtt",
]
keywords = ["home-assistant", "mqtt", "discovery", "home-automation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hassdiscovery"]

[tool.pytest.ini_options]
addopts = "-ra"
