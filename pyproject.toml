[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "transitmap"
version = "0.1.0"
description = "String utilities, delimiter-separated and XML readers and writers, and street map and bus system models."
requires-python = ">=3.10"
dependencies = []
keywords = ["dsv", "csv", "xml", "openstreetmap", "bus", "transit", "string utilities"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing",
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["transitmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
