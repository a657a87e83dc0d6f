[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cezedit"
version = "0.1.0"
description = "A small gap-buffer text editor that saves documents in the compressed CEZ container format"
requires-python = ">=3.10"
keywords = ["editor", "gap-buffer", "zlib", "compression", "file-format"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
    "Topic :: System :: Archiving :: Compression",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cezedit = "cezedit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cezedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
