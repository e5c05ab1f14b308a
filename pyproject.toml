[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edra_pdf"
version = "0.1.2"
description = "Render Edra editor JSON documents to text-only PDF files"
requires-python = ">=3.10"
dependencies = []
keywords = ["pdf", "edra", "json", "rich-text", "renderer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
edra-pdf = "edra_pdf.document:main"

[tool.hatch.build.targets.wheel]
packages = ["edra_pdf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
