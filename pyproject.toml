[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rdfsnips"
version = "0.1.0"
description = "Small command-line filters for Turtle and N-Quads text: splitting, counting, prefixing, line hashing and percent-unquoting"
requires-python = ">=3.10"
dependencies = []
keywords = ["rdf", "turtle", "ttl", "nquads", "murmur3", "percent-encoding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hashl = "rdfsnips.hashl:main"
unqpc = "rdfsnips.unqpc:main"
ttl-split = "rdfsnips.ttl_split:main"
ttl-wc = "rdfsnips.ttl_wc:main"
ttl-prefixify = "rdfsnips.ttl_prefixify:main"

[tool.hatch.build.targets.wheel]
packages = ["rdfsnips"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
