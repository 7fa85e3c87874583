[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursealgo"
version = "0.1.0"
description = "Red-black tree course registry, Prim's spanning tree over bridges, and KMP / Boyer-Moore string matching"
requires-python = ">=3.10"
dependencies = []
keywords = ["red-black tree", "prim", "minimum spanning tree", "kmp", "boyer-moore", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursealgo-enrollment = "coursealgo.enrollment:main"
coursealgo-prim = "coursealgo.prim:main"

[tool.hatch.build.targets.wheel]
packages = ["coursealgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
