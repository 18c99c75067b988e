[build-system]
requires = ["setuptools>=68", "wheel"]
build-backend = "setuptools.build_meta"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic algorithms and data structures: big integers, FFT and Karatsuba multiplication, heaps and bounded-palindrome counting"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "bigint",
    "fft",
    "karatsuba",
    "heap",
    "palindromes",
    "manacher",
    "segment-tree",
    "sqrt-decomposition",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
algokit-palindromes = "algokit.palindromes:main"

[tool.setuptools.packages.find]
include = ["algokit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
