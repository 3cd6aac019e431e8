[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kredi_onay"
version = "0.1.0"
description = "Credit application approval: compare simple classifiers on a CSV data set"
requires-python = ">=3.10"
dependencies = []
keywords = ["credit", "classification", "perceptron", "logistic-regression", "svm", "decision-tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kredi-onay = "kredi_onay.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kredi_onay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
