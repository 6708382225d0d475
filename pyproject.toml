[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shoggoth"
version = "0.1.0"
description = "Layered neural net structures: activation functions, layers, limbs and a teacher that fills layers with training data."
requires-python = ">=3.10"
dependencies = []
keywords = ["neural network", "layers", "activation functions", "teacher"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["shoggoth"]

[tool.pytest.ini_options]
addopts = "-ra"
