[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bernoulli-types"
version = "1.0.0"
description = "Probabilistic data structures built on a latent/observed duality with interval error rates"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bloom filter",
    "probabilistic data structures",
    "approximate sets",
    "count-min sketch",
    "minhash",
    "error propagation",
    "interval arithmetic",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bernoulli-examples = "bernoulli_types.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["bernoulli_types"]

[tool.pytest.ini_options]
addopts = "-ra"
