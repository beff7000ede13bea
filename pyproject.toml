[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scenemodel"
version = "0.1.0"
description = "Object relation trees and scene topologies for learning probabilistic scene models"
requires-python = ">=3.10"
dependencies = []
keywords = ["scene model", "topology", "object relations", "scene recognition", "tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
packages = ["scenemodel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
