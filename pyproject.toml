[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kinemodel"
version = "0.1.0"
description = "Scene model for articulated 3D shapes with keyframe animation and code export"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "modeling", "animation", "keyframe", "geometry", "kinematics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kinemodel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
