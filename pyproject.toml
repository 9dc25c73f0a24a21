[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cumulus"
version = "0.1.0"
description = "Volumetric cloud toolkit: Perlin and Worley noise volumes, camera math, meshes and memory helpers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["clouds", "volumetric", "perlin", "worley", "noise", "camera", "rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cumulus"]

[tool.pytest.ini_options]
addopts = "-ra"
