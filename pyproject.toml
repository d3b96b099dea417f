[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dxfdraw"
version = "0.1.0"
description = "Read and write ASCII DXF drawings: layers, line types, text styles, entities, blocks and groups."
requires-python = ">=3.10"
dependencies = []
keywords = ["dxf", "cad", "drawing", "autocad", "vector graphics"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dxfdraw-torus = "dxfdraw.torus:main"

[tool.hatch.build.targets.wheel]
packages = ["dxfdraw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
