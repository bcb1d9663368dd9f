[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lavutil"
version = "0.1.0"
description = "Small utility toolkit: size-checked buffers, overlapping copies, rationals, soft floats, sorting and pixel format tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["rational", "softfloat", "pixel-format", "quicksort", "merge-sort", "colorspace", "stereo3d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["lavutil"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
