[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estudos"
version = "0.1.0"
description = "Classic data structures, algorithms and small image and sound experiments"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "searching",
    "avl-tree",
    "linked-list",
    "heap",
    "graph",
    "shader",
    "gif",
    "wav",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
estudos-animation = "estudos.animation:main"
estudos-image-sound = "estudos.image_sound:main"
estudos-noise-sound = "estudos.noise_sound:main"

[tool.hatch.build.targets.wheel]
packages = ["estudos"]

[tool.hatch.build.targets.sdist]
include = [
    "estudos",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
