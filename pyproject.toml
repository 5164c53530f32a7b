[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "panekit"
version = "0.1.0"
description = "Layout algorithms, focus handling, object-tree walks, menus and resources for widget toolkits"
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "layout", "widgets", "focus", "menu", "user-interface"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
panekit-modvendor = "panekit.modvendor:main"

[tool.hatch.build.targets.wheel]
packages = ["panekit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
