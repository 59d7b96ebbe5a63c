[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Small, dependency-free implementations of classic algorithms and data structures."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "flood-fill",
    "tower-of-hanoi",
    "binary-search",
    "binary-tree",
    "floyd-warshall",
    "linked-list",
    "merge-sort",
    "scheduling",
    "subsequences",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algokit-floodfill = "algokit.floodfill:main"
algokit-hanoi = "algokit.hanoi:main"
algokit-search = "algokit.search:main"
algokit-tree = "algokit.tree:main"
algokit-shortest-paths = "algokit.shortest_paths:main"
algokit-linked-list = "algokit.linked_list:main"
algokit-mergesort = "algokit.mergesort:main"
algokit-sjf = "algokit.scheduling:main"
algokit-subsequences = "algokit.subsequences:main"

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.hatch.build.targets.sdist]
include = ["algokit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
