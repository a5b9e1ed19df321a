[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tddkata"
version = "0.1.0"
description = "Small test-driven katas: greetings, sums, shapes, a wallet, a dictionary, Roman numerals, an SVG clock face, blog post parsing and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["tdd", "kata", "roman-numerals", "clockface", "svg", "blog", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
tddkata-greet = "tddkata.greet:main"
tddkata-clockface = "tddkata.svg:main"
tddkata-countdown = "tddkata.countdown:main"
tddkata-blogposts = "tddkata.blogposts:main"

[tool.hatch.build.targets.wheel]
packages = ["tddkata"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
