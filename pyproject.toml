[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "altokepe"
version = "0.1.0"
description = "Restaurant reception desk: table seating, order taking and a simulated dish popularity ranking"
requires-python = ">=3.10"
dependencies = []
keywords = ["restaurant", "point-of-sale", "orders", "tables", "ranking", "menu", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
altokepe = "altokepe.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["altokepe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
