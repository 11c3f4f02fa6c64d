[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patterndemos"
version = "0.1.0"
description = "Small, self-contained demonstrations of classic object-oriented design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "builder",
    "decorator",
    "composite",
    "factory",
    "iterator",
    "interpreter",
    "mediator",
    "memento",
    "chain-of-responsibility",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
test = ["pytest"]

[project.scripts]
patterndemos-builder = "patterndemos.builder:main"
patterndemos-pizza = "patterndemos.pizza:main"
patterndemos-complex-memento = "patterndemos.complex_memento:main"
patterndemos-vehicles = "patterndemos.vehicles:main"
patterndemos-chat = "patterndemos.chat:main"
patterndemos-calculator = "patterndemos.calculator:main"
patterndemos-coffee = "patterndemos.coffee:main"
patterndemos-building = "patterndemos.building:main"
patterndemos-store = "patterndemos.customer:main"
patterndemos-pizza-menu = "patterndemos.pizza_menu:main"

[tool.hatch.build.targets.wheel]
packages = ["patterndemos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
