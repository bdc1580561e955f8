[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "praticas"
version = "0.1.0"
description = "Small programming exercises: vowel and word counting, polar complex numbers, offset-indexed vectors, a string queue, person records and Conway's Game of Life"
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "education", "complex-numbers", "queue", "game-of-life"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
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
test = ["pytest"]

[project.scripts]
praticas-hello = "praticas.texto:hello_main"
praticas-vogais = "praticas.texto:vowels_main"
praticas-frequente = "praticas.texto:frequent_main"
praticas-complexo = "praticas.complexo:main"
praticas-vetor = "praticas.vetor:main"
praticas-fila = "praticas.fila:main"
praticas-jogo-da-vida = "praticas.jogo_da_vida:main"

[tool.hatch.build.targets.wheel]
packages = ["praticas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
