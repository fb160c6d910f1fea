[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modcrypt"
version = "0.1.0"
description = "Modular exponentiation, primality checks, toy ElGamal encryption and linear Diophantine equations"
requires-python = ">=3.10"
dependencies = []
keywords = ["modular arithmetic", "elgamal", "diophantine", "fermat", "primality", "number theory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
modcrypt-compare = "modcrypt.compare:main"
modcrypt-elgamal = "modcrypt.elgamal:main"
modcrypt-diophantine = "modcrypt.diophantine:main"

[tool.hatch.build.targets.wheel]
packages = ["modcrypt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
