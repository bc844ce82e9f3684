[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seedyciphers"
version = "0.1.0"
description = "Pure-Python AES, ChaCha20 and ChaCha8 cipher primitives"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "chacha20", "chacha8", "cipher", "cryptography", "stream cipher"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["seedyciphers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
