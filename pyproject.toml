[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fieldguard"
version = "0.1.0"
description = "Field validators and structured validation errors: e-mail, URL, IP, length, range, contains, credit card and more."
requires-python = ">=3.10"
dependencies = [
    "idna",
]
keywords = ["validation", "validator", "email", "url", "ip", "credit-card", "forms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fieldguard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
