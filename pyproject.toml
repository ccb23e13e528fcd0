[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osiris"
version = "2.0.0"
description = "A simulated text-mode operating system: VGA screen, shell helpers, in-memory file system, process table and editor"
requires-python = ">=3.10"
dependencies = []
keywords = ["operating-system", "simulation", "terminal", "shell", "vga", "text-mode", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osiris-boot = "osiris.kernel:main"

[tool.hatch.build.targets.wheel]
packages = ["osiris"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
