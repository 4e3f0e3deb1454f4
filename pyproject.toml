[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "browsea"
version = "0.1.0"
description = "Pick which installed web browser opens each link"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["browser", "picker", "default-browser", "links", "windows", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Browsers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
browsea = "browsea.cli:main"

[tool.setuptools.packages.find]
include = ["browsea*"]

[tool.pytest.ini_options]
addopts = "-ra"
