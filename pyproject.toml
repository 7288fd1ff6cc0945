[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "gestao_loja"
version = "0.1.0"
description = "Store back-office records: customers, suppliers, product stock and sales in progress, kept in local files."
requires-python = ">=3.10"
dependencies = []
keywords = ["store", "point-of-sale", "inventory", "stock", "customers", "suppliers", "sales"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Portuguese (Brazilian)",
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

[tool.setuptools.packages.find]
include = ["gestao_loja*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
