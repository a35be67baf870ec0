[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tfplan-filter"
version = "0.1.0"
description = "Summarise Terraform JSON plans as readable text, JSON or HTML"
requires-python = ">=3.10"
dependencies = []
keywords = ["terraform", "plan", "infrastructure", "summary", "devops"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
terraform-plan-filter = "tfplan_filter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tfplan_filter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
