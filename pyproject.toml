[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "travelbooking"
version = "1.0.0"
description = "Console travel booking system for buses, trains and vans with schedules and seat bookings"
requires-python = ">=3.10"
dependencies = []
keywords = ["booking", "travel", "schedule", "bus", "train", "van", "reservation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
travelbooking = "travelbooking.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["travelbooking"]

[tool.pytest.ini_options]
addopts = "-ra"
