[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "ossim"
version = "0.1.0"
description = "Small simulations of classic operating-system algorithms: CPU and real-time scheduling, deadlock avoidance, memory allocation, paging, disk allocation and synchronisation."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "fcfs",
    "sjf",
    "edf",
    "rate monotonic",
    "bankers algorithm",
    "page replacement",
    "memory allocation",
    "dining philosophers",
    "producer consumer",
    "simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ossim-cpu = "ossim.cpu_scheduling:main"
ossim-realtime = "ossim.realtime:main"
ossim-bankers = "ossim.bankers:main"
ossim-prodcons = "ossim.prodcons:main"
ossim-memory = "ossim.memory:main"
ossim-paging = "ossim.paging:main"
ossim-disk = "ossim.disk:main"
ossim-dining = "ossim.dining:main"

[tool.setuptools.packages.find]
include = ["ossim*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
