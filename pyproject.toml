[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parlab"
version = "0.1.0"
description = "Small parallel-computing workloads (Mandelbrot, Newton sqrt, saxpy, k-means) with timing harnesses"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["benchmark", "mandelbrot", "kmeans", "saxpy", "sqrt", "threads", "ppm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
parlab-mandelbrot = "parlab.mandel_cli:main"
parlab-sqrt = "parlab.bench_cli:sqrt_main"
parlab-saxpy = "parlab.bench_cli:saxpy_main"

[tool.hatch.build.targets.wheel]
packages = ["parlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
