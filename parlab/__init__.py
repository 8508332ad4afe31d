"""Mandelbrot, Newton sqrt, saxpy and k-means workloads with timing helpers."""

__version__ = "0.1.0"