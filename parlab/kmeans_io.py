"""Binary data files and text logs for the k-means benchmark."""

from __future__ import annotations

import random
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import os

import numpy as np

PathLike = Union[str, "os.PathLike[str]"]

_HEADER = struct.Struct("<iiid")


@dataclass
class KMeansData:
    """Points, centroids, assignments and convergence threshold of a run."""

    data: np.ndarray
    centroids: np.ndarray
    assignments: np.ndarray
    epsilon: float

    def __post_init__(self) -> None:
        self.data = np.asarray(self.data, dtype=np.float64)
        self.centroids = np.asarray(self.centroids, dtype=np.float64)
        self.assignments = np.asarray(self.assignments, dtype=np.int32)
        self.epsilon = float(self.epsilon)
        if self.data.ndim != 2 or self.centroids.ndim != 2:
            raise ValueError("data and centroids must be 2-D arrays")
        if self.data.shape[1] != self.centroids.shape[1]:
            raise ValueError("data and centroids differ in dimension")
        if self.assignments.shape != (self.data.shape[0],):
            raise ValueError("need one assignment per data point")

    @property
    def m(self) -> int:
        """Number of data points."""
        return self.data.shape[0]

    @property
    def n(self) -> int:
        """Dimension of each point."""
        return self.data.shape[1]

    @property
    def k(self) -> int:
        """Number of clusters."""
        return self.centroids.shape[0]


def read_data(path: PathLike) -> KMeansData:
    """Read a data file: M, N, K, epsilon, then points, centroids, assignments."""
    print(f"Reading {Path(path).name}...")
    raw = Path(path).read_bytes()
    if len(raw) < _HEADER.size:
        raise ValueError("data file is too short to hold its header")
    m, n, k, epsilon = _HEADER.unpack_from(raw)
    if m < 0 or n < 0 or k < 0:
        raise ValueError(f"negative sizes in data file: M={m}, N={n}, K={k}")
    expected = _HEADER.size + 8 * m * n + 8 * k * n + 4 * m
    if len(raw) < expected:
        raise ValueError(f"data file holds {len(raw)} bytes, expected {expected}")
    offset = _HEADER.size
    data = np.frombuffer(raw, dtype="<f8", count=m * n, offset=offset).reshape(m, n)
    offset += 8 * m * n
    centroids = np.frombuffer(raw, dtype="<f8", count=k * n, offset=offset).reshape(k, n)
    offset += 8 * k * n
    assignments = np.frombuffer(raw, dtype="<i4", count=m, offset=offset)
    return KMeansData(data.copy(), centroids.copy(), assignments.copy(), epsilon)


def write_data(path: PathLike, dataset: KMeansData) -> None:
    """Write ``dataset`` in the format :func:`read_data` reads."""
    header = _HEADER.pack(dataset.m, dataset.n, dataset.k, dataset.epsilon)
    body = (
        dataset.data.astype("<f8").tobytes()
        + dataset.centroids.astype("<f8").tobytes()
        + dataset.assignments.astype("<i4").tobytes()
    )
    Path(path).write_bytes(header + body)


def log_to_file(
    path: PathLike,
    sample_rate: float,
    dataset: KMeansData,
    rng: Optional[random.Random] = None,
) -> None:
    """Write a text log: a header, a random sample of points, then all centroids."""
    if rng is None:
        rng = random.Random()
    lines = [f"{dataset.m},{dataset.n},{dataset.k}\n"]
    for index, (point, cluster) in enumerate(zip(dataset.data, dataset.assignments)):
        if rng.random() < sample_rate:
            values = "".join(f"{v:g} " for v in point)
            lines.append(f"Example {index}, cluster {int(cluster)}: {values}\n")
    for index, centroid in enumerate(dataset.centroids):
        values = "".join(f"{v:g} " for v in centroid)
        lines.append(f"Centroid {index}: {values}\n")
    Path(path).write_text("".join(lines))