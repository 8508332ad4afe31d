"""K-means clustering with Euclidean distance and a per-cluster cost test."""

from __future__ import annotations

from typing import Tuple

import numpy as np

INITIAL_DISTANCE = 1e30


def dist(x, y) -> float:
    """Euclidean distance between two points of the same dimension."""
    a = np.asarray(x, dtype=np.float64)
    b = np.asarray(y, dtype=np.float64)
    if a.shape != b.shape:
        raise ValueError(f"points differ in shape: {a.shape} vs {b.shape}")
    return float(np.sqrt(np.sum((a - b) ** 2)))


def stopping_condition_met(prev_cost, curr_cost, epsilon: float) -> bool:
    """True when no cluster's cost changed by more than ``epsilon``."""
    prev = np.asarray(prev_cost, dtype=np.float64)
    curr = np.asarray(curr_cost, dtype=np.float64)
    return not bool(np.any(np.abs(prev - curr) > epsilon))


def _as_matrix(data) -> np.ndarray:
    matrix = np.asarray(data, dtype=np.float64)
    if matrix.ndim != 2:
        raise ValueError(f"expected a 2-D array of points, got {matrix.ndim} dimensions")
    return matrix


def _distances_to(data: np.ndarray, centroid: np.ndarray) -> np.ndarray:
    return np.sqrt(np.sum((data - centroid) ** 2, axis=1))


def compute_assignments(data, centroids, start: int, end: int) -> np.ndarray:
    """Assign each point to the closest of centroids ``start`` to ``end - 1``.

    Ties go to the lower-numbered centroid; a point no candidate is closer
    than 1e30 to stays at -1.
    """
    points = _as_matrix(data)
    centres = _as_matrix(centroids)
    if not 0 <= start <= end <= len(centres):
        raise ValueError(f"centroid range {start}..{end} outside 0..{len(centres)}")
    min_dist = np.full(len(points), INITIAL_DISTANCE)
    assignments = np.full(len(points), -1, dtype=np.int32)
    for k in range(start, end):
        d = _distances_to(points, centres[k])
        closer = d < min_dist
        min_dist[closer] = d[closer]
        assignments[closer] = k
    return assignments


def _check_assignments(assignments: np.ndarray, m: int, k: int) -> np.ndarray:
    labels = np.asarray(assignments, dtype=np.int64)
    if labels.shape != (m,):
        raise ValueError(f"expected {m} assignments, got shape {labels.shape}")
    if labels.size and (labels.min() < 0 or labels.max() >= k):
        raise ValueError(f"assignments must lie in 0..{k - 1}")
    return labels


def compute_centroids(data, assignments, k: int) -> np.ndarray:
    """Return the mean of the points assigned to each of the ``k`` clusters.

    A cluster with no points gets the zero vector.
    """
    points = _as_matrix(data)
    labels = _check_assignments(assignments, len(points), k)
    sums = np.zeros((k, points.shape[1]), dtype=np.float64)
    np.add.at(sums, labels, points)
    counts = np.maximum(np.bincount(labels, minlength=k), 1)
    return sums / counts[:, None]


def compute_cost(data, centroids, assignments, start: int, end: int, curr_cost) -> np.ndarray:
    """Update ``curr_cost[start:end]`` with each cluster's summed point distance.

    Returns ``curr_cost``; entries outside the range are left as they were.
    """
    points = _as_matrix(data)
    centres = _as_matrix(centroids)
    k = len(centres)
    labels = _check_assignments(assignments, len(points), k)
    if not 0 <= start <= end <= k:
        raise ValueError(f"cluster range {start}..{end} outside 0..{k}")
    d = np.sqrt(np.sum((points - centres[labels]) ** 2, axis=1))
    accum = np.bincount(labels, weights=d, minlength=k)
    curr_cost[start:end] = accum[start:end]
    return curr_cost


def k_means(data, centroids, assignments, epsilon: float) -> Tuple[np.ndarray, np.ndarray]:
    """Run k-means until every cluster cost changes by at most ``epsilon``.

    Returns the final ``(centroids, assignments)``; the inputs are not changed.
    """
    points = _as_matrix(data)
    centres = _as_matrix(centroids).copy()
    if centres.shape[1] != points.shape[1]:
        raise ValueError("points and centroids differ in dimension")
    labels = np.array(assignments, dtype=np.int32)
    if labels.shape != (len(points),):
        raise ValueError(f"expected {len(points)} assignments, got shape {labels.shape}")
    k = len(centres)
    prev_cost = np.full(k, INITIAL_DISTANCE)
    curr_cost = np.zeros(k)
    while not stopping_condition_met(prev_cost, curr_cost, epsilon):
        prev_cost = curr_cost.copy()
        labels = compute_assignments(points, centres, 0, k)
        centres = compute_centroids(points, labels, k)
        curr_cost = compute_cost(points, centres, labels, 0, k, curr_cost)
    return centres, labels