import numpy as np
import pytest

from parlab.kmeans import (
    compute_assignments,
    compute_centroids,
    compute_cost,
    dist,
    k_means,
    stopping_condition_met,
)


def test_dist_pythagorean():
    assert dist([0.0, 0.0], [3.0, 4.0]) == pytest.approx(5.0)


def test_dist_is_symmetric_and_zero_on_self():
    a = [1.0, -2.0, 0.5]
    b = [4.0, 2.0, -1.0]
    assert dist(a, b) == dist(b, a)
    assert dist(a, a) == 0.0


def test_dist_rejects_mismatched_dimensions():
    with pytest.raises(ValueError):
        dist([1.0], [1.0, 2.0])


def test_stopping_condition():
    assert stopping_condition_met([1.0, 2.0], [1.05, 2.0], 0.1)
    assert not stopping_condition_met([1.0, 2.0], [1.5, 2.0], 0.1)
    assert stopping_condition_met([], [], 0.1)


def test_compute_assignments_nearest():
    data = np.array([[0.0, 0.0], [9.0, 9.0], [1.0, 0.0]])
    centroids = np.array([[0.0, 0.0], [10.0, 10.0]])
    assert compute_assignments(data, centroids, 0, 2).tolist() == [0, 1, 0]


def test_compute_assignments_tie_goes_to_lower_index():
    data = np.array([[0.0]])
    centroids = np.array([[-1.0], [1.0]])
    assert compute_assignments(data, centroids, 0, 2).tolist() == [0]


def test_compute_assignments_respects_range():
    data = np.array([[0.0], [10.0]])
    centroids = np.array([[0.0], [10.0], [20.0]])
    assert compute_assignments(data, centroids, 1, 3).tolist() == [1, 1]
    assert compute_assignments(data, centroids, 0, 0).tolist() == [-1, -1]


def test_compute_centroids_means_and_empty_cluster():
    data = np.array([[0.0, 2.0], [2.0, 4.0], [10.0, 10.0]])
    centroids = compute_centroids(data, [0, 0, 1], 3)
    np.testing.assert_allclose(centroids[0], data[:2].mean(axis=0))
    np.testing.assert_allclose(centroids[1], data[2])
    np.testing.assert_array_equal(centroids[2], np.zeros(2))


def test_compute_centroids_rejects_bad_labels():
    with pytest.raises(ValueError):
        compute_centroids(np.zeros((2, 1)), [0, 5], 2)


def test_compute_cost_updates_only_range():
    data = np.array([[0.0, 0.0], [3.0, 4.0], [10.0, 10.0]])
    centroids = np.array([[0.0, 0.0], [10.0, 10.0]])
    cost = np.array([-1.0, -1.0])
    result = compute_cost(data, centroids, [0, 0, 1], 0, 1, cost)
    assert result is cost
    assert result[0] == pytest.approx(dist(data[1], centroids[0]))
    assert result[1] == -1.0


def test_k_means_converges_to_cluster_means():
    data = np.array([[0.0, 0.0], [0.0, 1.0], [10.0, 10.0], [10.0, 11.0]])
    start = np.array([[0.0, 0.0], [10.0, 10.0]])
    centroids, labels = k_means(data, start, [0, 0, 0, 0], 0.01)
    assert labels.tolist() == [0, 0, 1, 1]
    np.testing.assert_allclose(centroids[0], data[:2].mean(axis=0))
    np.testing.assert_allclose(centroids[1], data[2:].mean(axis=0))
    np.testing.assert_array_equal(start, [[0.0, 0.0], [10.0, 10.0]])


def test_k_means_result_is_a_fixed_point():
    rng = np.random.default_rng(5)
    data = np.concatenate([rng.normal(0, 0.3, (30, 3)), rng.normal(5, 0.3, (30, 3))])
    start = data[[0, 1, 2]].copy()
    centroids, labels = k_means(data, start, np.zeros(60, dtype=np.int32), 1e-9)
    np.testing.assert_array_equal(compute_assignments(data, centroids, 0, 3), labels)
    np.testing.assert_allclose(compute_centroids(data, labels, 3), centroids)


def test_k_means_rejects_dimension_mismatch():
    with pytest.raises(ValueError):
        k_means(np.zeros((2, 2)), np.zeros((1, 3)), [0, 0], 0.1)