from __future__ import annotations

import pytest
import torch

from kcentroids.datasets import REFERENCE_POINTS, reference_points, make_uniform_points


def test_reference_points():
    X = reference_points()
    assert X.shape == (15, 2)
    assert X.dtype == torch.float64
    assert X[0].tolist() == [1.0, 1.0]
    assert X[-1].tolist() == [10.0, 5.0]
    assert len(set(REFERENCE_POINTS)) == 15


def test_uniform_points_inside_area():
    X = make_uniform_points(500, width=30, depth=20, margin=1.0, random_state=0)

    assert X.shape == (500, 2)
    assert torch.all(X[:, 0] >= -14.0) and torch.all(X[:, 0] < 14.0)
    assert torch.all(X[:, 1] >= -9.0) and torch.all(X[:, 1] < 9.0)


def test_uniform_points_reproducible():
    a = make_uniform_points(10, random_state=5)
    b = make_uniform_points(10, random_state=5)
    c = make_uniform_points(10, random_state=6)

    assert torch.equal(a, b)
    assert not torch.equal(a, c)


@pytest.mark.parametrize("kwargs", [dict(n_points=-1), dict(n_points=3, margin=20.0)])
def test_uniform_points_rejects_bad_arguments(kwargs):
    with pytest.raises(ValueError):
        make_uniform_points(**kwargs)
