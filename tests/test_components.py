from dataclasses import dataclass

import numpy as np
import pytest

from samplecache import Vector, Tensor
from samplecache.helpers import components


@dataclass(frozen=True)
class FrozenPair:
    a: float = 0.0
    b: float = 0.0


@pytest.mark.parametrize("like,k", [
    (float, 1), (0.3, 1), (np.float32, 1), (int, 1), (4, 1),
    ((3,), 3), ((2, 3, 4), 24), ((), 1),
    (np.zeros((5, 2)), 10), ([0.0, 0.0], 2),
    (Vector, 3), (Vector(), 3), (Tensor, 9),
])
def test_layout_counts(like, k):
    assert components.layout(like).n_components == k


def test_round_half_up():
    assert components.round_half_up(0.5) == 1
    assert components.round_half_up(0.4999) == 0
    assert components.round_half_up(0.0) == 0
    assert components.round_half_up(2.5) == 3


def test_build_order():
    d = np.arange(9, dtype=np.float64)/10
    t = components.layout(Tensor).build(d)
    assert (t.xx, t.xy, t.zz) == (0.0, 0.1, 0.8)
    arr = components.layout((3, 3)).build(d)
    assert arr[0, 1] == 0.1
    assert arr[2, 0] == 0.6


def test_unsupported_types():
    with pytest.raises(TypeError):
        components.layout("x")
    with pytest.raises(TypeError):
        components.layout(True)
    with pytest.raises(TypeError):
        components.layout(np.zeros(3, dtype=np.int64))


def test_mutable_count():
    assert components.mutable_count(np.zeros((2, 2))) == 4
    assert components.mutable_count([1.0, 2.0, 3.0]) == 3
    assert components.mutable_count(Tensor()) == 9
    ro = np.zeros(3)
    ro.setflags(write=False)
    for value in (1.0, 3, (0.0, 0.0), FrozenPair(), ro, np.zeros(2, dtype=np.int32), Vector):
        with pytest.raises(TypeError):
            components.mutable_count(value)


def test_position_layout():
    lay = components.position_layout(np.zeros((2, 2)), 2.0)
    assert lay.n_components == 4
    np.testing.assert_array_equal(lay.build(np.full(4, 0.5)), np.ones((2, 2)))

    lay = components.position_layout([0.0, 10.0], [1.0, 20.0])
    np.testing.assert_array_equal(lay.build(np.array([0.5, 0.5])), [0.5, 15.0])

    assert components.position_layout(0, 10).build(np.array([0.25])) == 3
    assert components.position_layout(0, 10.0).build(np.array([0.25])) == 2.5


def test_position_layout_mismatched_dataclasses():
    with pytest.raises(TypeError):
        components.position_layout(Vector(), Tensor())


def test_negative_shape():
    with pytest.raises(ValueError):
        components.layout((-2, 1))
    assert components.layout((0, 3)).n_components == 0
