import numpy as np
import pytest

from samplecache import SampleCache
from samplecache.sim.sim_init import make_source
from samplecache.sim.uniform_source import UniformSource


def gpu_available():
    cupy = pytest.importorskip("cupy")
    try:
        return cupy.cuda.runtime.getDeviceCount() > 0
    except Exception:
        return False


def test_uniform_source_is_repeatable():
    a = UniformSource(99)
    b = UniformSource(99)
    assert [a.sample() for i in range(10)] == [b.sample() for i in range(10)]
    np.testing.assert_array_equal(a.fill(10), b.fill(10))


def test_fill_matches_single_samples():
    a = UniformSource(99)
    b = UniformSource(99)
    np.testing.assert_array_equal(a.fill(25), [b.sample() for i in range(25)])


def test_reset_restarts_stream():
    a = UniformSource(5)
    first = a.fill(5)
    a.reset()
    np.testing.assert_array_equal(a.fill(5), first)
    assert a.seed == 5


def test_make_source():
    assert isinstance(make_source(1, "cpu"), UniformSource)
    with pytest.raises(ValueError):
        make_source(1, "tpu")
    with pytest.raises(ValueError):
        SampleCache(1, 10, backend="tpu")


def test_gpu_source():
    if not gpu_available():
        pytest.skip("no CUDA device")
    a = SampleCache(3, 100, backend="gpu")
    b = SampleCache(3, 100, backend="gpu")
    assert a.backend == "gpu"
    np.testing.assert_array_equal(a.samples, b.samples)
    assert np.all((a.samples >= 0.0) & (a.samples < 1.0))
    u = SampleCache(3, -1, backend="gpu")
    assert 0.0 <= u.next_scalar() < 1.0
