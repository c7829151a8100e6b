import numbers
import warnings

import numpy as np
import numpy.typing as npt

from samplecache import parameters
from samplecache.errors import UnsupportedOperation, EmptyCacheError
from samplecache.helpers import components
from samplecache.parallel.oracle import ProcessConsistencyOracle, SerialOracle
from samplecache.sim.sim_init import make_source


class SampleCache:
    """Seeded uniform random numbers, pre-computed up front

    With count >= 0 the constructor draws count samples in [0, 1) and every
    later read just returns the next one. Once the last sample is read the
    sequence starts over from the first. With a negative count nothing is
    cached and every read draws a fresh sample from the source.

    An uncached SampleCache can't be copied.
    """

    def __init__(self, seed: int = parameters.default_seed, count: int = parameters.default_count, backend: str = parameters.backend, oracle: ProcessConsistencyOracle = None):
        # seeds of 1 or less all map to 1
        self._seed = seed if seed > 1 else 1
        self._backend = backend
        # used only by the global_* methods
        self._oracle = oracle if oracle is not None else SerialOracle()
        self._source = make_source(self._seed, backend)
        self._cached = count >= 0
        self._wrapped = False

        if self._cached:
            self._samples = np.array(self._source.fill(count), dtype=np.float64)
            self._sample_i = 0
            # the source is never touched again once the samples are made
            self._source = None
        else:
            self._samples = np.empty(0, dtype=np.float64)
            self._sample_i = parameters.uncached
        self._samples.setflags(write=False)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def samples(self) -> npt.NDArray[np.float64]:
        """The cached samples, read only. Empty if uncached"""
        return self._samples

    @property
    def count(self) -> int:
        """Number of cached samples, parameters.uncached if nothing is cached"""
        return len(self._samples) if self._cached else parameters.uncached

    @property
    def cached(self) -> bool:
        return self._cached

    @property
    def backend(self) -> str:
        return self._backend

    @property
    def oracle(self) -> ProcessConsistencyOracle:
        return self._oracle

    @property
    def sample_i(self) -> int:
        """Index of the next cached sample to be read

        Can be set to replay part of the sequence. Always
        parameters.uncached for an uncached instance.
        """
        return self._sample_i

    @sample_i.setter
    def sample_i(self, idx: int):
        if not self._cached:
            raise UnsupportedOperation("An uncached SampleCache has no sample index")
        if not isinstance(idx, numbers.Integral) or isinstance(idx, bool):
            raise TypeError(f"Sample index must be an integer, got {type(idx).__name__}")
        if not 0 <= idx < len(self._samples):
            raise IndexError(f"Sample index {idx} out of range for {len(self._samples)} samples")
        self._sample_i = int(idx)

    def copy(self, reset: bool = False) -> 'SampleCache':
        """Copies the seed and samples into a new SampleCache

        Args:
            reset (bool, optional): Start the copy at the first sample instead
            of at this one's index. Defaults to False.

        Raises:
            UnsupportedOperation: If this instance is uncached

        Returns:
            SampleCache: The copy
        """
        c = SampleCache.__new__(SampleCache)
        c.assign(self)
        if reset:
            c._sample_i = 0
            c._wrapped = False
        return c

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def assign(self, other: 'SampleCache') -> None:
        """Makes this instance a copy of other, index included

        Args:
            other (SampleCache): The cache to copy from

        Raises:
            UnsupportedOperation: If other is uncached
        """
        if not other.cached:
            raise UnsupportedOperation("Can't copy an uncached SampleCache (count < 0)")
        if other is self:
            return
        self._seed = other._seed
        self._backend = other._backend
        self._oracle = other._oracle
        self._source = None
        self._cached = True
        self._samples = other._samples.copy()
        self._samples.setflags(write=False)
        self._sample_i = other._sample_i
        self._wrapped = other._wrapped

    def reset(self) -> None:
        """Goes back to the start of the sequence"""
        if self._cached:
            self._sample_i = 0
            self._wrapped = False
        else:
            self._source.reset()

    def _advance(self, num: int, stacklevel: int) -> None:
        # stacklevel counts from this method, so it must point at the user's call
        n = len(self._samples)
        if self._sample_i + num >= n and not self._wrapped:
            warnings.warn(f"SampleCache with seed {self._seed} used all {n} samples, later reads repeat the sequence", RuntimeWarning, stacklevel=stacklevel)
            self._wrapped = True
        self._sample_i = (self._sample_i + num) % n

    def next_scalar(self) -> float:
        """Returns the next sample in [0, 1)

        Raises:
            EmptyCacheError: If the cache was built with count = 0

        Returns:
            float: The sample
        """
        if not self._cached:
            return self._source.sample()
        if len(self._samples) == 0:
            raise EmptyCacheError("Can't read from a SampleCache with count = 0")
        s = self._samples[self._sample_i]
        self._advance(1, stacklevel=3)
        return float(s)

    def next_scalars(self, num: int) -> npt.NDArray[np.float64]:
        """Returns the next num samples, same as num calls to next_scalar()

        Args:
            num (int): Number of samples

        Raises:
            ValueError: If num is negative
            EmptyCacheError: If the cache was built with count = 0

        Returns:
            npt.NDArray[np.float64]: The samples in draw order
        """
        return self._take(num, stacklevel=4)

    def _take(self, num: int, stacklevel: int) -> npt.NDArray[np.float64]:
        if num < 0:
            raise ValueError(f"Can't draw a negative number of samples ({num})")
        if not self._cached:
            return np.asarray(self._source.fill(num), dtype=np.float64)
        if num == 0:
            return np.empty(0, dtype=np.float64)
        if len(self._samples) == 0:
            raise EmptyCacheError("Can't read from a SampleCache with count = 0")
        idx = (self._sample_i + np.arange(num)) % len(self._samples)
        self._advance(num, stacklevel)
        return self._samples[idx]

    # local random numbers

    def sample01(self, like=float):
        """Returns a value whose components each lie in [0, 1)

        Args:
            like (optional): The type to build: float, int, a shape tuple, a
            numpy array, a list or a component dataclass. Defaults to float.

        Returns:
            A value of that type. Integers are rounded so they are 0 or 1
        """
        lay = components.layout(like)
        return lay.build(self._take(lay.n_components, stacklevel=4))

    def position(self, start, end):
        """Returns a value between start and end, component by component"""
        lay = components.position_layout(start, end)
        return lay.build(self._take(lay.n_components, stacklevel=4))

    def randomise01(self, value) -> None:
        """Overwrites every component of value with a sample in [0, 1)"""
        n = components.mutable_count(value)
        components.assign(value, self._take(n, stacklevel=4))

    # global random numbers, the same on every process

    def _global_scalars(self, num: int) -> npt.NDArray[np.float64]:
        # every process draws, so every index moves by the same amount
        local = self._take(num, stacklevel=5)
        return self._oracle.broadcast(local)

    def global_sample01(self, like=float):
        """sample01() agreed across all processes sharing the oracle"""
        lay = components.layout(like)
        return lay.build(self._global_scalars(lay.n_components))

    def global_position(self, start, end):
        """position() agreed across all processes sharing the oracle"""
        lay = components.position_layout(start, end)
        return lay.build(self._global_scalars(lay.n_components))

    def global_randomise01(self, value) -> None:
        """randomise01() agreed across all processes sharing the oracle"""
        n = components.mutable_count(value)
        components.assign(value, self._global_scalars(n))

    def __repr__(self):
        return f"SampleCache(seed={self._seed}, count={self.count}, sample_i={self._sample_i})"
