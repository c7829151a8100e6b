import numpy as np
import numpy.typing as npt


class UniformSource:
    def __init__(self, seed: int):
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def reset(self):
        # back to the start of the stream
        self._rng = np.random.default_rng(self._seed)

    def sample(self) -> float:
        return float(self._rng.random())

    def fill(self, num: int) -> npt.NDArray[np.float64]:
        # one call per element would give the same values, this is just faster
        return self._rng.random(num)
