import cupy

import numpy as np
import numpy.typing as npt


class GPUUniformSource:
    def __init__(self, seed: int):
        self._seed = seed
        self._rs = cupy.random.RandomState(seed=seed)

    @property
    def seed(self) -> int:
        return self._seed

    def reset(self):
        self._rs = cupy.random.RandomState(seed=self._seed)

    def sample(self) -> float:
        return float(self._rs.random_sample())

    def fill(self, num: int) -> npt.NDArray[np.float64]:
        unif_gpu = self._rs.random_sample(size=num, dtype=np.float64)
        # copy back to host memory, the cache lives on the CPU
        return unif_gpu.get()
