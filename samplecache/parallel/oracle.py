from abc import ABC, abstractmethod

import numpy as np
import numpy.typing as npt


class ProcessConsistencyOracle(ABC):
    """Collective operation giving every process the same draws

    Every participating process has to call broadcast() the same number of
    times, in the same order, with the same number of values.
    """

    @property
    @abstractmethod
    def rank(self) -> int:
        pass

    @property
    def is_root(self) -> bool:
        return self.rank == 0

    @abstractmethod
    def broadcast(self, values: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Agrees on a set of draws across all processes

        Args:
            values (npt.ArrayLike): The draws this process would use on its own

        Returns:
            npt.NDArray[np.float64]: The root process's draws, identical on
            every process
        """
        pass


class SerialOracle(ProcessConsistencyOracle):
    """Oracle for a run with a single process, the local draws are the global ones"""

    @property
    def rank(self) -> int:
        return 0

    def broadcast(self, values: npt.ArrayLike) -> npt.NDArray[np.float64]:
        return np.array(values, dtype=np.float64).ravel()
