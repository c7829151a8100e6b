import copy
import ctypes
import multiprocessing

import numpy as np
import numpy.typing as npt

from samplecache import parameters
from samplecache.errors import OracleCapacityError, OracleMismatchError
from samplecache.parallel.oracle import ProcessConsistencyOracle


class SharedMemoryOracle(ProcessConsistencyOracle):
    """Broadcasts the root's draws through shared memory

    Has to be built in the parent process and handed to the children when
    they are started (it can't go through a Pool's task queue). Each child
    then calls bind() with its rank.

    Args:
        n_procs (int): Number of processes taking part in every global draw
        capacity (int, optional): Max number of doubles in one draw. Defaults
        to parameters.oracle_capacity.
        ctx (optional): multiprocessing context to allocate from. Defaults to
        the default context.
        timeout (float, optional): Seconds to wait for the other processes.
        Defaults to parameters.oracle_timeout.
    """

    def __init__(self, n_procs: int, capacity: int = parameters.oracle_capacity, ctx=None, timeout=parameters.oracle_timeout):
        if ctx is None:
            ctx = multiprocessing.get_context()
        self.n_procs = n_procs
        self.capacity = capacity
        # no lock needed, only the root writes and the barrier orders it
        self._buffer = ctx.RawArray(ctypes.c_double, capacity)
        self._size = ctx.RawValue(ctypes.c_long, 0)
        self._barrier = ctx.Barrier(n_procs, timeout=timeout)
        self._rank = 0

    @property
    def rank(self) -> int:
        return self._rank

    def bind(self, rank: int) -> 'SharedMemoryOracle':
        """Handle for one process, sharing the same buffer and barrier

        Args:
            rank (int): The process rank, 0 is the root

        Returns:
            SharedMemoryOracle: The oracle for this rank
        """
        if not 0 <= rank < self.n_procs:
            raise ValueError(f"rank {rank} out of range for {self.n_procs} processes")
        bound = copy.copy(self)
        bound._rank = rank
        return bound

    def broadcast(self, values: npt.ArrayLike) -> npt.NDArray[np.float64]:
        values = np.array(values, dtype=np.float64).ravel()
        n = values.size
        if n > self.capacity:
            raise OracleCapacityError(f"Global draw of {n} values doesn't fit in a buffer of {self.capacity}")

        buf = np.frombuffer(self._buffer, dtype=np.float64)
        if self.is_root:
            buf[:n] = values
            self._size.value = n
        self._barrier.wait()

        if self._size.value != n:
            # break the barrier so the others fail too instead of hanging
            self._barrier.abort()
            raise OracleMismatchError(f"rank {self.rank} drew {n} values but the root drew {self._size.value}")
        agreed = buf[:n].copy()
        # nobody can overwrite the buffer until everyone has read it
        self._barrier.wait()
        return agreed
