from samplecache import parameters
from samplecache.sim.uniform_source import UniformSource

backends = ("cpu", "gpu")


def make_source(seed: int, backend: str = parameters.backend):
    """Makes a seeded uniform source for the requested backend

    Args:
        seed (int): The seed for the source
        backend (str, optional): "cpu" for numpy or "gpu" for cupy. Defaults
        to parameters.backend.

    Raises:
        ValueError: If the backend isn't one of the known backends

    Returns:
        UniformSource | GPUUniformSource: An object with sample(), fill(num)
        and reset() methods drawing from [0, 1)
    """
    if backend == "cpu":
        return UniformSource(seed)
    elif backend == "gpu":
        # only import cupy if someone actually asks for the GPU
        from samplecache.sim.gpu_source import GPUUniformSource
        return GPUUniformSource(seed)
    raise ValueError(f"Unknown backend '{backend}', expected one of {backends}")
