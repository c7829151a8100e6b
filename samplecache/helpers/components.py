import dataclasses
import math
import numbers
import typing

import numpy as np
import numpy.typing as npt

from dataclasses import dataclass


@dataclass(frozen=True)
class ComponentLayout:
    """How a value type is built out of scalar draws

    Args:
        n_components (int): Number of scalar draws one value consumes
        build (typing.Callable): Takes an array of n_components draws and
        returns the value, in the fixed component order of the type
    """
    n_components: int
    build: typing.Callable[[np.ndarray], typing.Any]


def round_half_up(u: float) -> int:
    # python's round() goes to even, which would make 0.5 -> 0
    return int(math.floor(u + 0.5))


def _is_label(like) -> bool:
    if isinstance(like, type):
        return issubclass(like, numbers.Integral) and not issubclass(like, bool)
    return isinstance(like, numbers.Integral) and not isinstance(like, bool)


def _is_scalar(like) -> bool:
    if isinstance(like, type):
        return issubclass(like, numbers.Real) and not issubclass(like, (bool, numbers.Integral))
    return isinstance(like, numbers.Real) and not isinstance(like, (bool, numbers.Integral))


def _is_shape(like) -> bool:
    return isinstance(like, tuple) and all(isinstance(i, numbers.Integral) for i in like)


def _dataclass_type(like):
    if dataclasses.is_dataclass(like):
        return like if isinstance(like, type) else type(like)
    return None


def layout(like) -> ComponentLayout:
    """Finds the component layout of a value type

    Args:
        like: A type or an example value. Accepts float, int, a shape tuple,
        a numpy array, a list of numbers or a dataclass whose fields are all
        scalars (like Vector or Tensor)

    Raises:
        TypeError: If there is no way to build the type from scalars
        ValueError: If a shape tuple has a negative dimension

    Returns:
        ComponentLayout: The component count and builder for the type
    """
    if _is_scalar(like):
        return ComponentLayout(1, lambda d: float(d[0]))
    if _is_label(like):
        return ComponentLayout(1, lambda d: round_half_up(d[0]))
    if _is_shape(like):
        if any(i < 0 for i in like):
            raise ValueError(f"Negative dimension in shape {like}")
        shape = tuple(int(i) for i in like)
        return ComponentLayout(int(np.prod(shape, dtype=np.int64)), lambda d: np.reshape(d, shape))
    if isinstance(like, np.ndarray):
        if not np.issubdtype(like.dtype, np.floating):
            raise TypeError(f"Can't sample arrays of dtype {like.dtype}, only floating point")
        shape, dtype = like.shape, like.dtype
        return ComponentLayout(like.size, lambda d: np.reshape(d, shape).astype(dtype))
    if isinstance(like, list):
        return ComponentLayout(len(like), lambda d: [float(i) for i in d])
    cls = _dataclass_type(like)
    if cls is not None:
        fields = dataclasses.fields(cls)
        return ComponentLayout(len(fields), lambda d: cls(*[float(i) for i in d]))
    raise TypeError(f"Don't know how to build a {type(like).__name__} from uniform samples")


def mutable_count(value) -> int:
    """Number of components of a value that can be randomised in place

    Args:
        value: A numpy array, a list or a non-frozen dataclass instance

    Raises:
        TypeError: If the value can't be changed in place

    Returns:
        int: The component count
    """
    if isinstance(value, np.ndarray):
        if not np.issubdtype(value.dtype, np.floating):
            raise TypeError(f"Can't randomise arrays of dtype {value.dtype}, only floating point")
        if not value.flags.writeable:
            raise TypeError("Can't randomise a read-only array")
        return value.size
    if isinstance(value, list):
        return len(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        if type(value).__dataclass_params__.frozen:
            raise TypeError(f"{type(value).__name__} is frozen and can't be randomised in place")
        return len(dataclasses.fields(value))
    raise TypeError(f"{type(value).__name__} is immutable, use sample01() instead")


def assign(value, draws: npt.NDArray[np.float64]) -> None:
    """Overwrites every component of value with the given draws, in place

    Args:
        value: A value accepted by mutable_count()
        draws (npt.NDArray[np.float64]): One draw per component
    """
    if isinstance(value, np.ndarray):
        value[...] = np.reshape(draws, value.shape)
    elif isinstance(value, list):
        value[:] = [float(i) for i in draws]
    else:
        for f, d in zip(dataclasses.fields(value), draws):
            setattr(value, f.name, float(d))


def position_layout(start, end) -> ComponentLayout:
    """Layout for a value lying between start and end

    Each component i is start[i] + u_i*(end[i] - start[i]). Integer labels
    round the offset, so for them the range includes end.

    Args:
        start: The lower corner
        end: The upper corner, same type as start

    Raises:
        TypeError: If start and end aren't compatible

    Returns:
        ComponentLayout: Builder mapping the draws between start and end
    """
    if _is_label(start) and _is_label(end):
        return ComponentLayout(1, lambda d: start + round_half_up(d[0]*(end - start)))
    if isinstance(start, numbers.Real) and isinstance(end, numbers.Real):
        return ComponentLayout(1, lambda d: float(start + d[0]*(end - start)))

    cls = _dataclass_type(start)
    if cls is not None:
        if type(end) is not cls:
            raise TypeError(f"start is a {cls.__name__} but end is a {type(end).__name__}")
        names = [f.name for f in dataclasses.fields(cls)]
        lo = [getattr(start, n) for n in names]
        hi = [getattr(end, n) for n in names]
        return ComponentLayout(
            len(names),
            lambda d: cls(*[float(a + u*(b - a)) for a, b, u in zip(lo, hi, d)])
        )

    # anything left should be array-like
    lo = np.asarray(start, dtype=np.float64)
    hi = np.asarray(end, dtype=np.float64)
    shape = np.broadcast(lo, hi).shape
    n = int(np.prod(shape, dtype=np.int64))
    return ComponentLayout(n, lambda d: lo + np.reshape(d, shape)*(hi - lo))
