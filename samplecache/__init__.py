from samplecache.SampleCache import SampleCache
from samplecache.errors import UnsupportedOperation, EmptyCacheError, OracleCapacityError, OracleMismatchError
from samplecache.structures import Vector, Tensor
