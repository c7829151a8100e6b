from samplecache.parallel.oracle import ProcessConsistencyOracle, SerialOracle
from samplecache.parallel.shared_oracle import SharedMemoryOracle
