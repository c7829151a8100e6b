# seed used when none is given on the command line
default_seed = 42

# number of samples to pre-compute
# anything negative turns the cache off and every draw goes to the source
default_count = 10000
uncached = -1

# "cpu" uses numpy, "gpu" needs cupy installed
backend = "cpu"

# size of the shared buffer used for global samples, in doubles
# a Tensor needs 9, so this leaves plenty of headroom
oracle_capacity = 64
# seconds to wait at the barrier before giving up, None waits forever
oracle_timeout = None
