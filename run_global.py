import argparse
import multiprocessing as mp

import numpy as np

from samplecache import SampleCache, Vector, parameters
from samplecache.parallel import SharedMemoryOracle


def worker(rank, oracle, seed, count, num_draws, results):
    # every process gets a different seed on purpose, the global draws
    # should still come out the same everywhere
    s = SampleCache(seed + rank, count, oracle=oracle.bind(rank))
    draws = []
    for i in range(num_draws):
        v = s.global_position(Vector(-1.0, -1.0, -1.0), Vector(1.0, 1.0, 1.0))
        draws.append((v.x, v.y, v.z))
    results.put((rank, np.array(draws), s.sample_i))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(prog='GlobalSampleCheck', description='Checks global samples agree across processes')
    parser.add_argument('-p', '--procs', type=int, default=mp.cpu_count())
    parser.add_argument('-n', '--num_draws', type=int, default=1000)
    parser.add_argument('-c', '--count', type=int, default=parameters.default_count)
    parser.add_argument('-s', '--seed', type=int, default=parameters.default_seed)

    args = parser.parse_args()

    print(f"Starting {args.procs} processes.....")
    oracle = SharedMemoryOracle(args.procs)
    results = mp.Queue()
    procs = [mp.Process(target=worker, args=(r, oracle, args.seed, args.count, args.num_draws, results)) for r in range(args.procs)]
    for p in procs:
        p.start()
    # drain the queue before joining or a full pipe can block the children
    out = dict()
    for i in range(args.procs):
        rank, draws, sample_i = results.get()
        out[rank] = (draws, sample_i)
    for p in procs:
        p.join()

    root_draws, root_i = out[0]
    agree = all(np.array_equal(d, root_draws) and i == root_i for d, i in out.values())
    print(f"{args.num_draws} global draws on {args.procs} processes, sample index {root_i}")
    print("All processes agree" if agree else "MISMATCH between processes")
