import argparse
import pickle

import pandas as pd

from pathlib import Path
from tqdm import tqdm
from time import time as current_timestamp

from samplecache import SampleCache, parameters
from samplecache.utils import samples_frame

parser = argparse.ArgumentParser(prog='SampleDumper', description='Dumps draws from a SampleCache to disk')
parser.add_argument('-n', '--num_draws', type=int, default=10000, help="Number of samples to draw")
parser.add_argument('-c', '--count', type=int, default=parameters.default_count, help="Number of samples to cache. A negative value turns the cache off.")
parser.add_argument('-s', '--seed', type=int, default=parameters.default_seed)
parser.add_argument('-b', '--batchsize', type=int, default=1000, help="Number of samples to draw at once")
parser.add_argument('-o', '--output', type=Path, help="Folder to output runs to")
parser.add_argument('--backend', choices=['cpu', 'gpu'], default=parameters.backend)

args = parser.parse_args()

s = SampleCache(args.seed, args.count, backend=args.backend)

args.output.mkdir(parents=True, exist_ok=True)

# dump run parameters to a metadata file
run_info = {"num_draws": args.num_draws, "count": args.count, "seed": args.seed, "backend": args.backend, "timestamp": current_timestamp()}
with open(args.output/"run_info.pkl", 'wb') as f:
    pickle.dump(run_info, f)

frames = []
num_drawn = 0
progress_bar = tqdm(total=args.num_draws)
while num_drawn < args.num_draws:
    batch = min(args.batchsize, args.num_draws - num_drawn)
    frames.append(samples_frame(s.next_scalars(batch), start_idx=num_drawn))
    num_drawn += batch
    progress_bar.update(batch)
progress_bar.close()

out_name = args.output/"samples.csv"
pd.concat(frames, ignore_index=True).to_csv(out_name, index=False)
print(f"Wrote {num_drawn} samples to {out_name}")
