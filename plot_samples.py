import argparse
import pickle

from pathlib import Path
from numpy import histogram

import matplotlib.pyplot as plt

from samplecache.utils import read_samples, uniformity_pvalue, human_format

plt.rcParams['figure.figsize'] = (12, 8)

parser = argparse.ArgumentParser(prog='SamplePlot', description='Histograms a sample dump and checks it is uniform')
parser.add_argument('-i', '--input', type=Path, help="Folder written by dump_samples.py")
parser.add_argument('-p', '--file-prefix', type=str, default="samples")
parser.add_argument('--bins', default=50, type=int)

args = parser.parse_args()

with open(args.input/"run_info.pkl", 'rb') as f:
    run_info : dict = pickle.load(f)

df = read_samples(args.input/"samples.csv")
values = df['value'].to_numpy()

print(f"Samples: {len(values)}")
print(f"KS p-value against U(0,1): {uniformity_pvalue(values)}")
if run_info['count'] >= 0 and len(values) > run_info['count']:
    print(f"NOTE: {len(values)} draws from a cache of {run_info['count']}, the sequence repeats")

counts, bins = histogram(values, args.bins, range=(0, 1))
fig, ax = plt.subplots()
ax.hist(bins[:-1], bins, weights=counts, rwidth=0.8)
ax.set_title(f"{human_format(len(values))} Samples (Seed {run_info['seed']}, Cache Size {run_info['count']}, {run_info['backend'].upper()})")
ax.set_xlabel("Sample")
ax.set_ylabel("Count")
fig.tight_layout()
fig.savefig(f"{args.file_prefix}_seed{run_info['seed']}.png")
