import numpy as np

from samplecache import SampleCache
from samplecache.utils import samples_frame, read_samples, uniformity_pvalue, human_format


def test_samples_frame():
    df = samples_frame([0.1, 0.2, 0.3], start_idx=5)
    assert list(df.columns) == ["draw", "value"]
    assert list(df['draw']) == [5, 6, 7]
    assert list(df['value']) == [0.1, 0.2, 0.3]


def test_read_samples(tmp_path):
    s = SampleCache(2, 50)
    samples_frame(s.samples).to_csv(tmp_path/"samples.csv", index=False)
    df = read_samples(tmp_path/"samples.csv")
    assert len(df) == 50
    np.testing.assert_allclose(df['value'].to_numpy(), s.samples)


def test_uniformity():
    assert uniformity_pvalue(SampleCache(2, 10000).samples) > 1E-3
    assert uniformity_pvalue(np.linspace(0.0, 0.5, 1000)) < 1E-6


def test_human_format():
    assert human_format(25000) == "25K"
    assert human_format(999) == "999"
    assert human_format(3000000) == "3M"
