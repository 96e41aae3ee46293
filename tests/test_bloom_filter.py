import pytest

from bernoulli_types.bloom_filter import (
    BloomFilter,
    bloom_params,
    bloom_salt,
    make_bloom_filter_fpr,
)
from bernoulli_types.observed_set import ObservedSet

ITEMS = ["alpha", "beta", "gamma", "delta"]


def test_salt_table_start():
    assert bloom_salt(0) == 0x8CA63C47
    assert bloom_salt(1) == 0x42CC2884 ^ 1


def test_salt_wraps_and_mixes_index():
    assert bloom_salt(16) == 0x8CA63C47 ^ 16
    assert bloom_salt(31) == 0x9A948DAB ^ 31


def test_params_for_empty_set():
    assert bloom_params(0, 0.01) == (0, 0)


def test_params_for_thousand_items():
    assert bloom_params(1000, 0.01) == (9586, 7)


@pytest.mark.parametrize("fpr", [0.0, 1.0, 2.0])
def test_params_reject_bad_rate(fpr):
    with pytest.raises(ValueError):
        bloom_params(10, fpr)


def test_inserted_items_are_found():
    bf = make_bloom_filter_fpr(ITEMS, 0.01)
    assert all(bf.contains(x) for x in ITEMS)
    assert all(x in bf for x in ITEMS)
    assert bf.n() == len(ITEMS)


def test_sizes_follow_params():
    bf = make_bloom_filter_fpr(ITEMS, 0.01)
    m, k = bloom_params(len(ITEMS), 0.01)
    assert bf.m() == m
    assert bf.k() == max(1, k)


def test_empty_filter_from_factory():
    bf = make_bloom_filter_fpr([], 0.01)
    assert bf.m() == 0
    assert bf.k() == 1
    assert not bf.contains("anything")
    assert bf.false_positive_rate() == 0.0


def test_insert_into_bitless_filter_fails():
    with pytest.raises(ValueError):
        BloomFilter(0, 3).insert("x")


def test_negative_sizes_rejected():
    with pytest.raises(ValueError):
        BloomFilter(-1, 2)


def test_fpr_is_zero_before_insertion():
    bf = BloomFilter(128, 3)
    assert bf.false_positive_rate() == 0.0
    assert not bf.contains("x")


def test_fpr_grows_with_insertions():
    bf = BloomFilter(256, 3)
    rates = []
    for i in range(20):
        bf.insert(f"item{i}")
        rates.append(bf.false_positive_rate().low)
    assert rates == sorted(rates)
    assert 0.0 < rates[-1] <= 1.0


def test_fpr_is_point_rate():
    bf = BloomFilter.from_items(ITEMS, 64, 2)
    rate = bf.false_positive_rate()
    assert rate.low == rate.high


def test_no_false_negatives():
    assert BloomFilter(64, 2).false_negative_rate() == 0.0


def test_from_items_counts_insertions():
    bf = BloomFilter.from_items(iter(range(50)), 1024, 4)
    assert bf.n() == 50
    assert all(bf.contains(i) for i in range(50))


def test_wrapped_in_observed_set():
    bf = make_bloom_filter_fpr(ITEMS, 0.01)
    s = ObservedSet(bf)
    assert s.contains("alpha")
    assert s.false_negative_rate() == 0.0
    assert s.false_positive_rate() == bf.false_positive_rate()
    fpr = s.false_positive_rate()
    assert 0.0 <= fpr.low <= fpr.high <= 1.0