# bernoulli-types

Probabilistic data structures that keep apart the *latent* value they model and the *observed* value they return.

An observation can be wrong at some rate. The package carries that rate as a `RateSpan`, an interval inside [0, 1]. When observations are combined, their error intervals are combined as well.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `bernoulli_types.rate_span` | `RateSpan`: an immutable interval clamped to [0, 1], with `+`, `-`, `*`, `&` (intersection) and `\|` (hull). It also accepts plain numbers as point rates. |
| `bernoulli_types.observed_bool` | `ObservedBool` (alias `BernoulliBool`) with `~`, `&`, `\|` and `^`, plus the functions `nor`, `nand` and `xnor`. Every operation propagates the error interval. |
| `bernoulli_types.observed_set` | `ObservedSet` (alias `BernoulliSet`): wraps any backend that has `contains`, `false_positive_rate` and `false_negative_rate`, and reports the rates as `RateSpan`. |
| `bernoulli_types.observed_map` | `ObservedMap` (alias `BernoulliMap`): wraps any callable that also has `error_rate()` and `error_rate(x)`. |
| `bernoulli_types.hash_set` | `SimpleHash`, a 64-bit hash (FNV-1a over `str`, bytes and floats, identity on integers), and `HashSet`, a seed-and-threshold approximate set. |
| `bernoulli_types.hash_set_builder` | `HashSetBuilder`: searches random seeds for one under which every element hashes at or below the threshold. |
| `bernoulli_types.hash_map` | `SimpleDecoder`, `HashMap` and `make_hash_map`. |
| `bernoulli_types.bloom_filter` | `BloomFilter`, `bloom_salt`, `bloom_params` and `make_bloom_filter_fpr`. |
| `bernoulli_types.space_optimal_bloom_filter` | `SpaceOptimalBloomFilter`: an immutable filter of about 1.44 · log2(1/fpr) bits per element. It is hashable and comparable, and iterating over it yields its bits. |
| `bernoulli_types.count_min_sketch` | `CountMinSketch`: frequency estimates that never undercount. |
| `bernoulli_types.minhash` | `MinHash`, with `MinHash.jaccard_estimate(a, b)`. |
| `bernoulli_types.examples` | The demonstration functions and the `bernoulli-examples` command. |

## Quick tour

```python
from bernoulli_types.rate_span import RateSpan
from bernoulli_types.observed_bool import ObservedBool

a = ObservedBool(True, 0.1)
b = ObservedBool(True, 0.2)
both = a & b
print(both.value, both.error)   # True, error of about 0.28

print(RateSpan(0.1, 0.3) + RateSpan(0.2, 0.4))   # about [0.3, 0.7]
```

An approximate set built by seed search:

```python
from bernoulli_types.hash_set_builder import HashSetBuilder
from bernoulli_types.observed_set import ObservedSet

words = ["apple", "banana"]
hs = HashSetBuilder().false_positive_rate(0.3).seed(42).build(words)
assert all(w in hs for w in words)

s = ObservedSet(hs)
print(s.contains("apple"), s.false_positive_rate())
```

`build` tries up to `max_attempts` random seeds (10000 by default). For each seed, every element must hash at or below `fpr × 2**64`, so one attempt succeeds with a chance of roughly `fpr ** len(elements)`. With a small rate and several elements, the search usually fails and raises `RuntimeError`. A false positive rate outside (0, 1) raises `ValueError`. An empty input gives a set that contains nothing.

A Bloom filter sized for a target false positive rate:

```python
from bernoulli_types.bloom_filter import make_bloom_filter_fpr

bf = make_bloom_filter_fpr(["alpha", "beta", "gamma"], 0.01)
print("alpha" in bf, bf.m(), bf.k(), bf.false_positive_rate())
```

## Example programs

```
bernoulli-examples                  # run all demonstrations in turn
bernoulli-examples basic_usage      # or just one of them
```

The choices are `basic_usage`, `bloom_filter_demo`, `hash_map_example` and `hash_set_example`.

`hash_set_example` asks for a 1 % false positive rate over five words. As explained above, its seed search will usually fail. When it does, the command prints `Error: ...` to standard error and exits with status 1. When all demonstrations run, this one runs last.

## What it does not do

All structures live in memory only. There is no way to save them to a file or load them back.