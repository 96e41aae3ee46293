"""Demonstrations of the observed types, runnable from the command line."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import Any, TextIO

from bernoulli_types.bloom_filter import make_bloom_filter_fpr
from bernoulli_types.hash_map import SimpleDecoder, make_hash_map
from bernoulli_types.hash_set import SimpleHash
from bernoulli_types.hash_set_builder import HashSetBuilder
from bernoulli_types.observed_bool import ObservedBool
from bernoulli_types.observed_map import ObservedMap
from bernoulli_types.observed_set import ObservedSet
from bernoulli_types.rate_span import RateSpan

COLORS = ("red", "green", "blue", "yellow", "orange", "purple", "black", "white")


def _fmt(x: Any) -> str:
    if isinstance(x, float):
        return f"{x:g}"
    return str(x)


def _span(r: RateSpan) -> str:
    return f"[{_fmt(r.low)}, {_fmt(r.high)}]"


def _color_decoder(hash_value: int) -> str:
    return COLORS[hash_value % len(COLORS)]


def basic_usage(out: TextIO = sys.stdout) -> None:
    """Observed booleans and rate span arithmetic."""
    def say(text: str = "") -> None:
        print(text, file=out)

    say("=== Bernoulli Types: Basic Usage ===")
    definitely_true = ObservedBool(True, 0.0)
    probably_true = ObservedBool(True, 0.1)
    maybe_false = ObservedBool(False, 0.3)

    say("\nObserved values:")
    for name, b in (
        ("definitely_true", definitely_true),
        ("probably_true", probably_true),
        ("maybe_false", maybe_false),
    ):
        say(f"{name}: {int(b.value)} (error: {_fmt(b.error.low)})")

    say("\nLogical operations:")
    for label, result in (
        ("probably_true AND maybe_false", probably_true & maybe_false),
        ("probably_true OR maybe_false", probably_true | maybe_false),
        ("NOT probably_true", ~probably_true),
    ):
        say(f"{label} = {int(result.value)} (error: {_span(result.error)})")

    say("\nRate span arithmetic:")
    r1 = RateSpan(0.1, 0.3)
    r2 = RateSpan(0.2, 0.4)
    say(f"[0.1, 0.3] + [0.2, 0.4] = {_span(r1 + r2)}")
    say(f"[0.1, 0.3] * [0.2, 0.4] = {_span(r1 * r2)}")


def bloom_filter_demo(out: TextIO = sys.stdout) -> None:
    """A Bloom filter viewed as an observed set."""
    items = ["alpha", "beta", "gamma", "delta"]
    s = ObservedSet(make_bloom_filter_fpr(items, 0.01))

    def yes_no(flag: bool) -> str:
        return "true" if flag else "false"

    print(f"contains('alpha'): {yes_no(s.contains('alpha'))}", file=out)
    print(f"contains('omega'): {yes_no(s.contains('omega'))}", file=out)
    print(f"FPR in {_span(s.false_positive_rate())}", file=out)
    print(f"FNR in {_span(s.false_negative_rate())}", file=out)


def hash_map_example(out: TextIO = sys.stdout) -> None:
    """Hash maps with boolean and colour decoders, plain and type-erased."""
    def say(text: str = "") -> None:
        print(text, file=out)

    say("Example 1: Boolean hash_map")
    bool_map = make_hash_map(SimpleHash(), SimpleDecoder(bool), 42, 0.1)
    for word in ("cat", "dog", "bird", "fish"):
        say(f"  {word} -> {'true' if bool_map(word) else 'false'}")
    say(f"  Error rate: {_fmt(bool_map.error_rate())}\n")

    say("Example 2: Color hash_map")
    color_map = make_hash_map(SimpleHash(), _color_decoder, 12345, 0.15)
    for animal in ("cat", "dog", "bird", "fish", "rabbit"):
        say(f"  {animal} -> {color_map(animal)}")
    say(f"  Error rate: {_fmt(color_map.error_rate())}\n")

    say("Example 3: Type-erased observed_map")
    obs_map = ObservedMap(make_hash_map(SimpleHash(), _color_decoder, 54321, 0.05))
    for fruit in ("apple", "banana", "cherry"):
        say(f"  {fruit} -> {obs_map(fruit)}")
    say(f"  Average error rate: {_fmt(obs_map.error_rate())}")


def hash_set_example(out: TextIO = sys.stdout) -> None:
    """Build a hash set by seed search; raises RuntimeError if no seed is found."""
    def say(text: str = "") -> None:
        print(text, file=out)

    words = ["apple", "banana", "cherry", "date", "elderberry"]
    hash_set = HashSetBuilder().false_positive_rate(0.01).max_attempts(10000).build(words)

    say("Built hash_set with:")
    say(f"  False positive rate: {_fmt(hash_set.false_positive_rate())}")
    say(f"  False negative rate: {_fmt(hash_set.false_negative_rate())}")
    say(f"  Threshold: {hash_set.threshold}")
    say(f"  Seed: {hash_set.index}\n")

    say("Membership tests:")
    for word in words:
        say(f"  {word}: {'present' if hash_set.contains(word) else 'absent'}")

    say("\nNon-member tests:")
    for word in ("fig", "grape", "kiwi"):
        state = "present (false positive)" if hash_set.contains(word) else "absent"
        say(f"  {word}: {state}")

    say("\nUsing type-erased observed_set:")
    obs_set = ObservedSet(hash_set)
    say(f"apple in observed_set: {'yes' if obs_set.contains('apple') else 'no'}")
    say(f"grape in observed_set: {'yes' if obs_set.contains('grape') else 'no'}")


_EXAMPLES: dict[str, Callable[[TextIO], None]] = {
    "basic_usage": basic_usage,
    "bloom_filter_demo": bloom_filter_demo,
    "hash_map_example": hash_map_example,
    "hash_set_example": hash_set_example,
}


def main(argv: list[str] | None = None) -> int:
    """Run one example, or all of them in turn; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="bernoulli-examples", description="Run the observed type demonstrations."
    )
    parser.add_argument("example", nargs="?", choices=list(_EXAMPLES), help="example to run")
    args = parser.parse_args(argv)
    names = [args.example] if args.example else list(_EXAMPLES)
    for name in names:
        try:
            _EXAMPLES[name](sys.stdout)
        except RuntimeError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())