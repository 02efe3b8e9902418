#!/usr/bin/env python3
"""Performance benchmark script for septem conversions."""

import sys
import timeit
from pathlib import Path
from typing import Callable, Dict

# Add src/ to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from septem import RomanNumeral


def benchmark(name: str, fn: Callable[[], object], iterations: int) -> Dict[str, float]:
    """Time fn over a number of iterations."""
    # Warm up
    for _ in range(10):
        fn()

    total = timeit.timeit(fn, number=iterations)
    per_call_us = total / iterations * 1_000_000
    print(f"{name:<32} {per_call_us:8.2f} µs/call  ({iterations} iterations)")
    return {"total_time": total, "per_call_us": per_call_us}


def main() -> int:
    iterations = int(sys.argv[1]) if len(sys.argv) > 1 else 100_000

    benchmark("parse 'mmmmdcccxciiii'", lambda: RomanNumeral.parse("mmmmdcccxciiii"), iterations)
    benchmark("format 4894 (unchecked)", lambda: str(RomanNumeral.from_unchecked(4894)), iterations)
    benchmark("round trip 1..3999", lambda: [
        RomanNumeral.parse(str(RomanNumeral.from_checked(n))) for n in range(1, 4000)
    ], max(1, iterations // 4000))
    return 0


if __name__ == "__main__":
    sys.exit(main())
