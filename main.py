#!/usr/bin/env python3
from fraction import Fraction
import logging
import os
import numpy as np

DEFAULT_LOG_LEVEL = "WARNING"


def main():
    logging.basicConfig(level=os.environ.get("FRACTION_LOG_LEVEL", DEFAULT_LOG_LEVEL))
    half, third = Fraction(1, 2), Fraction(1, 3)
    print(half + third, half - third, half * third, half / third)
    # fixed-width representation: the sum never forms 2^40 * 2^41
    tiny = Fraction(np.int64(1), np.int64(2**40)) + Fraction(np.int64(1), np.int64(2**41))
    print(tiny)
    print(half / Fraction(0, 5))


if __name__ == "__main__":
    main()
