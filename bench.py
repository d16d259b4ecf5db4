#! /usr/bin/env python3

"""Time base94 encoding and decoding of random payloads.

Each payload is round-tripped once before timing so that a broken
codec cannot report a fast result.
"""

import argparse
import random
import sys
import time

import base94

DEFAULT_SIZES = (1000, 10000)
DEFAULT_REPEAT = 10
DEFAULT_SEED = 42


def make_payload(size, rng):
    # Top byte kept non-zero so that the round trip preserves length
    payload = bytearray(rng.getrandbits(8) for _ in range(size))
    if payload:
        payload[-1] |= 1
    return bytes(payload)


def time_call(func, repeat):
    """Returns mean seconds per call of FUNC over REPEAT calls"""
    start = time.perf_counter()
    for _ in range(repeat):
        func()
    return (time.perf_counter() - start) / repeat


def run(sizes=DEFAULT_SIZES, base=base94.DEFAULT_BASE,
        repeat=DEFAULT_REPEAT, seed=DEFAULT_SEED):
    """Benchmark each payload size.
    Returns: list of (operation, size, mean seconds) tuples
    """
    rng = random.Random(seed)
    results = []
    for size in sizes:
        payload = make_payload(size, rng)
        encoded = base94.encode(payload, base)
        if base94.decode(encoded, base) != payload:
            raise RuntimeError('round trip failed: size={} base={}'
                               .format(size, base))
        results.append(('encode', size, time_call(
            lambda: base94.encode(payload, base), repeat)))
        results.append(('decode', size, time_call(
            lambda: base94.decode(encoded, base), repeat)))

    return results


def parse_sizes(text):
    try:
        sizes = tuple(int(size) for size in text.split(',') if size)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid sizes: '{}'".format(text))
    if any(size < 0 for size in sizes):
        raise argparse.ArgumentTypeError("negative size: '{}'".format(text))
    return sizes


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Benchmark base94 encode and decode")
    parser.add_argument('-n', '--repeat', dest='repeat', type=int,
                        default=DEFAULT_REPEAT,
                        help='Calls per measurement')
    parser.add_argument('--sizes', dest='sizes', type=parse_sizes,
                        default=DEFAULT_SIZES,
                        help='Comma-separated payload sizes in bytes')
    parser.add_argument('-b', '--base', dest='base', type=int,
                        default=base94.DEFAULT_BASE,
                        help='Base to encode with')
    parser.add_argument('--seed', dest='seed', type=int, default=DEFAULT_SEED,
                        help='Seed for reproducible payloads')
    args = parser.parse_args(argv)
    if not base94.MIN_BASE <= args.base <= base94.MAX_BASE:
        parser.error('Base must be between {} and {} (inclusive)'
                     .format(base94.MIN_BASE, base94.MAX_BASE))
    if args.repeat < 1:
        parser.error('Repeat must be at least 1')

    print("base={} repeat={} seed={}".format(args.base, args.repeat, args.seed),
          file=sys.stderr)
    for operation, size, seconds in run(args.sizes, args.base,
                                        args.repeat, args.seed):
        print("{}_{}: {:.6f} s/call".format(operation, size, seconds))

if __name__ == '__main__':
    main()
