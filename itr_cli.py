#!/usr/bin/env python3
"""
itr_cli.py — Command-line front end for the range splitter and width-cycling draws.

Usage:
  Split a range:
    python itr_cli.py split -s 4 -l 10

  Draw test vectors (little-endian hex, reproducible):
    python itr_cli.py rand --dtype u64 -n 16 --seed 7 --hex
"""

import sys
import logging
import argparse
import traceback

from range_utils import rngs, InvalidArgument
from rand_utils import rnds_with_eq_byte
from byte_utils import to_le_bytes

DTYPE_NAMES = {"u8": "uint8", "u16": "uint16", "u32": "uint32", "u64": "uint64"}

def do_split(args: argparse.Namespace) -> int:
    try:
        it = rngs(args.segments, args.limit)
    except InvalidArgument as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2

    if args.verbose:
        print(f"[info] Splitting [0, {args.limit}) into {args.segments} segments")
    for r in it:
        print(f"{r.start}..{r.stop}")
    return 0

def do_rand(args: argparse.Namespace) -> int:
    if args.count is not None and args.count < 0:
        print("[error] --count must be >= 0", file=sys.stderr)
        return 2
    if args.seed is not None and args.seed < 0:
        print("[error] --seed must be >= 0", file=sys.stderr)
        return 2
    if args.count is None and not args.forever:
        print("[error] Provide --count or --forever", file=sys.stderr)
        return 2

    dtype = DTYPE_NAMES[args.dtype]
    if args.verbose:
        seed = "entropy" if args.seed is None else args.seed
        print(f"[info] Drawing {args.count if args.count is not None else 'unbounded'} x {dtype} (seed={seed})")

    try:
        it = rnds_with_eq_byte(dtype, args.count, seed=args.seed)
    except ValueError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2

    try:
        for val in it:
            if args.hex:
                print(to_le_bytes(val, dtype).hex())
            else:
                print(int(val))
    except BrokenPipeError:
        # consumer (e.g. `head`) stopped reading
        return 0
    except Exception as e:
        print(f"[error] Draw failed: {e}", file=sys.stderr)
        if args.verbose: traceback.print_exc()
        return 3

    if args.verbose:
        print("[ok] Done.")
    return 0

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Range splitting and width-cycling random integers")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(sp: argparse.ArgumentParser):
        sp.add_argument("--verbose", action="store_true", help="Print [info] lines and debug logging")

    # split
    ps = sub.add_parser("split", help="Split [0, limit) into near-equal contiguous ranges")
    ps.add_argument("-s", "--segments", type=int, required=True, help="Number of segments (>= 1)")
    ps.add_argument("-l", "--limit", type=int, required=True, help="Exclusive upper bound of the range")
    add_common(ps)

    # rand
    pr = sub.add_parser("rand", help="Draw integers whose byte width cycles 1..N")
    pr.add_argument("--dtype", choices=tuple(DTYPE_NAMES), default="u64", help="Integer width (default: u64)")
    cgroup = pr.add_mutually_exclusive_group()
    cgroup.add_argument("-n", "--count", type=int, help="Number of values to draw")
    cgroup.add_argument("--forever", action="store_true", help="Draw until the output is closed")
    pr.add_argument("--seed", type=int, help="Seed for a reproducible stream (default: OS entropy)")
    pr.add_argument("--hex", action="store_true", help="Print little-endian bytes as hex")
    add_common(pr)

    return p

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.cmd == "split":
        return do_split(args)
    elif args.cmd == "rand":
        return do_rand(args)
    else:
        parser.print_help()
        return 1

if __name__ == "__main__":
    sys.exit(main())
