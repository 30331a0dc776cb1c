"""
Demo driver: build a two-input expression, run the reverse pass and print
the value and gradient of every node involved.

    scalar-aad-demo --a 3 --b 2 --op mul
"""

import argparse
import logging

from .core.graph_utils import print_trace
from .core.engine import reverse
from .core.tape import Tape
from .config import EngineConfig
from .ops import leaf, add, subtract, multiply, divide, power

OPS = {
    'add': add,
    'sub': subtract,
    'mul': multiply,
    'div': divide,
    'pow': power,
}


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Scalar reverse-mode AD demo',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--a', type=float, default=3.0,
                        help='value of the first leaf')
    parser.add_argument('--b', type=float, default=2.0,
                        help='value of the second leaf')
    parser.add_argument('--op', choices=sorted(OPS), default='add',
                        help='operator combining a and b')
    parser.add_argument('--no-backward', action='store_true',
                        help='only run the forward pass')
    parser.add_argument('--clip', type=float, default=10.0,
                        help='gradients are clamped into [-clip, clip]')
    parser.add_argument('--log-level', default='WARNING',
                        help='logging level (DEBUG, INFO, ...)')
    args = parser.parse_args(argv)
    if not args.clip > 0:
        parser.error(f"--clip must be positive, got {args.clip}")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    tape = Tape(EngineConfig(clip_min=-args.clip, clip_max=args.clip))
    a = leaf(args.a, name='a', tape=tape)
    b = leaf(args.b, name='b', tape=tape)
    c = OPS[args.op](a, b)
    if not args.no_backward:
        reverse(c)

    print_trace(a, b, c)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
