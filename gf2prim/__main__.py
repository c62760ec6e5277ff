"""Search for a primitive polynomial among candidates and print the field it generates.

Example usage from the command line:

    python -m gf2prim

to enter the degree q, the number of candidates, and the candidates
interactively, each as a string of q+1 bits in increasing degree order.
Alternatively, read the same input from a file:

    python -m gf2prim -i candidates.txt

With option --test-mode the built-in candidates 1000001, 1001001, 1100001
of degree 6 are used instead, for which the third one is primitive:

    python -m gf2prim --test-mode --terms
"""

import sys
import argparse
import logging
import gf2prim
from gf2prim import console

TEST_CANDIDATES = ('1000001', '1001001', '1100001')


def get_arg_parser():
    parser = argparse.ArgumentParser(prog='python -m gf2prim', parents=[gf2prim.get_arg_parser()],
                                     description=__doc__.splitlines()[0])
    parser.add_argument('-V', '--version', action='version', version=gf2prim.__version__)
    parser.add_argument('-i', '--input', type=argparse.FileType('r'), metavar='FILE',
                        help='read degree, count and candidates from FILE (default stdin)')
    parser.add_argument('--terms', action='store_true',
                        help='display polynomials as sums of powers of x')
    parser.add_argument('--test-mode', action='store_true',
                        help='use built-in candidates of degree 6 instead of reading input')
    return parser


def main(argv=None):
    args = get_arg_parser().parse_args(argv)

    if args.test_mode:
        candidates = [console.parse_candidate(s, 6) for s in TEST_CANDIDATES]
    else:
        stream = args.input or sys.stdin
        out = sys.stdout if stream.isatty() else None
        try:
            candidates = console.read_candidates(stream, out)
        except ValueError as exc:
            logging.error(f'Cannot read candidates: {exc}')
            return 1
        finally:
            if args.input:
                args.input.close()

    console.run(candidates, terms=args.terms)
    return 0


if __name__ == '__main__':
    sys.exit(main())
