"""Demo listing all primitive polynomials of given degree.

Example usage from the command line:

    python primitives.py -d 8

to list the 16 primitive polynomials of degree 8, both as bit strings in
increasing degree order and as sums of powers of x. The number of primitive
polynomials of degree d equals phi(2^d - 1)/d, for Euler's totient phi.
"""

import argparse
import logging
from gf2prim import gf2x
from gf2prim import bfield


def primitives(d):
    """Yield all primitive polynomials of degree d, in increasing order."""
    p = gf2x.next_irreducible((1 << d) - 1)
    while p.degree() == d:
        if bfield.is_primitive(p):
            yield bfield.certify(p)
        p = gf2x.next_irreducible(p)


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('-d', '--degree', type=int, metavar='D',
                        help='degree D of the primitive polynomials, 2<=D<=16')
    parser.add_argument('--terms-only', action='store_true',
                        help='omit the bit strings')
    parser.set_defaults(degree=6)
    args, _ = parser.parse_known_args()
    if not 2 <= args.degree <= 16:
        parser.error('degree must be in range 2..16')

    count = 0
    for p in primitives(args.degree):
        if args.terms_only:
            print(gf2x.to_terms(p))
        else:
            print(gf2x.to_bits(p), gf2x.to_terms(p))
        count += 1
    logging.info(f'Found {count} primitive polynomials of degree {args.degree}')
    print(f'Total: {count}')


if __name__ == '__main__':
    main()
