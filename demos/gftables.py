"""Demo generating exponent and logarithm tables for GF(256).

Example usage from the command line:

    python gftables.py

The field is generated by the primitive polynomial x^8 + x^4 + x^3 + x^2 + 1,
as used for the Reed-Solomon codes in QR codes. Since the polynomial is
primitive, the powers of x run through all 255 nonzero field elements, hence
exp[i] = x^i and log[exp[i]] = i for 0 <= i < 255. Use option -m to pick
another primitive polynomial of degree 8 as modulus, given as an integer.
"""

import argparse
from gf2prim import bfield


def tables(modulus):
    """Return exponent and logarithm tables for the field generated by modulus."""
    field = bfield.GF(modulus)
    elements = field.elements()
    gf_exp = [int(a) for a in elements[1:]]
    gf_log = [0] * field.order
    for i, a in enumerate(gf_exp):
        gf_log[a] = i
    return gf_exp, gf_log


def format_table(name, table):
    lines = [f'{name} = [']
    for i in range(0, len(table), 16):
        lines.append('    ' + ', '.join(f'{a:3}' for a in table[i:i+16]) + ',')
    lines.append(']')
    return '\n'.join(lines)


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('-m', '--modulus', type=lambda s: int(s, 0), metavar='M',
                        help='primitive polynomial M of degree 8 (default 0x11D)')
    parser.set_defaults(modulus=0x11D)
    args, _ = parser.parse_known_args()

    field = bfield.GF(args.modulus)
    print(f'# Field {field.__name__} with modulus {field.modulus}')
    gf_exp, gf_log = tables(args.modulus)
    print(format_table('GF_EXP', gf_exp))
    print(format_table('GF_LOG', gf_log))
    assert all(gf_exp[gf_log[a]] == a for a in range(1, field.order))


if __name__ == '__main__':
    main()
