"""Text-based input and output for the search for primitive polynomials.

Polynomials are read and displayed as strings of coefficients in
increasing degree order, so '1100001' stands for 1 + x + x^6.
Input consists of whitespace-separated tokens: the degree q, the number
of candidate polynomials, and the candidates themselves, each a string
of exactly q+1 bits ending with '1'.
"""

import logging
from gf2prim import gf2x
from gf2prim import bfield


INVALID_INPUT = 'Invalid polynomial input!'
RULE = '----------------------------------'


def parse_candidate(s, deg, width=None):
    """Convert bit string s to a polynomial of degree deg."""
    if len(s) != deg + 1 or s[-1] != '1':
        raise ValueError(f'candidate {s!r} is not a polynomial of degree {deg}')

    return gf2x.from_bits(s, width=width)


def _tokens(stream):
    for line in stream:
        yield from line.split()


def _next_int(tokens, what):
    s = next(tokens, None)
    if s is None:
        raise ValueError(f'missing {what}')

    try:
        n = int(s)
    except ValueError:
        raise ValueError(f'{what} must be an integer, got {s!r}') from None

    if n < 0:
        raise ValueError(f'{what} must be nonnegative')

    return n


def read_candidates(stream, out=None, width=None):
    """Read degree, count and candidate polynomials from text stream.

    If out is set, prompts are written to out as well.
    Return the list of candidates, or an empty list if a candidate is invalid.
    Raises ValueError if the degree or count is missing or malformed.
    """
    def prompt(s):
        if out is not None:
            print(s, end='', file=out, flush=True)

    tokens = _tokens(stream)
    prompt('Polynomials are displayed in degree increasing order.\n\n')
    prompt('Enter degree of polynomials you want to use to generate the field: ')
    deg = _next_int(tokens, 'degree')
    prompt('Enter primitive polynomial candidates count: ')
    count = _next_int(tokens, 'count')
    prompt('Enter polynomials in binary format in increasing degree order '
           'separately on new lines:\n')

    candidates = []
    for i in range(count):
        s = next(tokens, None)
        if s is None:
            raise ValueError(f'missing candidate {i+1} of {count}')

        try:
            candidates.append(parse_candidate(s, deg, width=width))
        except ValueError as exc:
            logging.info(exc)
            print(INVALID_INPUT, file=out)
            return []

    logging.debug(f'Read {len(candidates)} candidates of degree {deg}')
    return candidates


def find_primitive(candidates):
    """Return first primitive polynomial among candidates, or None if there is none."""
    for p in candidates:
        if bfield.is_primitive(p):
            return p

        logging.debug(f'Candidate {p} is not primitive')
    return None


def format_polynomial(a, deg=None, terms=False):
    """Format polynomial a as string of bits in increasing degree order (or, as terms)."""
    if terms:
        return gf2x.to_terms(a)

    return gf2x.to_bits(a, deg)


def format_field(elements, terms=False):
    """Format list of polynomials, one per line, padded to their maximum degree."""
    if not elements:
        return ''

    deg = max(gf2x.degree(a) for a in elements)
    return ''.join(format_polynomial(a, deg, terms) + '\n' for a in elements)


def print_field(p, out=None, terms=False):
    """Print the elements of the field generated by primitive polynomial p."""
    elements = bfield.field_elements(p)
    print(f'Field size: {len(elements)}', file=out)
    print('Field elements:', file=out)
    print(RULE, file=out)
    print(format_field(elements, terms), end='', file=out)
    print(RULE, file=out)


def run(candidates, out=None, terms=False):
    """Print the field generated by the first primitive candidate, if any.

    Return the primitive polynomial found, or None.
    """
    p = find_primitive(candidates)
    if p is None:
        print('None of the candidate polynomials are primitive.', file=out)
        return None

    print(f'Found primitive polynomial: {format_polynomial(p, terms=terms)}', file=out)
    print_field(p, out, terms)
    return p
