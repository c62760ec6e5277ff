"""gf2prim is a Python package for polynomial arithmetic over GF(2).

Polynomials over GF(2) are bit-packed into fixed-width integers, with
addition, multiplication and remainder implemented by shifts and XORs.
On top of this arithmetic, gf2prim tests whether a polynomial of degree q
is primitive, and enumerates the 2^q elements of the binary field GF(2^q)
generated by a primitive polynomial.

The above operations are all available via Python's operator overloading,
next to plain functions in module gf2x. Module bfield provides the field
algorithms and module console the text-based input and output used by
the command line program:

    python -m gf2prim
"""

__version__ = '0.3.0'
__license__ = 'MIT License'

import os
import sys
import argparse
import logging


def get_arg_parser():
    """Return parser for command line arguments handled by gf2prim itself."""
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)

    group = parser.add_argument_group('gf2prim configuration')
    group.add_argument('--width', type=int, metavar='w',
                       help='bit width w of polynomials, w>=2 (default 64)')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info/warning(default)/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')

    parser.set_defaults(log_level='warning')
    return parser


options = get_arg_parser().parse_known_args()[0]

# Set logging level as early as possible.
if options.no_log:
    logging.basicConfig(level=logging.CRITICAL)
else:
    ch = options.log_level[0].upper()
    ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
    ch = ch if '0' <= ch <= '5' else '3'  # default to '3'
    level = int(ch)
    level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
             logging.CRITICAL)[level]
    if sys.flags.dev_mode:
        level = logging.DEBUG
    logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stderr)
    logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
    del ch, level

# Default bit width of polynomials, picked up by gf2prim.gf2x.
env_width = os.getenv('GF2PRIM_WIDTH')  # check if variable GF2PRIM_WIDTH is set
if options.width is not None:
    if options.width < 2:
        logging.warning(f'Ignoring bit width {options.width}, using 64 instead.')
        os.environ['GF2PRIM_WIDTH'] = '64'
    else:
        os.environ['GF2PRIM_WIDTH'] = str(options.width)  # NB: also set for subprocesses
elif not env_width:
    os.environ['GF2PRIM_WIDTH'] = '64'
elif not (env_width.isdigit() and int(env_width) >= 2):
    logging.warning(f'Ignoring GF2PRIM_WIDTH={env_width!r}, using 64 instead.')
    os.environ['GF2PRIM_WIDTH'] = '64'
logging.debug(f'Bit width of polynomials set to {os.getenv("GF2PRIM_WIDTH")}')

del options, env_width
