"""quadchar is a Python package for quadratic characters over finite fields.

The quadratic character of a finite field F of odd order q maps 0 to 0,
nonzero squares to 1, and the remaining nonzero elements to -1. Quadratic
residuosity is decided by Euler's criterion, using fast exponentiation in F.

The engine is generic over the field arithmetic, which is consumed through
a small read-only facade (see quadchar.fieldhandle). A reference backend for
prime fields GF(p) and extension fields GF(p^k) is included (quadchar.finfields).

On top of the character, the package provides the closed-form counts for the
squaring map on the group of units (quadchar.units), the classical character
sums (quadchar.charsums), and Paley-type constructions such as Jacobsthal
matrices, Paley graphs, and Paley conference and Hadamard matrices (quadchar.paley).
"""

__version__ = '0.3.1'
__license__ = 'MIT License'

import os
import sys
import argparse
import logging


def get_arg_parser():
    """Return parser for command line arguments recognized by quadchar.

    Only long options are used, and abbreviations are not allowed, so that
    options of the host program are left alone.
    """
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)

    group = parser.add_argument_group('quadchar configuration')
    group.add_argument('--workers', type=int, metavar='w',
                       help='maximum number of worker threads for character sums')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info/warning(default)/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')

    parser.set_defaults(log_level='warning')
    return parser


if os.getenv('READTHEDOCS') != 'True':
    options = get_arg_parser().parse_known_args()[0]

    # Set logging level as early as possible.
    if options.no_log:
        logging.basicConfig(level=logging.WARNING)
    else:
        ch = options.log_level[0].upper()
        ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
        ch = ch if '0' <= ch <= '5' else '3'  # default to '3'
        level = int(ch)
        level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
                 logging.CRITICAL)[level]
        if sys.flags.dev_mode:
            level = logging.DEBUG
        logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
        logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
        del ch, level

    # Worker threads used by quadchar.charsums to split scans over the field.
    env_max_workers = os.getenv('QUADCHAR_MAXWORKERS')  # check if variable QUADCHAR_MAXWORKERS is set
    if not env_max_workers:
        if options.workers is None:
            options.workers = 0
        os.environ['QUADCHAR_MAXWORKERS'] = str(options.workers)
        # NB: QUADCHAR_MAXWORKERS also set for subprocesses
    logging.debug(f'Number of worker threads maximum set to {os.getenv("QUADCHAR_MAXWORKERS")}')

    del options, env_max_workers
