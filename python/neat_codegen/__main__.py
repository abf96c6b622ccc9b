'''Command line entry point.

Usage:
    python -m neat_codegen <in_ifc_json> <out_cpp>
    python -m neat_codegen scan <in_dir> <out_dir>
'''

from __future__ import annotations

import argparse
import logging
import sys

from . import backend
from .errors import CodeGenError

USAGE = '''%(prog)s <in_ifc_json> <out_cpp>
       %(prog)s scan <in_dir> <out_dir>'''


def build_argument_parser() -> argparse.ArgumentParser:
    '''The parser for both the single-file and the scan form.'''
    parser = argparse.ArgumentParser(
        prog='neat_codegen',
        usage=USAGE,
        description='Generate reflection registration code from module interfaces.',
    )
    parser.add_argument('paths', nargs='+', help=argparse.SUPPRESS)
    parser.add_argument('--runtime-namespace', default='Neat',
                        help='namespace of the runtime type registry (default: Neat)')
    parser.add_argument('--verbose', action='store_true',
                        help='print every registered type and debug logs')
    return parser


def main(argv: list[str] | None = None) -> int:
    '''Run the converter; returns the process exit status.'''
    parser = build_argument_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )
    options = {'runtime_namespace': args.runtime_namespace, 'verbose': args.verbose}

    print('Running neat_codegen!')

    if args.paths[0] == 'scan':
        if len(args.paths) != 3:
            parser.error('expected scan <in_dir> <out_dir>')
        try:
            results = backend.scan(args.paths[1], args.paths[2], **options)
        except CodeGenError as err:
            print(f'ERROR: {err}')
            return 1
        return 0 if all(ok for _, _, ok in results) else 1

    if len(args.paths) == 2:
        return 0 if backend.convert_file(args.paths[0], args.paths[1], **options) else 1

    parser.error('expected <in_ifc_json> <out_cpp> or scan <in_dir> <out_dir>')
    return 2


if __name__ == '__main__':
    sys.exit(main())
