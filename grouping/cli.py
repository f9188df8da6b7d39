import argparse
import logging
import sys
from typing import List, Optional

from .errors import ValidationError
from .factories import generate_groups
from .report import summarize

logger = logging.getLogger(__name__)


def create_cli_interface() -> argparse.ArgumentParser:
    """command line interface for the grouping tool"""
    parser = argparse.ArgumentParser(
        prog='grouping',
        description='generate random sequence and group them',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  grouping -n 10 -g 4 -d ","
  python -m grouping -n 100 -g 7 -d " | " --seed 42 --summary
        '''
    )

    parser.add_argument('-n', type=int, default=10, help='number of elements (default: 10)')
    parser.add_argument('-g', type=int, default=4, help='number of groups (default: 4)')
    parser.add_argument('-d', default='\t', help='delimiter (default: tab)')
    parser.add_argument('-v', '--verbose', action='store_true', help='output verbose log')
    parser.add_argument('--seed', type=int, default=None, help='seed the shuffle for a reproducible run')
    parser.add_argument('--summary', action='store_true', help='print a per-group size table to stderr')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """main entry point; returns the process exit code"""
    parser = create_cli_interface()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING,
                        format='%(levelname)s: %(asctime)s %(filename)s:%(lineno)d: %(message)s')
    # set on both branches, main() may run more than once per process
    logging.getLogger().setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    logger.debug(f"n: {args.n}, g: {args.g}, d: {args.d!r}, v: {args.verbose}, seed: {args.seed}")

    try:
        groups = generate_groups(args.n, args.g, args.d, seed=args.seed)
    except ValidationError as e:
        logger.debug(f"rejected {e.field}: {e.value!r}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    lines = []
    for line in groups:
        print(line)
        lines.append(line)

    if args.summary:
        print(summarize(lines, args.d).drop(columns=['members']).to_string(index=False), file=sys.stderr)

    return 0
