"""Command line entry point: ``miniball-d <dataFile> <outputFile>``.

Reads a comma separated point file, computes the smallest enclosing ball and
writes ``squared_radius, c_0, ..., c_{d-1}`` to the output file. Exits with
status 1 if the input cannot be read or the output cannot be written.
"""
import argparse
import sys
from typing import List, Optional

from termcolor import colored

from miniball_d.io import read_points, write_ball
from miniball_d.logging_utils import configure_logging, get_logger
from miniball_d.miniball import Miniball

log = get_logger('miniball_d.cli')


class _Parser(argparse.ArgumentParser):
    # Usage errors exit with 1 like every other failure of this command
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog='miniball-d', description='Smallest enclosing ball of points in arbitrary dimension')
    parser.add_argument('data_file', help='Comma separated input file, one point per row')
    parser.add_argument('output_file', help='File receiving "squared_radius, center coordinates"')
    return parser


def _report(mb: Miniball):
    print(f"Center:         {mb.center()}")
    print(f"Squared radius: {mb.squared_radius()}")
    print()
    print(f"{mb.nr_support_points()} support points:")
    print()
    for point in mb.support_points():
        print(point)
    print()
    relative_accuracy, slack = mb.accuracy()
    print(f"Relative accuracy: {relative_accuracy}")
    print(f"Optimality slack:  {slack}")
    # Even if this fails, the ball may be acceptable (see Miniball.is_valid)
    if mb.is_valid():
        print("Validity: " + colored("ok", 'green'))
    else:
        print("Validity: " + colored("possibly invalid", 'red'))


def main(argv: Optional[List[str]] = None, verbose: bool = False) -> int:
    '''
    Runs the command.

    Inputs:
        - argv (list):      (OPTIONAL - default: sys.argv[1:]) The two positional arguments: data file and output file
        - verbose (bool):   (OPTIONAL - default: False) If True, the intermediate steps and the certificate of the ball are printed

    Outputs:
        - status (int):     0 on success, 1 if the input could not be read or the output could not be written
    '''
    args = _build_parser().parse_args(argv)
    configure_logging('INFO' if verbose else 'WARNING')
    if verbose:
        print(f"Data filename: {args.data_file}")
        print(f"Output filename: {args.output_file}")

    try:
        dim, points = read_points(args.data_file)
    except (OSError, ValueError) as err:
        log.error("Unable to read data file %s: %s", args.data_file, err)
        return 1
    if verbose:
        print(f"Data dimension: {dim}")

    mb = Miniball(dim)
    mb.check_in_all(points)
    if verbose:
        print(f"Number of points in miniball: {mb.nr_points()}")
        print("Constructing miniball...", end='', flush=True)
    mb.build()
    if verbose:
        print("done.")
        print()
        _report(mb)

    try:
        write_ball(args.output_file, mb.squared_radius(), mb.center())
    except OSError as err:
        log.error("Unable to open output file %s: %s", args.output_file, err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
