from argparse import ArgumentParser

from snakepp.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="Snakepp - preprocessor for C-like languages with macros written in Python",
        usage=f"{prog} file [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "source_files",
        help="Input source code file to preprocess (e.g `.c` / `.h` files)",
        nargs="*",
        default=[],
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    groups.add_preprocessor_group(parser)
    groups.add_debug_group(parser)
    groups.add_toolchain_debug_group(parser)
    return parser
