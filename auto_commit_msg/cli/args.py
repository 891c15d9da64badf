"""CLI Argument Parsing"""

import argparse
import argcomplete

from auto_commit_msg import TOOL_NAME, __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=TOOL_NAME,
        description='Generate a commit message for the staged changes',
        epilog=f'Example: {TOOL_NAME} .git/COMMIT_EDITMSG (or install it as a prepare-commit-msg hook)'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Arguments git passes to prepare-commit-msg
    parser.add_argument('commit_msg_file', nargs='?', default=None, help='File to write the message to (default: stdout)')
    parser.add_argument('commit_source', nargs='?', default=None, help='Commit source from git; skips generation when set')
    parser.add_argument('commit_sha', nargs='?', default=None, help=argparse.SUPPRESS)

    parser.add_argument('--config', type=str, metavar='PATH', help='Config file (default: .auto-commit-msg.json here or in ~)')
    parser.add_argument('--trace', action='store_true', help='Append model and timing details to the message')

    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    argcomplete.autocomplete(parser)
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
