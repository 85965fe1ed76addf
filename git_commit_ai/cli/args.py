"""CLI Argument Parsing"""

import argparse
import argcomplete

from git_commit_ai import __version__

COMMANDS = ['config', 'config:show']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='git-commit-ai',
        description='Generate git commit messages for staged changes with AI',
        epilog='Example: git-commit-ai --all --push'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    parser.add_argument('command', nargs='?', choices=COMMANDS, help='config: interactive setup, config:show: print current settings')

    # Flow options
    parser.add_argument('-a', '--all', action='store_true', help='Stage all changes before generating the message')
    parser.add_argument('-p', '--push', action='store_true', help='Push after committing')

    # Output options
    parser.add_argument('-d', '--debug', action='store_true', help='Print the prompts and raw AI output')
    parser.add_argument('--verbose', action='store_true', help='Print the change summary before confirming')

    argcomplete.autocomplete(parser)
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
