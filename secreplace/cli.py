"""
# Section Replace: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import re
import sys
from typing import Callable

from secreplace._version import __version__
from secreplace.constants import (
    COMMAND_LINE_ERROR_EXIT_CODE,
    DEFAULT_CLOSING_MARKER,
    DEFAULT_OPENING_MARKER,
    GENERIC_ERROR_EXIT_CODE,
    VERBOSE_MODE_DIVIDER_SYMBOL_COUNT,
)
from secreplace.definitions import DefinitionMaster
from secreplace.sections import ReplaceResult, Transformer, replace_all, replace_one

DESCRIPTION = '''
    Replace marker-delimited sections, innermost first, with defined values.
'''
FILE_NAME_HELP = '''
    name of file to be processed (output is written to stdout);
    standard input is read if no files are given
'''
OPENING_MARKER_HELP = f'''
    opening marker of a section (default `{DEFAULT_OPENING_MARKER}`)
'''
CLOSING_MARKER_HELP = f'''
    closing marker of a section (default `{DEFAULT_CLOSING_MARKER}`)
'''
DEFINE_HELP = '''
    define a value to be substituted for sections whose interior is NAME
    (may be given more than once)
'''
ONCE_MODE_HELP = '''
    replace only the first innermost section
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every replacement applied to stderr)
'''


def parse_definition(definition_argument: str) -> tuple[str, str]:
    """
    Parse a definition argument of the form `«name»=«value»`.

    «name» must be non-empty; «value» may be empty and may contain further `=`.
    """
    match = re.fullmatch(
        pattern=r'(?P<name> [^=]+ ) = (?P<value> [\s\S]* )',
        string=definition_argument,
        flags=re.VERBOSE,
    )
    if match is None:
        raise ValueError(f'definition `{definition_argument}` not of the form `NAME=VALUE`')

    return match.group('name'), match.group('value')


def parse_command_line_arguments(arguments=None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(prog='secreplace', description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-O', '--opening-marker',
        dest='opening_marker',
        default=DEFAULT_OPENING_MARKER,
        help=OPENING_MARKER_HELP,
        metavar='MARKER',
    )
    argument_parser.add_argument(
        '-C', '--closing-marker',
        dest='closing_marker',
        default=DEFAULT_CLOSING_MARKER,
        help=CLOSING_MARKER_HELP,
        metavar='MARKER',
    )
    argument_parser.add_argument(
        '-d', '--define',
        dest='definition_arguments',
        action='append',
        default=[],
        help=DEFINE_HELP,
        metavar='NAME=VALUE',
    )
    argument_parser.add_argument(
        '-1', '--once',
        dest='once_mode_enabled',
        action='store_true',
        help=ONCE_MODE_HELP,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'file_names',
        default=[],
        help=FILE_NAME_HELP,
        metavar='file',
        nargs='*',
    )

    return argument_parser.parse_args(arguments)


def build_definition_master(definition_arguments: list[str]) -> DefinitionMaster:
    definition_master = DefinitionMaster()
    for definition_argument in definition_arguments:
        try:
            name, value = parse_definition(definition_argument)
        except ValueError as value_error:
            print(f'error: argument `-d`: {value_error}', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

        definition_master.store_definition(name, value)

    return definition_master


def build_verbose_transformer(transformer: Transformer) -> Transformer:
    """
    Wrap a transformer so that every replacement is printed to stderr.
    """
    def verbose_transformer(interior: str) -> str:
        replacement = transformer(interior)

        if interior == replacement:
            no_change_indicator = ' (no change)'
        else:
            no_change_indicator = ''

        print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + ' BEFORE', file=sys.stderr)
        print(interior, file=sys.stderr)
        print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator, file=sys.stderr)
        print(replacement, file=sys.stderr)
        print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + ' AFTER', file=sys.stderr)
        print('\n\n', file=sys.stderr)

        return replacement

    return verbose_transformer


def process_string(string: str, source_name: str, parsed_arguments: argparse.Namespace,
                   transformer: Transformer) -> str:
    replace: Callable[..., ReplaceResult]
    if parsed_arguments.once_mode_enabled:
        replace = replace_one
    else:
        replace = replace_all

    result = replace(string, parsed_arguments.opening_marker, parsed_arguments.closing_marker, transformer)
    if result.error is not None:
        print(f'error: `{source_name}`: {result.error}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    return result.string


def main(arguments=None):
    parsed_arguments = parse_command_line_arguments(arguments)
    definition_master = build_definition_master(parsed_arguments.definition_arguments)

    transformer = definition_master.substitute
    if parsed_arguments.verbose_mode_enabled:
        transformer = build_verbose_transformer(transformer)

    if len(parsed_arguments.file_names) == 0:
        string = sys.stdin.read()
        sys.stdout.write(process_string(string, '<stdin>', parsed_arguments, transformer))
        return

    for file_name in parsed_arguments.file_names:
        try:
            with open(file_name, 'r', encoding='utf-8') as file:
                string = file.read()
        except FileNotFoundError:
            print(f'error: argument `{file_name}`: file not found', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

        sys.stdout.write(process_string(string, file_name, parsed_arguments, transformer))


if __name__ == '__main__':
    main()
