#!/usr/bin/env python3

''' _cmdline.py - minimal commandline interface for sqlddl

Copyright (c) 2022 Netherlands Forensic Institute - MIT License
'''

import sys as _sys
import argparse as _argparse
from pprint import pprint as _pprint
from os import path as _path

from ._create import table_definition as _table_definition
from ._keywords import sql_keyword as _sql_keyword
from . import _exceptions


def _parser():
    ''' argument parser '''

    parser = _argparse.ArgumentParser(
        prog='sqlddl',
        formatter_class = _argparse.RawDescriptionHelpFormatter,
        description = 'Parse SQL CREATE TABLE statements. ',
        epilog = 'Example usage: \n' +\
                 ' sqlddl parse schema.sql\n' +\
                 ' sqlddl parse --definitions schema.sql\n' +\
                 ' sqlddl keyword select\n' +\
                 '\n'
        )

    parser.add_argument('--version', help='print version and exit', action='store_true',
                        default=False)

    subparsers = parser.add_subparsers(help='sub-command help')

    parse = subparsers.add_parser('parse', help='parse CREATE TABLE statements')
    parse.add_argument('sqlfile', metavar='FILE', help='file with statements, - for stdin')
    parse.add_argument('--definitions', action="store_true",
                       help='print the column definitions instead of the statements')

    keyword = subparsers.add_parser('keyword', help='check if a word is a reserved keyword')
    keyword.add_argument('word', metavar='WORD', help='word to check')

    return parser


def main(argv=None):
    ''' entry point '''

    parser = _parser()
    args = parser.parse_args(argv)

    if hasattr(args, 'definitions'):
        parse(args)
    elif hasattr(args, 'word'):
        keyword(args)
    elif args.version is True:
        version()
    else:
        parser.print_help()


def parse(args):
    ''' Parse all statements in the file and print them, exits with status 1
    on the first statement that fails to parse. '''

    if args.sqlfile == '-':
        data = _sys.stdin.buffer.read()
    else:
        with open(args.sqlfile, 'rb') as f:
            data = f.read()

    remainder = data
    while remainder.strip():
        offset = len(data) - len(remainder)
        try:
            remainder, (statement, definitions) = _table_definition(remainder)
        except _exceptions.ParseFailureException as e:
            print('error at byte %d: %s' % (offset + e.position, e))
            _sys.exit(1)

        if args.definitions is True:
            _pprint(statement.table)
            for definition in definitions:
                _pprint(definition)
        else:
            _pprint(statement)
    _sys.exit()


def keyword(args):
    ''' Check if the word is a reserved keyword, exits with status 1 if not. '''

    candidate = args.word.strip()
    try:
        remainder, word = _sql_keyword(candidate)
    except _exceptions.NoMatchException:
        remainder, word = candidate, None

    if word is None or remainder:
        print('%s is not a reserved keyword' % (candidate,))
        _sys.exit(1)
    print('%s is a reserved keyword' % (word,))
    _sys.exit()


def version():
    ''' return the version of sqlddl '''

    _modulepath = _path.abspath(__file__)
    _moduledir = _path.split(_modulepath)[0]
    _versionfile = _path.join(_moduledir, 'VERSION')
    with open(_versionfile, 'rt') as f:
        version = f.readline()
        print(version)
    _sys.exit()


if __name__ == "__main__":
    main()
