''' _common.py - grammars shared by the statement grammars

Copyright (c) 2022 Netherlands Forensic Institute - MIT License

This module contains the building blocks that statement grammars are composed
of: names (identifiers), column and table references, comma separated lists
of columns or values and the statement terminator. Each grammar comes with a
function that translates its parse tree into a python value and an entry
point that applies the grammar to the start of some input.

Names consist of alphanumeric characters and underscores and may not be a
reserved keyword, unless they are quoted. Quoting is done with backquotes,
double quotes or square brackets.
'''

from modgrammar import Grammar as _Grammar
from modgrammar import WORD as _W
from modgrammar import LITERAL as _L
from modgrammar import OPTIONAL as _OPTIONAL
from modgrammar import LIST_OF as _LIST_OF
from modgrammar import EXCEPT as _EXCEPT
from modgrammar import EOF as _EOF
from modgrammar import WHITESPACE as _WS

from ._grammar import CL as _CL
from ._grammar import apply as _apply
from ._keywords import Keyword as _Keyword
from ._structures import Column as _Column
from ._structures import Table as _Table


# set default behavior for whitespace handling to explicit
grammar_whitespace_mode = 'explicit'


###########
# Grammar #
###########

class _BareName(_Grammar):
    ''' Grammar for unquoted names, which may not be reserved keywords. '''
    grammar = _EXCEPT(_W('A-Za-z0-9_', fullmatch=True), _Keyword)


class _BackQuoted(_Grammar):
    ''' Grammar for names quoted with backquotes. '''
    grammar = (_L('`'), _W('^`', fullmatch=True), _L('`'))


class _DoubleQuoted(_Grammar):
    ''' Grammar for names quoted with double quotes. '''
    grammar = (_L('"'), _W('^"', fullmatch=True), _L('"'))


class _BlockQuoted(_Grammar):
    ''' Grammar for names quoted with square brackets. '''
    grammar = (_L('['), _W('^]', fullmatch=True), _L(']'))


class Identifier(_Grammar):
    ''' Grammar for names of databases, tables, columns and keys. '''
    grammar = (_BareName | _BackQuoted | _DoubleQuoted | _BlockQuoted)


class ColumnIdentifier(_Grammar):
    ''' Grammar for a column reference, optionally qualified by table. '''
    grammar = (_OPTIONAL(Identifier, _L('.')), Identifier)


class TableReference(_Grammar):
    ''' Grammar for a table reference with optional database and alias. '''
    grammar = (_OPTIONAL(Identifier, _L('.')),
               Identifier,
               _OPTIONAL(_WS, _CL('AS'), _WS, Identifier))


class Separator(_Grammar):
    ''' Grammar for the comma between list items. '''
    grammar = (_OPTIONAL(_WS), _L(','), _OPTIONAL(_WS))


class FieldList(_Grammar):
    ''' Grammar for a comma separated list of column references. '''
    grammar = _LIST_OF(ColumnIdentifier, sep=Separator)


class _StringLiteral(_Grammar):
    ''' Grammar for single quoted strings (or empty quotes). '''
    grammar = ((_L("'"), _W("^'", fullmatch=True), _L("'")) | _L("''"))


class _NumericLiteral(_Grammar):
    ''' Grammar for (signed) integer and decimal numbers. '''
    grammar = (_OPTIONAL(_L('-') | _L('+')),
               _W('0-9', fullmatch=True),
               _OPTIONAL(_L('.'), _W('0-9', fullmatch=True)))


class _NullLiteral(_Grammar):
    ''' Grammar for the NULL literal. '''
    grammar = _CL('NULL')


class ValueList(_Grammar):
    ''' Grammar for a comma separated list of literal values. '''
    grammar = _LIST_OF(_StringLiteral | _NumericLiteral | _NullLiteral,
                       sep=Separator)


class StatementTerminator(_Grammar):
    ''' Grammar for the end of a statement: a semicolon, a newline or the
    end of the input, with optional whitespace around it. '''
    grammar = (_OPTIONAL(_WS),
               (_L(';') | _L('\n') | _EOF),
               _OPTIONAL(_WS))


################
# Translations #
################

def name_of(identifier):
    ''' Returns the name for a parsed Identifier, without quotes. '''

    name = identifier[0]
    if isinstance(name, _BareName):
        return name.string
    # quoted names have the quotes as first and last element
    return name[1].string


def column_of(column_identifier):
    ''' Returns a Column for a parsed ColumnIdentifier. '''

    qualifier, name = column_identifier.elements
    table = None
    if qualifier is not None:
        table = name_of(qualifier[0])
    return _Column(name_of(name), table)


def columns_of(field_list):
    ''' Returns a tuple of Columns for a parsed FieldList. '''

    return tuple(column_of(c) for c in field_list[0].get_all(ColumnIdentifier))


def table_of(table_reference):
    ''' Returns a Table for a parsed TableReference. '''

    qualifier, name, alias = table_reference.elements
    dbname = None
    if qualifier is not None:
        dbname = name_of(qualifier[0])
    if alias is not None:
        # alias holds whitespace, AS, whitespace and the name itself
        alias = name_of(alias[3])
    return _Table(name_of(name), dbname, alias)


def values_of(value_list):
    ''' Returns a tuple of python values for a parsed ValueList. '''

    values = []
    for item in value_list[0].elements:
        if isinstance(item, _StringLiteral):
            quoted = item[0]
            # empty quotes are a single literal element
            values.append(quoted[1].string if quoted.elements else '')
        elif isinstance(item, _NumericLiteral):
            if item[2] is not None:
                values.append(float(item.string))
            else:
                values.append(int(item.string))
        elif isinstance(item, _NullLiteral):
            values.append(None)
    return tuple(values)


###########
# Parsing #
###########

def sql_identifier(data, complete=True):
    ''' Parses a name at the start of data, returns (remainder, name). '''
    return _apply(Identifier, data, name_of, complete)


def column_identifier(data, complete=True):
    ''' Parses a column reference, returns (remainder, Column). '''
    return _apply(ColumnIdentifier, data, column_of, complete)


def table_reference(data, complete=True):
    ''' Parses a table reference, returns (remainder, Table). '''
    return _apply(TableReference, data, table_of, complete)


def field_list(data, complete=True):
    ''' Parses a comma separated list of column references, returns
    (remainder, tuple of Column). '''
    return _apply(FieldList, data, columns_of, complete)


def value_list(data, complete=True):
    ''' Parses a comma separated list of literals, returns (remainder, tuple
    of values). Strings become str, numbers int or float and NULL None. '''
    return _apply(ValueList, data, values_of, complete)


def statement_terminator(data, complete=True):
    ''' Consumes the end of a statement, returns (remainder, None). '''
    return _apply(StatementTerminator, data, lambda res: None, complete)
