''' _create.py - grammar and parsing of the CREATE TABLE statement

Copyright (c) 2022 Netherlands Forensic Institute - MIT License

The grammar follows the MySQL flavour of the CREATE TABLE statement as found
in typical schema dumps:

    CREATE TABLE name (
        column [type] [NOT NULL] [AUTO_INCREMENT] [DEFAULT value], ...
        [PRIMARY KEY (columns) | UNIQUE KEY [name] (columns)], ...
    ) [TYPE=engine] [PACK_KEYS=0|1];

The modgrammar module is used to define the required grammars. Parsing
happens in two stages. First the grammar is matched, which involves
backtracking over the alternatives where needed. Then the parse tree is
translated into the structures defined in _structures. A type width that is
not an unsigned 16-bit integer raises MalformedWidthException while matching,
as soon as its closing brace is seen. A table alias is rejected during
translation. Neither failure is retried with another alternative.

NOTE: the optional clauses of a column definition are accepted in a fixed
order only, and no semantic checks are made. A DEFAULT on an AUTO_INCREMENT
column is accepted, for example.

NOTE: the plain KEY (index) clause has a structure in _structures, but is not
part of the grammar. '''

from modgrammar import Grammar as _Grammar
from modgrammar import Terminal as _Terminal
from modgrammar import GRAMMAR as _G
from modgrammar import WORD as _W
from modgrammar import LITERAL as _L
from modgrammar import OR as _OR
from modgrammar import OPTIONAL as _OPTIONAL
from modgrammar import REPEAT as _REPEAT
from modgrammar import LIST_OF as _LIST_OF
from modgrammar import WHITESPACE as _WS
from modgrammar.util import error_result as _error_result

from ._grammar import CL as _CL
from ._grammar import apply as _apply
from ._grammar import offset_of as _offset_of
from ._common import ColumnIdentifier as _ColumnIdentifier
from ._common import FieldList as _FieldList
from ._common import Identifier as _Identifier
from ._common import Separator as _Separator
from ._common import StatementTerminator as _StatementTerminator
from ._common import TableReference as _TableReference
from ._common import column_of as _column_of
from ._common import columns_of as _columns_of
from ._common import name_of as _name_of
from ._common import table_of as _table_of
from . import _structures as _s
from . import _exceptions


# set default behavior for whitespace handling to explicit
grammar_whitespace_mode = 'explicit'


##################
# Type specifier #
##################

class _WidthDigits(_Terminal):
    ''' Terminal for the text between the braces of a type width.

    All text up to the closing brace is taken. Once the closing brace is
    found, the text must be an unsigned 16-bit integer, otherwise
    MalformedWidthException is raised. This ends the parse instead of
    failing over to another alternative. '''

    grammar_whitespace_mode = 'explicit'
    grammar_whitespace = None
    grammar = ()
    grammar_desc = 'type width'

    @classmethod
    def grammar_parse(cls, text, index, session):
        end = text.string.find(')', index)
        while end < 0 and not text.eof:
            # no closing brace yet, try again when we have more text
            text = yield (None, None)
            end = text.string.find(')', index)
        if end > index:
            width = text.string[index:end]
            if not (width.isascii() and width.isdigit() and
                    int(width) <= _s.MAX_WIDTH):
                raise _exceptions.MalformedWidthException(
                    'type width {!r} is not an unsigned 16-bit integer'.format(
                        width), index, width)
            yield (end - index, cls(text.string, index, end))
        yield _error_result(index, cls)


class _Width(_Grammar):
    ''' Grammar for the width of a type, i.e. the 255 in VARCHAR(255). '''
    grammar = (_L('('), _WidthDigits, _L(')'))


class _Signedness(_Grammar):
    ''' Grammar for the (ignored) signedness of numeric types. '''
    grammar = (_OPTIONAL(_WS), _CL('UNSIGNED') | _CL('SIGNED'))


class _Binary(_Grammar):
    ''' Grammar for the (ignored) binary collation of character types. '''
    grammar = (_OPTIONAL(_WS), _CL('BINARY'))


def _sql_type(kind, *rest):
    ''' grammar for a single type alternative, tagged with its kind '''
    return _G(_CL(kind), *rest, tags=(kind,), desc=repr(kind))


# The order of the alternatives matters, the first one that matches wins. No
# type name may be preceded by a name that is a prefix of it.
_TYPES = (_sql_type(_s.MEDIUMTEXT),
          _sql_type(_s.TIMESTAMP),
          _sql_type(_s.TINYBLOB),
          _sql_type(_s.TINYTEXT),
          _sql_type(_s.VARCHAR, _Width, _OPTIONAL(_Binary)),
          _sql_type(_s.TINYINT, _Width, _OPTIONAL(_Signedness)),
          _sql_type(_s.BIGINT, _Width, _OPTIONAL(_Signedness)),
          _sql_type(_s.DOUBLE, _OPTIONAL(_Signedness)),
          _sql_type(_s.BLOB),
          _sql_type(_s.DATE),
          _sql_type(_s.REAL, _OPTIONAL(_Signedness)),
          _sql_type(_s.TEXT),
          _sql_type(_s.CHAR, _Width, _OPTIONAL(_Binary)),
          _sql_type(_s.INT, _OPTIONAL(_Width), _OPTIONAL(_Signedness)))

# type names in the order in which they are tried
TYPE_ORDER = tuple(t.grammar_tags[0] for t in _TYPES)


class TypeIdentifier(_Grammar):
    ''' Grammar for a column type. '''
    grammar = _OR(*_TYPES)


#################
# Key specifier #
#################

class _PrimaryKey(_Grammar):
    ''' Grammar for the PRIMARY KEY clause, a trailing AUTOINCREMENT is
    accepted and ignored. '''
    grammar = (_CL('PRIMARY'), _WS, _CL('KEY'), _OPTIONAL(_WS),
               _L('('), _OPTIONAL(_WS), _FieldList, _OPTIONAL(_WS), _L(')'),
               _OPTIONAL(_WS, _CL('AUTOINCREMENT')))


class _UniqueKey(_Grammar):
    ''' Grammar for the UNIQUE KEY clause with optional key name. '''
    grammar = (_CL('UNIQUE'), _WS, _CL('KEY'),
               _OPTIONAL(_WS, _Identifier),
               _OPTIONAL(_WS),
               _L('('), _OPTIONAL(_WS), _FieldList, _OPTIONAL(_WS), _L(')'))


class KeySpecification(_Grammar):
    ''' Grammar for a single PRIMARY KEY or UNIQUE KEY clause. '''
    grammar = (_PrimaryKey | _UniqueKey)


class KeySpecificationList(_Grammar):
    ''' Grammar for one or more key clauses, separated by comma's. '''
    grammar = _REPEAT(KeySpecification, _OPTIONAL(_Separator))


#######################
# Field specification #
#######################

class _NotNull(_Grammar):
    ''' Grammar for the NOT NULL column modifier. '''
    grammar = (_CL('NOT'), _WS, _CL('NULL'))


class _DefaultValue(_Grammar):
    ''' Grammar for the value in a DEFAULT clause. '''
    grammar = ((_L("'"), _W('A-Za-z0-9', fullmatch=True), _L("'")) |
               _W('0-9', fullmatch=True) |
               _L("''") |
               _CL('NULL') |
               _CL('CURRENT_TIMESTAMP'))


class _Default(_Grammar):
    ''' Grammar for the DEFAULT clause of a column. '''
    grammar = (_CL('DEFAULT'), _WS, _DefaultValue)


class FieldSpecification(_Grammar):
    ''' Grammar for a single column definition in the table body. '''
    grammar = (_ColumnIdentifier,
               _OPTIONAL(_WS, TypeIdentifier),
               _OPTIONAL(_OPTIONAL(_WS), _NotNull),
               _OPTIONAL(_OPTIONAL(_WS), _CL('AUTO_INCREMENT')),
               _OPTIONAL(_OPTIONAL(_WS), _Default))


class FieldSpecificationList(_Grammar):
    ''' Grammar for the column definitions, a trailing comma is accepted. '''
    grammar = (_LIST_OF(FieldSpecification, sep=_Separator),
               _OPTIONAL(_Separator))


################
# Create table #
################

class _StorageEngine(_Grammar):
    ''' Grammar for the (ignored) storage engine clause. '''
    grammar = (_CL('TYPE') | _CL('ENGINE'), _OPTIONAL(_WS), _L('='),
               _OPTIONAL(_WS), _W('A-Za-z0-9', fullmatch=True))


class _PackKeys(_Grammar):
    ''' Grammar for the (ignored) PACK_KEYS clause. '''
    grammar = (_CL('PACK_KEYS'), _OPTIONAL(_WS), _L('='), _OPTIONAL(_WS),
               _L('0') | _L('1'))


class CreateTable(_Grammar):
    ''' Grammar for the CREATE TABLE statement. '''

    grammar = (_CL('CREATE'), _WS, _CL('TABLE'), _WS,
               _TableReference,
               _WS, _L('('), _OPTIONAL(_WS),
               FieldSpecificationList,
               _OPTIONAL(_WS),
               _OPTIONAL(KeySpecificationList),
               _OPTIONAL(_WS),
               _L(')'),
               _OPTIONAL(_WS),
               _OPTIONAL(_StorageEngine),
               _OPTIONAL(_WS),
               _OPTIONAL(_PackKeys),
               _StatementTerminator)


################
# Translations #
################

def _sqltype(type_identifier):
    ''' Creates a SqlType from a parsed TypeIdentifier. '''

    alternative = type_identifier[0]
    kind = alternative.grammar_tags[0]
    width = alternative.get(_Width)
    if width is not None:
        return _s.SqlType(kind, int(width[1].string))
    if kind == _s.INT:
        return _s.SqlType(kind, _s.DEFAULT_INT_WIDTH)
    return _s.SqlType(kind)


def _table_key(key_specification):
    ''' Creates a TableKey from a parsed KeySpecification. '''

    key = key_specification[0]
    columns = _columns_of(key.get(_FieldList))

    if isinstance(key, _PrimaryKey):
        return _s.TableKey(_s.PRIMARY_KEY, None, columns)

    # the optional name is preceded by whitespace
    name = key[3]
    if name is not None:
        name = _name_of(name[1])
    return _s.TableKey(_s.UNIQUE_KEY, name, columns)


def _table_keys(key_specification_list):
    return tuple(_table_key(k) for k in
                 key_specification_list.find_all(KeySpecification))


def _column_definition(field):
    ''' Creates a ColumnDefinition from a parsed FieldSpecification. '''

    column, sqltype, notnull, autoincrement, default = field.elements

    if sqltype is not None:
        sqltype = _sqltype(sqltype.get(TypeIdentifier))

    if default is not None:
        value = default.get(_Default).get(_DefaultValue).string
        # drop the quotes around string values
        if value.startswith("'"):
            value = value[1:-1]
        default = value

    return _s.ColumnDefinition(_column_of(column), sqltype,
                               notnull is not None, autoincrement is not None,
                               default)


def _column_definitions(field_list):
    return tuple(_column_definition(f) for f in
                 field_list[0].get_all(FieldSpecification))


def _create_table(create_table):
    ''' Creates a CreateTableStatement from a parsed CreateTable. '''

    statement, definitions = _table_definition(create_table)
    return statement


def _table_definition(create_table):
    ''' Creates a CreateTableStatement and the ColumnDefinitions of its fields
    from a parsed CreateTable. '''

    reference = create_table.get(_TableReference)
    table = _table_of(reference)
    if table.alias is not None:
        raise _exceptions.AliasNotAllowedException(
            'table alias {!r} not allowed in CREATE TABLE'.format(table.alias),
            _offset_of(create_table, reference), table.alias)

    definitions = _column_definitions(create_table.get(FieldSpecificationList))
    fields = tuple(d.column for d in definitions)

    keys = create_table.get(KeySpecificationList)
    if keys is not None:
        keys = _table_keys(keys)

    return _s.CreateTableStatement(table, fields, keys), definitions


###########
# Parsing #
###########

def type_identifier(data, complete=True):
    ''' Parses a column type at the start of data.

    Returns a tuple (remainder, SqlType). Width, signedness and binary
    modifiers are accepted, but only the width ends up in the SqlType. INT
    without a width gets the width 32. A width that is not an unsigned 16-bit
    integer raises MalformedWidthException. '''

    return _apply(TypeIdentifier, data, _sqltype, complete)


def key_specification(data, complete=True):
    ''' Parses a PRIMARY KEY or UNIQUE KEY clause, returns (remainder,
    TableKey). '''

    return _apply(KeySpecification, data, _table_key, complete)


def key_specification_list(data, complete=True):
    ''' Parses one or more key clauses, returns (remainder, tuple of
    TableKey). '''

    return _apply(KeySpecificationList, data, _table_keys, complete)


def field_definition_list(data, complete=True):
    ''' Parses the column definitions of a table body.

    Returns a tuple (remainder, tuple of ColumnDefinition), one definition for
    each column in order of declaration. '''

    return _apply(FieldSpecificationList, data, _column_definitions, complete)


def field_specification_list(data, complete=True):
    ''' Parses the column definitions of a table body.

    Returns a tuple (remainder, tuple of Column). The type and modifiers of
    the columns are checked for syntax, but not returned. Use
    field_definition_list to obtain these. '''

    remainder, definitions = field_definition_list(data, complete)
    return remainder, tuple(d.column for d in definitions)


def creation(data, complete=True):
    ''' Parses a CREATE TABLE statement, including its terminator.

    Returns a tuple (remainder, CreateTableStatement). Failures raise one of
    the exceptions in _exceptions: NoMatchException when the statement does
    not match the grammar, MalformedWidthException for a type width that is
    out of range, AliasNotAllowedException when the table has an alias and
    IncompleteException when complete is False and more input is needed. '''

    return _apply(CreateTable, data, _create_table, complete)


def table_definition(data, complete=True):
    ''' Parses a CREATE TABLE statement like creation does, but also returns
    the full column definitions.

    Returns a tuple (remainder, (CreateTableStatement, tuple of
    ColumnDefinition)). '''

    return _apply(CreateTable, data, _table_definition, complete)
