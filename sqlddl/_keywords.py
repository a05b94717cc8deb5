''' _keywords.py - recognition of reserved SQL keywords

Copyright (c) 2022 Netherlands Forensic Institute - MIT License

Reserved keywords may not occur as bare names. The list below is tried in
order and matched case-insensitively. A keyword only matches when it is
followed by a boundary character or by the end of the input; when that check
fails, the remaining keywords are tried. This keeps a keyword from matching
the first part of a longer keyword (IN versus INTO, IS versus ISNULL).
'''

from modgrammar import Grammar as _Grammar
from modgrammar import GrammarClass as _GrammarClass
from modgrammar import Terminal as _Terminal
from modgrammar import GRAMMAR as _G
from modgrammar import OR as _OR
from modgrammar.util import error_result as _error_result
from modgrammar.util import make_classdict as _make_classdict

from ._grammar import CL as _CL
from ._grammar import apply as _apply
from . import _exceptions


# set default behavior for whitespace handling to explicit
grammar_whitespace_mode = 'explicit'


KEYWORDS = (
    'ABORT', 'ACTION', 'ADD', 'AFTER', 'ALL', 'ALTER', 'ANALYZE', 'AND',
    'AS', 'ASC', 'ATTACH', 'AUTOINCREMENT', 'BEFORE', 'BEGIN', 'BETWEEN',
    'BY', 'CASCADE', 'CASE', 'CAST', 'CHECK', 'COLLATE', 'COLUMN', 'COMMIT',
    'CONFLICT', 'CONSTRAINT', 'CREATE', 'CROSS', 'CURRENT_DATE',
    'CURRENT_TIME', 'CURRENT_TIMESTAMP', 'DATABASE', 'DEFAULT', 'DEFERRABLE',
    'DEFERRED', 'DELETE', 'DESC', 'DETACH', 'DISTINCT', 'DROP', 'EACH',
    'ELSE', 'END', 'ESCAPE', 'EXCEPT', 'EXCLUSIVE', 'EXISTS', 'EXPLAIN',
    'FAIL', 'FOR', 'FOREIGN', 'FROM', 'FULL', 'GLOB', 'GROUP', 'HAVING',
    'IF', 'IGNORE', 'IMMEDIATE', 'IN', 'INDEX', 'INDEXED', 'INITIALLY',
    'INNER', 'INSERT', 'INSTEAD', 'INTERSECT', 'INTO', 'IS', 'ISNULL',
    'JOIN', 'KEY', 'LEFT', 'LIKE', 'LIMIT', 'MATCH', 'NATURAL', 'NO', 'NOT',
    'NOTNULL', 'NULL', 'OF', 'OFFSET', 'ON', 'OR', 'ORDER', 'OUTER', 'PLAN',
    'PRAGMA', 'PRIMARY', 'QUERY', 'RAISE', 'RECURSIVE', 'REFERENCES',
    'REGEXP', 'REINDEX', 'RELEASE', 'RENAME', 'REPLACE', 'RESTRICT', 'RIGHT',
    'ROLLBACK', 'ROW', 'SAVEPOINT', 'SELECT', 'SET', 'TABLE', 'TEMP',
    'TEMPORARY', 'THEN', 'TO', 'TRANSACTION', 'TRIGGER', 'UNION', 'UNIQUE',
    'UPDATE', 'USING', 'VACUUM', 'VALUES', 'VIEW', 'VIRTUAL', 'WHEN',
    'WHERE', 'WITH', 'WITHOUT')

# characters that may directly follow a keyword
BOUNDARY = ' \n\t;(,='


###########
# Grammar #
###########

class _Boundary(_Terminal):
    ''' Zero-width grammar that matches in front of a boundary character or
    at the end of the input.

    When extendable is set, the keyword in front of it is the start of a
    longer keyword, and the end of the input only counts as a boundary when
    no more text will follow. '''

    grammar_whitespace_mode = 'explicit'
    grammar_whitespace = None
    grammar = ()
    grammar_desc = 'end of keyword'
    grammar_collapse_skip = True
    grammar_hashattrs = ('extendable',)
    extendable = False

    @classmethod
    def grammar_parse(cls, text, index, session):
        while index == len(text.string) and cls.extendable and not text.eof:
            text = yield (None, None)
        if index == len(text.string) or text.string[index] in BOUNDARY:
            yield (0, cls(''))
        yield _error_result(index, cls)


def _boundary(extendable):
    cdict = _make_classdict(_Boundary, (), {}, extendable=extendable)
    return _GrammarClass('<BOUNDARY>', (_Boundary,), cdict)


def _keyword(keyword):
    ''' grammar for a single keyword followed by its boundary '''

    extendable = any(kw != keyword and kw.startswith(keyword) for kw in KEYWORDS)
    return _G(_CL(keyword), _boundary(extendable))


class Keyword(_Grammar):
    ''' Grammar for reserved keywords. '''

    grammar = _OR(*[_keyword(kw) for kw in KEYWORDS])


###########
# Parsing #
###########

def sql_keyword(data, complete=True):
    ''' Matches a reserved keyword at the start of data.

    Returns a tuple (remainder, keyword), where keyword is the matched part
    of data, in its original casing. The boundary character that follows the
    keyword is not consumed.

    With complete set to False, IncompleteException is raised when data is a
    strict prefix of a keyword, or when data ends in a keyword that a longer
    keyword starts with (IN versus INTO). '''

    try:
        remainder, keyword = _apply(Keyword, data, _keyword_text, complete)
    except _exceptions.IncompleteException as e:
        e.needed = _needed(data)
        raise

    if not isinstance(data, str):
        # keywords are plain ASCII, so this gives back the input bytes
        keyword = keyword.encode('ascii')
    return remainder, keyword


def _keyword_text(result):
    return result[0].string


def _needed(data):
    ''' smallest number of extra bytes after which data could hold a keyword
    plus its boundary character '''

    if isinstance(data, str):
        available = data.upper()
    else:
        available = bytes(data).decode('latin-1').upper()
    lengths = [len(kw) - len(available) for kw in KEYWORDS
               if kw.startswith(available)]
    if not lengths:
        return 1
    return min(lengths) + 1
