''' _grammar.py - grammar primitives and the driver that applies grammars

Copyright (c) 2022 Netherlands Forensic Institute - MIT License

The grammars of this package are modgrammar grammars. modgrammar literals are
case-sensitive, while SQL keywords and type names are not, so this module adds
a case-insensitive literal terminal. It also holds the driver that runs a
grammar against the start of some input and translates the parse tree into
one of the structures in _structures.

Input may be given as bytes or as str. Bytes are decoded as UTF-8 using the
surrogateescape error handler, which guarantees that the remainder encodes
back to exactly the bytes that were not consumed.
'''

from modgrammar import GrammarClass as _GrammarClass
from modgrammar import Terminal as _Terminal
from modgrammar import ParseError as _ParseError
from modgrammar.util import error_result as _error_result
from modgrammar.util import make_classdict as _make_classdict

from . import _exceptions


# set default behavior for whitespace handling to explicit
grammar_whitespace_mode = 'explicit'


class CaselessLiteral(_Terminal):
    ''' Terminal matching a fixed string, ignoring (ASCII) case.

    This mirrors modgrammar's own Literal terminal: when the available text
    is a prefix of the string and more text may follow, the parser is asked
    for more text. The matched element keeps the casing used in the input. '''

    grammar_whitespace_mode = 'explicit'
    grammar_whitespace = None
    grammar = ()
    string = ''
    grammar_collapse_skip = True
    grammar_hashattrs = ('string',)

    @classmethod
    def __class_init__(cls, attrs):
        cls.folded = cls.string.upper()
        if 'grammar_name' not in attrs:
            cls.grammar_name = 'CL({!r})'.format(cls.string)
        if 'grammar_desc' not in attrs:
            cls.grammar_desc = repr(cls.string)

    @classmethod
    def grammar_parse(cls, text, index, session):
        folded = cls.folded
        end = index + len(folded)
        while (end > len(text.string) and
               folded.startswith(_fold(text.string[index:]))):
            if text.eof:
                break
            # partial match, try again when we have more text
            text = yield (None, None)
        if _fold(text.string[index:end]) == folded:
            yield (len(folded), cls(text.string, index, end))
        yield _error_result(index, cls)


def CL(string, **kwargs):
    ''' Create a grammar matching string case-insensitively. '''

    cdict = _make_classdict(CaselessLiteral, (), kwargs, string=string)
    return _GrammarClass('<CASELESS_LITERAL>', (CaselessLiteral,), cdict)


def _fold(string):
    ''' uppercase ASCII text; non-ASCII text is left as is, so it never
    equals (or starts) a folded literal '''

    if not string.isascii():
        return string
    return string.upper()


##########
# Driver #
##########

def apply(grammar, data, translate, complete=True):
    ''' Parse the start of data using grammar and translate the parse tree.

    Returns a tuple (remainder, value), where remainder is the unconsumed part
    of data (of the same type as data) and value is the result of calling
    translate on the parse tree.

    When complete is True, data is assumed to hold all available input. When
    complete is False, the input may be continued, and an IncompleteException
    is raised if more input is required to decide on the outcome. A failing
    parse raises NoMatchException. Exceptions derived from
    ParseFailureException, raised by a terminal while parsing or by translate,
    get their position converted to an offset in data before they are passed
    on. '''

    text, binary = _as_text(data)
    parser = grammar.parser()

    try:
        result = parser.parse_text(text, reset=True, eof=complete)
    except _ParseError as e:
        raise _exceptions.NoMatchException(
            e.message, _position(text, e.char, binary)) from e
    except _exceptions.ParseFailureException as e:
        # raised by terminals that end the parse on malformed input
        e.position = _position(text, e.position, binary)
        raise

    if result is None:
        # the parser returns None on empty input or when it needs more text
        if complete:
            raise _exceptions.NoMatchException('no input', 0)
        raise _exceptions.IncompleteException(
            'more input needed', _position(text, len(text), binary))

    remainder = parser.remainder()

    try:
        value = translate(result)
    except _exceptions.ParseFailureException as e:
        e.position = _position(text, e.position, binary)
        raise

    if binary:
        remainder = remainder.encode('utf-8', 'surrogateescape')
    return remainder, value


def offset_of(root, element, offset=0):
    ''' Returns the character offset of element in the text parsed by root.

    With explicit whitespace handling the sub-elements of a parse result
    together make up the exact text consumed by that result, so the offset is
    the total length of everything that precedes element in the tree. Returns
    None when element is not part of the tree. '''

    if root is element:
        return offset
    for subel in root.elements:
        if subel is None:
            continue
        found = offset_of(subel, element, offset)
        if found is not None:
            return found
        offset += len(subel.string)
    return None


def _as_text(data):
    ''' returns the input as str, plus a flag that tells if it was binary '''

    if isinstance(data, str):
        return data, False
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).decode('utf-8', 'surrogateescape'), True
    raise _exceptions.InvalidArgumentException(
        'expected bytes or str, not {}'.format(type(data).__name__))


def _position(text, offset, binary):
    ''' converts a character offset in text to an offset in the input '''

    if binary:
        return len(text[:offset].encode('utf-8', 'surrogateescape'))
    return offset
