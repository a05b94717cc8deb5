''' _exceptions.py - module specific exceptions

Copyright (c) 2022 Netherlands Forensic Institute - MIT License
'''

class InvalidArgumentException(Exception):
    ''' raised when a function receives an invalid argument '''
    pass


class ParseFailureException(Exception):
    ''' base class for all failures of a parse attempt.

    The position attribute holds the offset in the input at which the parse
    failed. This is a byte offset for bytes input and a character offset for
    str input. '''

    def __init__(self, message, position):
        super().__init__(message)
        self.position = position


class NoMatchException(ParseFailureException):
    ''' raised when the input does not match the grammar '''
    pass


class IncompleteException(ParseFailureException):
    ''' raised when the input ends inside a construct that more input could
    complete. The needed attribute holds the minimal number of extra bytes. '''

    def __init__(self, message, position, needed=1):
        super().__init__(message, position)
        self.needed = needed


class MalformedWidthException(ParseFailureException):
    ''' raised when a type width is not an unsigned 16-bit integer '''

    def __init__(self, message, position, width):
        super().__init__(message, position)
        self.width = width


class AliasNotAllowedException(ParseFailureException):
    ''' raised when a table reference carries an alias where the statement
    does not allow one '''

    def __init__(self, message, position, alias):
        super().__init__(message, position)
        self.alias = alias
