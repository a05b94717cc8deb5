''' __init__.py - initialize package

Copyright (c) 2022 Netherlands Forensic Institute - MIT License
'''

def _modcheck():
    ''' check if we have the modgrammar module '''

    try:
        import modgrammar
    except ImportError:
        raise ImportError('this package requires modgrammar')


_modcheck()

#######
# API #
#######

from ._keywords import sql_keyword
from ._keywords import KEYWORDS
from ._common import sql_identifier
from ._common import column_identifier
from ._common import table_reference
from ._common import field_list
from ._common import value_list
from ._common import statement_terminator
from ._create import type_identifier
from ._create import key_specification
from ._create import key_specification_list
from ._create import field_specification_list
from ._create import field_definition_list
from ._create import creation
from ._create import table_definition
from ._structures import Column
from ._structures import Table
from ._structures import SqlType
from ._structures import TableKey
from ._structures import CreateTableStatement
from ._structures import ColumnDefinition
from ._exceptions import InvalidArgumentException
from ._exceptions import ParseFailureException
from ._exceptions import NoMatchException
from ._exceptions import IncompleteException
from ._exceptions import MalformedWidthException
from ._exceptions import AliasNotAllowedException
