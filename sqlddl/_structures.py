''' _structures - data model for parsed table definitions

Copyright (c) 2022 Netherlands Forensic Institute - MIT License

All structures are namedtuples, so they are immutable once a parse has
produced them. Sequences inside the structures are tuples for the same
reason.
'''

from collections import namedtuple as _nt


##############
# references #
##############

# a column reference, table is the qualifier in table.column (or None)
Column = _nt('column', 'name table')
Column.__new__.__defaults__ = (None,)

# a table reference, dbname is the qualifier in db.table (or None)
Table = _nt('table', 'name dbname alias')
Table.__new__.__defaults__ = (None, None)


#########
# types #
#########

CHAR = 'char'
VARCHAR = 'varchar'
INT = 'int'
BIGINT = 'bigint'
TINYINT = 'tinyint'
TINYBLOB = 'tinyblob'
BLOB = 'blob'
DOUBLE = 'double'
REAL = 'real'
TINYTEXT = 'tinytext'
MEDIUMTEXT = 'mediumtext'
TEXT = 'text'
DATE = 'date'
TIMESTAMP = 'timestamp'

# kinds that carry a width
WIDTH_KINDS = (CHAR, VARCHAR, INT, BIGINT, TINYINT)

# width used for INT when no width is given
DEFAULT_INT_WIDTH = 32

MAX_WIDTH = 65535

SqlType = _nt('sqltype', 'kind width')
SqlType.__new__.__defaults__ = (None,)


########
# keys #
########

PRIMARY_KEY = 'primary key'
UNIQUE_KEY = 'unique key'
KEY = 'key'

# name is None for PRIMARY KEY and for unnamed UNIQUE KEY clauses, columns
# is a tuple of Column in key order
TableKey = _nt('tablekey', 'kind name columns')


##############
# statements #
##############

# fields is a tuple of Column in declaration order, keys is None when the
# statement has no key clauses
CreateTableStatement = _nt('createtable', 'table fields keys')
CreateTableStatement.__new__.__defaults__ = (None,)

# everything that is parsed for a single field in the table body
ColumnDefinition = _nt('columndef', 'column sqltype not_null auto_increment '
                                    'default')
