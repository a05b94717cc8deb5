import pytest

from sqlddl import type_identifier
from sqlddl import SqlType
from sqlddl import NoMatchException
from sqlddl import IncompleteException
from sqlddl import MalformedWidthException
from sqlddl._create import TYPE_ORDER
from sqlddl import _structures as s


def test_type_order():
    assert TYPE_ORDER == (s.MEDIUMTEXT, s.TIMESTAMP, s.TINYBLOB, s.TINYTEXT,
                          s.VARCHAR, s.TINYINT, s.BIGINT, s.DOUBLE, s.BLOB,
                          s.DATE, s.REAL, s.TEXT, s.CHAR, s.INT)


def test_no_type_name_shadows_a_later_one():
    for i, earlier in enumerate(TYPE_ORDER):
        for later in TYPE_ORDER[i+1:]:
            assert not later.startswith(earlier)


@pytest.mark.parametrize('text, expected', [
    ("mediumtext", SqlType(s.MEDIUMTEXT)),
    ("timestamp", SqlType(s.TIMESTAMP)),
    ("tinyblob", SqlType(s.TINYBLOB)),
    ("tinytext", SqlType(s.TINYTEXT)),
    ("varchar(255)", SqlType(s.VARCHAR, 255)),
    ("tinyint(1)", SqlType(s.TINYINT, 1)),
    ("bigint(20)", SqlType(s.BIGINT, 20)),
    ("double", SqlType(s.DOUBLE)),
    ("blob", SqlType(s.BLOB)),
    ("date", SqlType(s.DATE)),
    ("real", SqlType(s.REAL)),
    ("text", SqlType(s.TEXT)),
    ("char(10)", SqlType(s.CHAR, 10)),
    ("int(11)", SqlType(s.INT, 11)),
])
def test_each_type(text, expected):
    assert type_identifier(text) == ("", expected)


def test_types_are_caseless():
    assert type_identifier("VARCHAR(40)") == ("", SqlType(s.VARCHAR, 40))
    assert type_identifier(b"MediumText") == (b"", SqlType(s.MEDIUMTEXT))


def test_int_default_width():
    assert type_identifier("INT") == ("", SqlType(s.INT, 32))
    assert type_identifier("INT(11)") == ("", SqlType(s.INT, 11))


def test_signedness_is_ignored():
    assert type_identifier("INT UNSIGNED") == ("", SqlType(s.INT, 32))
    assert type_identifier("INT(11) signed") == ("", SqlType(s.INT, 11))
    assert type_identifier("bigint(20) unsigned") == ("", SqlType(s.BIGINT, 20))
    assert type_identifier("tinyint(4)unsigned") == ("", SqlType(s.TINYINT, 4))
    assert type_identifier("double unsigned") == ("", SqlType(s.DOUBLE))
    assert type_identifier("real signed") == ("", SqlType(s.REAL))


def test_binary_is_ignored():
    assert type_identifier("varchar(10) binary") == ("", SqlType(s.VARCHAR, 10))
    assert type_identifier("char(3) BINARY") == ("", SqlType(s.CHAR, 3))


def test_modifier_not_accepted_for_type():
    # blob takes no modifiers, so unsigned is left alone
    assert type_identifier("blob unsigned") == (" unsigned", SqlType(s.BLOB))


def test_remainder():
    assert type_identifier("int(5) NOT NULL") == (" NOT NULL", SqlType(s.INT, 5))


@pytest.mark.parametrize('width', [0, 1, 255, 4096, 65535])
def test_valid_widths(width):
    text = "VARCHAR(" + str(width) + ")"
    assert type_identifier(text) == ("", SqlType(s.VARCHAR, width))


@pytest.mark.parametrize('width', ["65536", "99999", "1000000", "abc", "1a",
                                   " 1", "-1"])
def test_malformed_widths(width):
    with pytest.raises(MalformedWidthException) as e:
        type_identifier("VARCHAR(" + width + ")")
    assert e.value.width == width
    assert e.value.position == 8


def test_width_required():
    with pytest.raises(NoMatchException):
        type_identifier("varchar")
    with pytest.raises(NoMatchException):
        type_identifier("bigint")


def test_unknown_type():
    with pytest.raises(NoMatchException):
        type_identifier("geometry")


def test_incomplete_type():
    with pytest.raises(IncompleteException):
        type_identifier(b"VARCHAR(25", complete=False)


def test_malformed_width_is_not_retried():
    # int would match without the width, but the width ends the parse
    with pytest.raises(MalformedWidthException):
        type_identifier("int(x)")


def test_empty_width():
    with pytest.raises(NoMatchException):
        type_identifier("varchar()")
