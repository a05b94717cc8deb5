import pytest

from sqlddl import sql_keyword
from sqlddl import KEYWORDS
from sqlddl import NoMatchException
from sqlddl import IncompleteException
from sqlddl import InvalidArgumentException


def _prefix_pairs():
    return [(short, long) for short in KEYWORDS for long in KEYWORDS
            if short != long and long.startswith(short)]


def test_keyword_count():
    assert len(KEYWORDS) == 124
    assert len(set(KEYWORDS)) == len(KEYWORDS)


def test_keyword_bytes():
    assert sql_keyword(b"select * from t") == (b" * from t", b"select")


def test_keyword_str():
    assert sql_keyword("SELECT * from t") == (" * from t", "SELECT")


def test_keyword_boundaries():
    assert sql_keyword(b"select(") == (b"(", b"select")
    assert sql_keyword(b"table;") == (b";", b"table")
    assert sql_keyword(b"key,") == (b",", b"key")
    assert sql_keyword(b"set=") == (b"=", b"set")
    assert sql_keyword(b"null\n") == (b"\n", b"null")
    assert sql_keyword(b"where\t") == (b"\t", b"where")


def test_keyword_at_end_of_input():
    assert sql_keyword(b"IN") == (b"", b"IN")


def test_into_is_not_in():
    assert sql_keyword(b"INTO ") == (b" ", b"INTO")
    assert sql_keyword(b"into t") == (b" t", b"into")


def test_prefix_pairs_exist():
    pairs = _prefix_pairs()
    assert ('IN', 'INTO') in pairs
    assert ('CURRENT_TIME', 'CURRENT_TIMESTAMP') in pairs
    assert ('NOT', 'NOTNULL') in pairs


@pytest.mark.parametrize('short, long', _prefix_pairs())
def test_longer_keyword_wins(short, long):
    remainder, keyword = sql_keyword(long + ' ')
    assert keyword == long
    assert remainder == ' '


def test_not_a_keyword():
    with pytest.raises(NoMatchException):
        sql_keyword(b"users")


def test_keyword_needs_boundary():
    with pytest.raises(NoMatchException):
        sql_keyword(b"SELECTED")
    with pytest.raises(NoMatchException):
        sql_keyword(b"tables ")


def test_empty_input():
    with pytest.raises(NoMatchException):
        sql_keyword(b"")


def test_incomplete_keyword():
    with pytest.raises(IncompleteException) as e:
        sql_keyword(b"SELE", complete=False)
    # two more letters plus a boundary character
    assert e.value.needed == 3
    assert e.value.position == 4


def test_incomplete_when_longer_keyword_possible():
    with pytest.raises(IncompleteException) as e:
        sql_keyword(b"WITH", complete=False)
    assert e.value.needed == 1
    assert e.value.position == 4
    with pytest.raises(IncompleteException):
        sql_keyword(b"IN", complete=False)
    with pytest.raises(IncompleteException):
        sql_keyword(b"current_time", complete=False)


def test_streaming_match_at_end_of_input():
    assert sql_keyword(b"SELECT", complete=False) == (b"", b"SELECT")
    assert sql_keyword(b"WITHOUT", complete=False) == (b"", b"WITHOUT")
    assert sql_keyword("into", complete=False) == ("", "into")


def test_streaming_match():
    assert sql_keyword(b"select ", complete=False) == (b" ", b"select")
    assert sql_keyword(b"with ", complete=False) == (b" ", b"with")


def test_incomplete_with_nothing_matching():
    with pytest.raises(NoMatchException):
        sql_keyword(b"xyz", complete=False)


def test_bytearray_input():
    assert sql_keyword(bytearray(b"drop table")) == (b" table", b"drop")


def test_invalid_input():
    with pytest.raises(InvalidArgumentException):
        sql_keyword(42)
