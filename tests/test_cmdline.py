import pytest

from sqlddl._cmdline import main


SCHEMA = b"""CREATE TABLE users (
  id bigint(20) NOT NULL AUTO_INCREMENT,
  name varchar(255),
  PRIMARY KEY (id)
);

CREATE TABLE user_newtalk (user_id int(5) NOT NULL default '0') TYPE=MyISAM;
"""


def _run(argv):
    with pytest.raises(SystemExit) as e:
        main(argv)
    return e.value.code


def test_parse(tmp_path, capsys):
    path = tmp_path / 'schema.sql'
    path.write_bytes(SCHEMA)
    assert not _run(['parse', str(path)])
    out = capsys.readouterr().out
    assert "name='users'" in out
    assert "name='user_newtalk'" in out
    assert "primary key" in out


def test_parse_definitions(tmp_path, capsys):
    path = tmp_path / 'schema.sql'
    path.write_bytes(SCHEMA)
    assert not _run(['parse', '--definitions', str(path)])
    out = capsys.readouterr().out
    assert "kind='bigint', width=20" in out
    assert "auto_increment=True" in out


def test_parse_error(tmp_path, capsys):
    path = tmp_path / 'bad.sql'
    path.write_bytes(SCHEMA + b"CREATE TABLE t (id bigint(99999));\n")
    assert _run(['parse', str(path)]) == 1
    out = capsys.readouterr().out
    assert 'error at byte %d' % (len(SCHEMA) + 26,) in out


def test_keyword(capsys):
    assert not _run(['keyword', 'select'])
    assert 'select is a reserved keyword' in capsys.readouterr().out


def test_not_a_keyword(capsys):
    assert _run(['keyword', 'selected']) == 1
    assert 'selected is not a reserved keyword' in capsys.readouterr().out
    assert _run(['keyword', 'users']) == 1


def test_version(capsys):
    assert not _run(['--version'])
    assert capsys.readouterr().out.strip() == '0.1.0'


def test_keyword_with_surrounding_whitespace(capsys):
    assert not _run(['keyword', 'select '])
    assert 'select is a reserved keyword' in capsys.readouterr().out
    assert not _run(['keyword', ' INTO\n'])
