from pathlib import Path

from argfile.core.io.read_response_file import read_response_file


def test_read_missing_file_returns_none(tmp_path: Path):
    assert read_response_file(str(tmp_path / "nope")) is None


def test_read_tokenizes_contents(tmp_path: Path):
    p = tmp_path / "f.rsp"
    p.write_text("one 'two three'\n", encoding="utf-8")
    rf = read_response_file(str(p))
    assert rf is not None
    assert rf.path == str(p)
    assert rf.contents == "one 'two three'\n"
    assert rf.tokens == ["one", "two three"]
    assert rf.count == 2


def test_read_whitespace_only_has_no_tokens(tmp_path: Path):
    p = tmp_path / "blank.rsp"
    p.write_text("\n  \n", encoding="utf-8")
    rf = read_response_file(str(p))
    assert rf is not None
    assert rf.tokens == []
    assert rf.count == 0


def test_read_undecodable_bytes_does_not_fail(tmp_path: Path):
    p = tmp_path / "bin.rsp"
    p.write_bytes(b"ok \xff\xfe")
    rf = read_response_file(str(p))
    assert rf is not None
    assert rf.count == 2
    assert rf.tokens[0] == "ok"
