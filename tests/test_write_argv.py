from pathlib import Path

from argfile.core.expand.expand_argv import expand_args
from argfile.core.tokenize.build_argv import build_argv
from argfile.core.write.write_argv import quote_arg, write_argv


def test_quote_arg_escapes_specials():
    assert quote_arg("plain") == "plain"
    assert quote_arg("a b") == "a\\ b"
    assert quote_arg("it's") == "it\\'s"
    assert quote_arg('say "x"') == 'say\\ \\"x\\"'
    assert quote_arg("c:\\dir") == "c:\\\\dir"
    assert quote_arg("") == '""'


def test_written_file_splits_back(tmp_path: Path):
    args = ["-o", "out dir/a.out", "", "tab\there", "quote'd", 'dq"', "back\\slash", "nl\nin"]
    p = tmp_path / "sub" / "args.rsp"
    write_argv(args, p)
    assert build_argv(p.read_text(encoding="utf-8")) == args


def test_written_file_expands_back(tmp_path: Path):
    args = ["--name", "hello world", "@literal"]
    p = tmp_path / "args.rsp"
    write_argv(args, p)
    # "@literal" names no file, so it survives expansion as-is.
    assert expand_args(["prog", "@" + str(p)]) == ["prog"] + args


def test_write_empty_list_gives_empty_file(tmp_path: Path):
    p = tmp_path / "empty.rsp"
    write_argv([], p)
    assert p.read_text(encoding="utf-8") == ""
    assert expand_args(["prog", "@" + str(p)]) == ["prog"]
