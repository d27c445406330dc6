import io
import sys

from rdfsnips.hashl import hash_lines, line_hash, main
from rdfsnips.murmur import hex_digest


def test_trailing_newline_is_ignored():
    assert line_hash(b"abc\n") == line_hash(b"abc")
    assert line_hash(b"abc") == hex_digest(b"abc")


def test_only_one_newline_is_stripped():
    assert line_hash(b"a\n\n") == hex_digest(b"a\n")


def test_empty_line_hashes_to_zeros():
    assert line_hash(b"\n") == "0" * 32


def test_str_input_is_utf8():
    assert line_hash("abc\n") == line_hash(b"abc")
    assert line_hash("\u00e9") == hex_digest("\u00e9".encode("utf-8"))


def test_hash_lines_over_stream():
    stream = io.BytesIO(b"a\nb\nc")
    assert list(hash_lines(stream)) == [line_hash(b"a"), line_hash(b"b"), line_hash(b"c")]


def test_main_with_files(tmp_path, capsys):
    path = tmp_path / "in.nq"
    path.write_bytes(b"<a> <b> <c> .\n<d> <e> <f> .\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [line_hash(b"<a> <b> <c> ."), line_hash(b"<d> <e> <f> .")]


def test_main_missing_file(tmp_path, capsys):
    good = tmp_path / "good"
    good.write_bytes(b"x\n")
    rc = main([str(tmp_path / "missing"), str(good)])
    captured = capsys.readouterr()
    assert rc == 1
    assert "cannot open file" in captured.err
    assert captured.out.splitlines() == [line_hash(b"x")]


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"one\ntwo\n")))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [line_hash(b"one"), line_hash(b"two")]