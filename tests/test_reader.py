from __future__ import annotations

import io

from tlscheck.reader import read_domains, read_files, read_stream, split_domains


def test_split_on_commas_and_whitespace():
    lines = ["domain.ru\n", "domain2.ru,www.domain2.ru\n", "  a.ru , b.ru\tc.ru  \n"]

    assert list(split_domains(lines)) == [
        "domain.ru",
        "domain2.ru",
        "www.domain2.ru",
        "a.ru",
        "b.ru",
        "c.ru",
    ]


def test_empty_tokens_are_dropped():
    assert list(split_domains(["", ",,,", "   \n"])) == []


def test_duplicates_are_kept():
    assert list(split_domains(["a.ru,a.ru"])) == ["a.ru", "a.ru"]


def test_read_stream():
    assert list(read_stream(io.StringIO("x.ru y.ru\nz.ru"))) == ["x.ru", "y.ru", "z.ru"]


def test_files_read_in_order_and_missing_skipped(tmp_path, caplog):
    first = tmp_path / "first.txt"
    first.write_text("a.ru\nb.ru\n")
    second = tmp_path / "second.txt"
    second.write_text("c.ru")

    paths = [str(first), str(tmp_path / "missing.txt"), str(second)]
    assert list(read_files(paths)) == ["a.ru", "b.ru", "c.ru"]
    assert any("missing.txt" in r.getMessage() for r in caplog.records)


def test_stdin_used_without_files(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("s.ru,t.ru\n"))

    assert list(read_domains([])) == ["s.ru", "t.ru"]
