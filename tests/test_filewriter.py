from dbccoder.filewriter import FileWriter


def test_append_adds_newline():
    wr = FileWriter()
    wr.append("#pragma once")
    assert wr.getvalue() == "#pragma once\n"


def test_append_keeps_existing_newline():
    wr = FileWriter()
    wr.append("line\n")
    assert wr.getvalue().count("\n") == 1
    assert wr.getvalue().endswith("line\n")


def test_append_empty_gives_blank_line():
    wr = FileWriter()
    wr.append()
    wr.append("")
    assert wr.getvalue() == "\n\n"


def test_append_text_no_newline():
    wr = FileWriter()
    wr.append_text("abc")
    wr.append_text("def")
    assert wr.getvalue() == "abc" + "def"


def test_blank_counts():
    wr = FileWriter()
    wr.blank(3)
    assert wr.getvalue() == "\n" * 3
    wr.blank()
    assert wr.getvalue() == "\n" * 4
    wr.blank(0)
    assert wr.getvalue() == "\n" * 4


def test_lines_round_trip():
    lines = ["#pragma once", "", "#include <dbccodeconf.h>", "", ""]
    wr = FileWriter()
    for line in lines:
        wr.append(line)
    assert wr.getvalue().split("\n")[:-1] == lines


def test_clear():
    wr = FileWriter()
    wr.append("something")
    wr.clear()
    assert wr.getvalue() == ""


def test_flush_writes_and_clears(tmp_path):
    wr = FileWriter()
    wr.append("#pragma once")
    wr.append_text("x")
    expected = wr.getvalue()
    target = tmp_path / "out.h"
    wr.flush(target)
    assert target.read_text(encoding="utf-8") == expected
    assert wr.getvalue() == ""


def test_second_flush_writes_only_new_text(tmp_path):
    wr = FileWriter()
    wr.append("first")
    wr.flush(tmp_path / "a.h")
    wr.append("second")
    wr.flush(tmp_path / "b.h")
    assert (tmp_path / "b.h").read_text(encoding="utf-8") == "second\n"