import codecs
from dataclasses import astuple

import pytest

from eqset.textstats import (
    TextStats,
    count_lines,
    csv_path,
    export_csv,
    main,
    read_lines,
)


def test_no_lines_gives_zero_counts():
    assert count_lines([]) == TextStats()


def test_empty_line_counts_one_word_and_one_paragraph():
    stats = count_lines([""])
    assert stats.paragraphs == 1
    assert stats.words == 1
    assert stats.chars == 0
    assert stats.sentences == 0


def test_chars_equal_line_length():
    line = "hello there, world"
    assert count_lines([line]).chars == len(line)


def test_chars_without_spaces_excludes_whitespace():
    line = "a b\tc  d"
    stats = count_lines([line])
    assert stats.chars_without_spaces == len(line.replace(" ", "").replace("\t", ""))
    assert stats.chars_without_spaces <= stats.chars


def test_words_counts_space_separated_tokens():
    tokens = ["alpha", "beta", "gamma", "delta"]
    assert count_lines([" ".join(tokens)]).words == len(tokens)


def test_trailing_space_counts_an_extra_word():
    assert count_lines(["one two "]).words == 3


def test_sentences_counted_by_terminators():
    assert count_lines(["Hi there. How are you? Great!"]).sentences == 3


def test_repeated_terminators_count_once():
    assert count_lines(["Wait... what?!"]).sentences == 2


def test_paragraphs_equal_line_count():
    lines = ["first", "", "third line here"]
    assert count_lines(lines).paragraphs == len(lines)


@pytest.mark.parametrize(
    "first,second",
    [
        (["A cat. A dog."], ["Another line!"]),
        (["x y z", ""], ["  leading", "trailing  "]),
    ],
)
def test_counts_are_additive_over_lines(first, second):
    combined = astuple(count_lines(first + second))
    separate = [a + b for a, b in zip(astuple(count_lines(first)), astuple(count_lines(second)))]
    assert list(combined) == separate


def test_line_order_does_not_matter():
    lines = ["One. Two.", "three four", "five?"]
    assert count_lines(lines) == count_lines(reversed(lines))


def test_to_csv_format():
    stats = TextStats(1, 2, 3, 4, 5)
    assert stats.to_csv() == (
        "Chars;1\n"
        "Chars without spaces;2\n"
        "Words;3\n"
        "Sentences;4\n"
        "Paragraphs;5\n"
    )


def test_csv_path_replaces_extension():
    assert csv_path("notes.txt") == "notes.csv"


def test_csv_path_replaces_every_occurrence():
    assert csv_path("txt_dir/a.txt") == "csv_dir/a.csv"


def test_read_lines_round_trip(tmp_path):
    lines = ["first line", "", "third: done."]
    path = tmp_path / "sample.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    assert read_lines(path) == lines


def test_read_lines_without_final_newline(tmp_path):
    lines = ["a", "b"]
    path = tmp_path / "sample.txt"
    path.write_text("\n".join(lines), encoding="utf-8")
    assert read_lines(path) == lines


def test_read_lines_handles_crlf(tmp_path):
    lines = ["one", "two"]
    path = tmp_path / "crlf.txt"
    path.write_bytes("\r\n".join(lines).encode("utf-8") + b"\r\n")
    assert read_lines(path) == lines


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert read_lines(path) == []


@pytest.mark.parametrize("encoding", ["utf-16", "utf-32", "utf-8-sig"])
def test_read_lines_detects_bom(tmp_path, encoding):
    lines = ["caffè", "perché?"]
    path = tmp_path / "bom.txt"
    path.write_bytes("\n".join(lines).encode(encoding))
    assert read_lines(path) == lines


def test_read_lines_utf8_bom_is_stripped(tmp_path):
    path = tmp_path / "bom8.txt"
    path.write_bytes(codecs.BOM_UTF8 + b"word")
    assert read_lines(path) == ["word"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.txt")


def test_export_csv_writes_file(tmp_path):
    stats = TextStats(10, 8, 3, 1, 2)
    target = export_csv(stats, tmp_path / "out.csv")
    assert target.read_bytes() == stats.to_csv().encode("utf-8")


def test_main_prints_counts(tmp_path, capsys):
    lines = ["Hello world.", "Second line"]
    path = tmp_path / "doc.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    output = capsys.readouterr().out
    stats = count_lines(lines)
    paragraph_row = next(row for row in output.splitlines() if row.startswith("Paragraphs"))
    assert paragraph_row.split()[-1] == str(stats.paragraphs)
    word_row = next(row for row in output.splitlines() if row.startswith("Words"))
    assert word_row.split()[-1] == str(stats.words)


def test_main_export_writes_csv(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("Just one line. Two sentences!\n", encoding="utf-8")
    assert main([str(path), "--export"]) == 0
    exported = tmp_path / "doc.csv"
    assert exported.read_text(encoding="utf-8") == count_lines(read_lines(path)).to_csv()


def test_main_warns_on_non_txt(tmp_path, capsys):
    path = tmp_path / "doc.md"
    path.write_text("content\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert "Please select a .txt file." in capsys.readouterr().err


def test_main_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "nothing.txt")]) == 1
    assert "Cannot read" in capsys.readouterr().err