import logging
import os

from txtscan.cli import WordCount, execute, main, top_words


def create_structure(base, structure):
    for name, value in structure.items():
        full_path = os.path.join(base, name)
        if isinstance(value, str):
            with open(full_path, "w", encoding="utf-8", newline="") as handle:
                handle.write(value)
        else:
            os.mkdir(full_path)
            create_structure(full_path, value)


def test_top_words_orders_by_count_descending():
    counts = {"a": 5, "b": 3, "c": 9}
    assert top_words(counts, 2) == [WordCount("c", 9), WordCount("a", 5)]


def test_top_words_fewer_than_limit():
    counts = {"x": 1, "y": 2}
    assert top_words(counts) == [WordCount("y", 2), WordCount("x", 1)]


def test_top_words_default_limit_keeps_largest():
    counts = {f"w{i}": i for i in range(15)}
    result = top_words(counts)
    assert len(result) == 10
    assert [wc.count for wc in result] == sorted(counts.values(), reverse=True)[:10]
    assert all(counts[wc.word] == wc.count for wc in result)


def test_top_words_empty():
    assert top_words({}) == []


def test_execute_returns_top_words(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    create_structure(
        tmp_path,
        {"a.txt": "Hello world", "b.txt": "Hello Go", "nested": {"c.txt": "Go Go Go"}, "skip.md": "Go"},
    )
    result = execute(str(tmp_path))
    assert result == [WordCount("go", 4), WordCount("hello", 2), WordCount("world", 1)]
    assert "Processed 3 files" in caplog.text
    assert "info-top-10-words-by-count:" in caplog.text


def test_execute_missing_directory_raises(tmp_path):
    missing = str(tmp_path / "missing")
    try:
        execute(missing)
    except OSError as exc:
        assert isinstance(exc, FileNotFoundError)
    else:
        raise AssertionError("expected OSError")


def test_main_without_arguments_fails(caplog):
    caplog.set_level(logging.INFO)
    assert main([]) == 1
    assert "Usage" in caplog.text


def test_main_missing_directory_fails(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    assert main([str(tmp_path / "missing")]) == 1
    assert "err-failed-to-scan-directory" in caplog.text


def test_main_success_logs_line_counts(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    create_structure(tmp_path, {"a.txt": "one\ntwo", "b.txt": "three"})
    assert main([str(tmp_path)]) == 0
    a_path = os.path.join(str(tmp_path), "a.txt")
    assert f"path: {a_path}, count: 2" in caplog.text
    assert "Processed 2 files" in caplog.text