# txtscan

`txtscan` walks a directory tree and finds every file whose name ends in `.txt`,
in any letter case. It reports:

- the number of lines in each file it finds,
- the ten most frequent words across all those files, with their counts,
- how many files it processed.

Words are runs of letters, compared in lower case. Digits, punctuation and
other symbols separate words. Files are read as UTF-8, and bytes that are not
valid UTF-8 are replaced. Files are counted in parallel threads.

## Installation

```
pip install .
```

## Command line

```
txtscan <directory>
```

The same command can also be run as `python -m txtscan.cli <directory>`.

The report goes to the log on standard error, with a timestamp before each
line. For example:

```
2024-01-01 12:00:00,000 path: notes/a.txt, count: 2
2024-01-01 12:00:00,001 info-top-10-words-by-count:
2024-01-01 12:00:00,001 hello: 2
2024-01-01 12:00:00,001 go: 1
2024-01-01 12:00:00,001 Processed 2 files
```

The exit status is 0 on success. It is 1 when no directory is given, or when
the directory cannot be walked, for example because it does not exist. A file
that cannot be read is reported in the log and left out of the counts.

## How files are found and counted

- `scan` visits directories depth first, in lexical order of entry names, and
  does not follow symbolic links. If the root is a file rather than a
  directory, the result is that file alone when its name ends in `.txt`, and
  an empty list otherwise.
- A final line without a trailing newline still counts as a line, and blank
  lines count too. `\r\n` line endings are accepted.
- A line of 64 KiB or more cannot be read. `count_lines` raises `ValueError`
  for such a line. `count_words` stops counting that file at that line and
  keeps the words read before it.

## Library use

```python
from txtscan.scanner import scan
from txtscan.lines import count_lines, count_all_lines
from txtscan.words import tokenize, count_words, count_words_in_all_files
from txtscan.cli import top_words, execute

paths = scan("notes")                     # list of .txt paths
lines = count_all_lines(paths)            # {path: line count}
words = count_words_in_all_files(paths)   # Counter {word: total count}

for entry in top_words(words, 10):        # WordCount(word=..., count=...)
    print(entry.word, entry.count)

tokenize("No-symbols-here")               # ['no', 'symbols', 'here']
```

- `top_words(counts, limit=10)` returns the `limit` most frequent words as
  frozen `WordCount` dataclasses, most frequent first.
- `execute(root)` runs the whole report through the log and returns the top
  words. It raises `OSError` if `root` cannot be scanned.
- `count_lines(path)` and `count_words(path)` work on a single file. They
  raise `OSError` if the file cannot be opened.
- `count_all_lines` and `count_words_in_all_files` log each file that fails
  and leave it out of the result.

## Running the tests

```
pip install .[test]
pytest
```