"""Find .txt files under a directory, count their lines and report the most frequent words."""

__version__ = "0.1.0"
__all__ = ["cli", "lines", "scanner", "words"]