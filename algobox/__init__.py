"""Classic algorithms, data structures and contest-problem solutions."""

__version__ = "0.1.0"