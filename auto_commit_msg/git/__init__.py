"""Git Operations Package"""

from auto_commit_msg.git.analyzer import GitAnalyzer, GitError, EmptyInputError
from auto_commit_msg.git.stats import DiffStats, ParseError, parse_shortstat

__all__ = [
    "GitAnalyzer",
    "GitError",
    "EmptyInputError",
    "DiffStats",
    "ParseError",
    "parse_shortstat",
]
