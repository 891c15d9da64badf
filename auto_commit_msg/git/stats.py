"""Diff Stats - Parse 'git diff --shortstat' summaries."""

import re
from dataclasses import dataclass

from auto_commit_msg.git.analyzer import GitError

# Each clause is optional in git's output, so each gets its own pattern
FILES_PATTERN = re.compile(r'(\S+)\s+files?\s+changed')
INSERTIONS_PATTERN = re.compile(r'(\S+)\s+insertions?\(\+\)')
DELETIONS_PATTERN = re.compile(r'(\S+)\s+deletions?\(-\)')


class ParseError(GitError):
    """Raised when a shortstat clause has a malformed count."""
    pass


@dataclass(frozen=True)
class DiffStats:
    """Change counts for the staged change set."""
    files_changed: int = 0
    insertions: int = 0
    deletions: int = 0

    @property
    def total_changes(self) -> int:
        return self.insertions + self.deletions


def _extract_count(pattern: re.Pattern, text: str, label: str) -> int:
    match = pattern.search(text)
    if match is None:
        return 0

    raw = match.group(1)
    if not (raw.isascii() and raw.isdigit()):
        raise ParseError(f"Malformed {label} count in diff summary: {raw!r}")
    return int(raw)


def parse_shortstat(text: str) -> DiffStats:
    """Parse a summary like '3 files changed, 12 insertions(+), 8 deletions(-)'.

    Missing clauses count as zero; git leaves out the insertions clause
    when nothing was added, and likewise for deletions.
    """
    return DiffStats(
        files_changed=_extract_count(FILES_PATTERN, text, "files changed"),
        insertions=_extract_count(INSERTIONS_PATTERN, text, "insertions"),
        deletions=_extract_count(DELETIONS_PATTERN, text, "deletions"),
    )
