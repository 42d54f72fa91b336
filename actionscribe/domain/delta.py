"""Note delta extraction.

Finds the lines of a note that are new since the last save by line-set
subtraction. This is membership, not position: a line deleted in one place
and re-added somewhere else is still considered old. No sequence diff is
attempted.
"""


def extract_new_content(old_content: str, new_content: str) -> str:
    """Return the newline-joined lines of ``new_content`` absent from ``old_content``."""
    old_lines = set(old_content.split("\n"))
    return "\n".join(
        line for line in new_content.split("\n") if line not in old_lines
    )


def has_new_content(old_content: str, new_content: str) -> bool:
    """True when the delta holds anything besides whitespace."""
    return bool(extract_new_content(old_content, new_content).strip())
