"""Logical path -> backend key resolution."""

from __future__ import annotations

import posixpath

SEP = "/"


def resolve(root: str, path: str) -> str:
    """Join ``path`` onto ``root`` and clean the result.

    Empty segments collapse, ``.`` and ``..`` are resolved lexically and trailing
    separators are dropped. A leading separator on ``path`` does not escape
    ``root``. An empty ``path`` resolves to the cleaned root itself, and a path
    that cleans to the current directory resolves to ``""``.
    """
    joined = SEP.join(part for part in (root, path) if part)
    if not joined:
        return ""
    cleaned = posixpath.normpath(joined)
    # normpath keeps a POSIX double leading slash; keys never need it.
    if cleaned.startswith(SEP):
        cleaned = SEP + cleaned.lstrip(SEP)
    if cleaned == ".":
        return ""
    return cleaned
