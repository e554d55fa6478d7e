"""Directory synthesis over a flat key namespace.

The backend has no directories. A directory ``d`` exists only because some
object key starts with ``d/``; its children are derived by stripping that
prefix from every such key. Classification is a pure function over a list of
keys so it can be exercised without a backend.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from bucketfs.errors import NotFound
from bucketfs.interfaces import DirEntry
from bucketfs.paths import SEP


class KeyKind(StrEnum):
    EXACT = "exact"  # the key is the queried prefix itself: a file
    CHILD = "child"  # exactly one segment below the prefix
    DESCENDANT = "descendant"  # two or more segments below
    MARKER = "marker"  # "<prefix>/" placeholder object, no name of its own
    OUTSIDE = "outside"  # shares the string prefix only, e.g. "dir2/x" for "dir"


def _dir_base(prefix: str) -> str:
    if not prefix or prefix.endswith(SEP):
        return prefix
    return prefix + SEP


def classify(prefix: str, key: str) -> tuple[KeyKind, str]:
    """Classify ``key`` relative to directory ``prefix``.

    Returns the kind and the name relative to the directory ("" when the kind
    carries no name).
    """
    if key == prefix and prefix:
        return KeyKind.EXACT, ""
    base = _dir_base(prefix)
    if not key.startswith(base):
        return KeyKind.OUTSIDE, ""
    name = key[len(base):]
    if not name:
        return KeyKind.MARKER, ""
    if SEP in name:
        return KeyKind.DESCENDANT, name
    return KeyKind.CHILD, name


def synthesize_entries(prefix: str, keys: Iterable[str], *, path: str | None = None) -> list[DirEntry]:
    """Build the listing of directory ``prefix`` from backend ``keys``.

    ``keys`` is every key the backend reports for the string prefix. Raises
    :class:`NotFound` (naming ``path``, defaulting to ``prefix``) when no key
    lives under the directory, or when one key equals the prefix exactly.

    Keys nested more than one level down are dropped without producing an
    entry for their intermediate directory, and every entry is reported as a
    file (``is_dir=False``).
    """
    found = False
    names: set[str] = set()
    for key in keys:
        kind, name = classify(prefix, key)
        if kind is KeyKind.OUTSIDE:
            continue
        if kind is KeyKind.EXACT:
            raise NotFound(path if path is not None else prefix)
        found = True
        if kind is KeyKind.CHILD:
            names.add(name)

    if not found:
        raise NotFound(path if path is not None else prefix)

    # str ordering is code point ordering, which matches UTF-8 byte ordering.
    return [DirEntry(name=name) for name in sorted(names)]
