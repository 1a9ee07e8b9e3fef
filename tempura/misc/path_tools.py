from __future__ import annotations

import os
import pathlib
import tempfile


def _has_separator(string: str) -> bool:
    separators = {os.sep} | ({os.altsep} if os.altsep else set())
    return any(separator in string for separator in separators)


def split_pattern(pattern: str) -> tuple[str, str]:
    """
    Split a temp name pattern into prefix and suffix.

    The random part goes where the last `*` is, or at the end if there's no `*`.
    """
    if _has_separator(pattern):
        raise ValueError(f'Pattern contains path separator: {pattern!r}')
    if not pattern:
        return (tempfile.template, '')
    prefix, star, suffix = pattern.rpartition('*')
    if not star:
        return (pattern, '')
    return (prefix, suffix)


def join_in_folder(folder: pathlib.Path | str, name: str) -> pathlib.Path:
    """Join a folder with a plain file name, refusing anything that would escape it."""
    if not name or name in ('.', '..') or _has_separator(name):
        raise ValueError(f'Not a plain file name: {name!r}')
    return pathlib.Path(folder) / name
