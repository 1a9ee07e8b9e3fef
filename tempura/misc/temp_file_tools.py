"""
Temporary file utilities for tempura
"""

from __future__ import annotations

import pathlib
import shutil
import tempfile
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional

from tempura.misc.path_tools import join_in_folder, split_pattern


def make_temp_file(pattern: str = '', folder: Optional[pathlib.Path | str] = None
                   ) -> tuple[BinaryIO, pathlib.Path]:
    '''
    Create and open a new temporary file, returning the handle and its path.

    The file is created in `folder`, or in the system's temp folder if `folder` is None. The
    caller owns the file and is responsible for closing and removing it.
    '''
    prefix, suffix = split_pattern(pattern)
    file = tempfile.NamedTemporaryFile(mode='w+b', prefix=prefix, suffix=suffix,
                                       dir=None if folder is None else str(folder),
                                       delete=False)
    return (file, pathlib.Path(file.name).resolve())


def make_temp_folder(pattern: str = '', folder: Optional[pathlib.Path | str] = None
                     ) -> pathlib.Path:
    prefix, suffix = split_pattern(pattern)
    return pathlib.Path(
        tempfile.mkdtemp(prefix=prefix, suffix=suffix,
                         dir=None if folder is None else str(folder))
    ).resolve()


def remove_path(path: pathlib.Path | str) -> None:
    '''Remove a file, or a folder with everything in it. Missing paths are fine.'''
    path = pathlib.Path(path)
    if path.is_dir() and not path.is_symlink():
        try:
            shutil.rmtree(path)
        except FileNotFoundError:
            pass
    else:
        path.unlink(missing_ok=True)


@contextmanager
def create_temp_file(pattern: str = '', folder: Optional[pathlib.Path | str] = None
                     ) -> Iterator[BinaryIO]:
    '''
    Context manager that creates a temporary file and deletes it after usage.

    Yields an open binary file; its path is available as `pathlib.Path(file.name)`. When the
    suite finishes, the file is closed first and only then removed, since some platforms refuse
    to remove a file that's still open.
    '''
    file, path = make_temp_file(pattern, folder)
    try:
        yield file
    finally:
        try:
            file.close()
        finally:
            remove_path(path)


@contextmanager
def create_temp_folder(pattern: str = '', folder: Optional[pathlib.Path | str] = None
                       ) -> Iterator[pathlib.Path]:
    '''
    Context manager that creates a temporary folder and deletes it after usage.

    After the suite finishes, the temporary folder and all its files and
    subfolders will be deleted.
    '''
    temp_folder = make_temp_folder(pattern, folder)
    try:
        yield temp_folder
    finally:
        remove_path(temp_folder)


def write_temp_bytes(file: BinaryIO, data: bytes) -> int:
    '''Write `data` to an open file and flush it to the OS.'''
    n_bytes = file.write(data)
    file.flush()
    return n_bytes


def write_file_in_folder(folder: pathlib.Path | str, name: str, data: bytes) -> pathlib.Path:
    path = join_in_folder(folder, name)
    with path.open('xb') as file:
        file.write(data)
    return path
