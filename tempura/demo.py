"""
Walkthrough of temporary files and folders: create, write, print, clean up
"""

from __future__ import annotations

import pathlib
import sys
from dataclasses import asdict, dataclass
from typing import Any, Optional

import click
import colorama
import yaml

from tempura.misc.temp_file_tools import (create_temp_file, create_temp_folder,
                                          write_file_in_folder, write_temp_bytes)


DEFAULT_FILE_PAYLOAD = bytes([1, 2, 3, 4])
DEFAULT_NESTED_PAYLOAD = bytes([1, 2])


@dataclass(frozen=True)
class DemoReport:
    file_path: pathlib.Path
    folder_path: pathlib.Path
    nested_file_path: pathlib.Path
    n_file_bytes: int
    n_nested_bytes: int

    def to_dict(self) -> dict[str, Any]:
        return {key: (str(value) if isinstance(value, pathlib.Path) else value)
                for key, value in asdict(self).items()}


def _print_step(message: str) -> None:
    print(f'{colorama.Style.BRIGHT}{message}{colorama.Style.RESET_ALL}')


def _print_done(message: str) -> None:
    print(f'{colorama.Fore.GREEN}✓ {message}{colorama.Style.RESET_ALL}')


def run_demo(temp_root: Optional[pathlib.Path | str] = None,
             file_pattern: str = 'sample',
             folder_pattern: str = 'sampledir',
             file_payload: bytes = DEFAULT_FILE_PAYLOAD,
             nested_name: str = 'file1',
             nested_payload: bytes = DEFAULT_NESTED_PAYLOAD) -> DemoReport:
    '''
    Create a temp file and a temp folder, write to both, and remove them again.

    Both paths are printed as they're created. Everything is removed before this function
    returns, and also when it raises; `OSError` is left for the caller to handle.
    '''
    _print_step('Creating temporary file...')
    with create_temp_file(file_pattern, temp_root) as file:
        file_path = pathlib.Path(file.name).resolve()
        print(f'Temp file name: {file_path}')
        n_file_bytes = write_temp_bytes(file, file_payload)
        # Some platforms can't remove a file that's still open.
        file.close()
        _print_done(f'Wrote {n_file_bytes} bytes')

        # Several temp files are better kept together in a temp folder.
        _print_step('Creating temporary folder...')
        with create_temp_folder(folder_pattern, temp_root) as folder_path:
            print(f'Temp dir name: {folder_path}')
            nested_file_path = write_file_in_folder(folder_path, nested_name, nested_payload)
            _print_done(f'Wrote {len(nested_payload)} bytes to {nested_file_path.name}')

    _print_done('Cleaned up')
    return DemoReport(
        file_path=file_path,
        folder_path=folder_path,
        nested_file_path=nested_file_path,
        n_file_bytes=n_file_bytes,
        n_nested_bytes=len(nested_payload),
    )


@click.command()
@click.option('--temp-root', type=click.Path(file_okay=False, path_type=pathlib.Path),
              default=None, help='Folder to create temp entries in [default: system temp folder]')
@click.option('--file-pattern', default='sample', show_default=True,
              help="Name pattern for the temp file; a '*' marks where the random part goes")
@click.option('--folder-pattern', default='sampledir', show_default=True,
              help='Name pattern for the temp folder')
@click.option('--report', 'report_path', type=click.Path(dir_okay=False, path_type=pathlib.Path),
              default=None, help='Write a YAML report of the run to this path')
def main(temp_root: Optional[pathlib.Path], file_pattern: str, folder_pattern: str,
         report_path: Optional[pathlib.Path]) -> None:
    '''Create a temp file and a temp folder, write to them, then clean up.'''
    try:
        report = run_demo(temp_root=temp_root, file_pattern=file_pattern,
                          folder_pattern=folder_pattern)
    except (OSError, ValueError) as e:
        print(f'{colorama.Fore.RED}✗ Demo failed: {e}{colorama.Style.RESET_ALL}')
        sys.exit(1)

    if report_path is not None:
        try:
            with report_path.open('w', encoding='utf-8') as yaml_file:
                yaml.safe_dump(report.to_dict(), yaml_file)
        except OSError as e:
            print(f'{colorama.Fore.RED}✗ Writing report failed: {e}{colorama.Style.RESET_ALL}')
            sys.exit(1)
        print(f'Report written to {report_path}')
