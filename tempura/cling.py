#!/usr/bin/env python
"""
CLI entry point for tempura package
"""

import pathlib
import sys
from typing import Optional

import click
import colorama

from tempura.demo import main as demo_main
from tempura.misc.temp_file_tools import make_temp_file, make_temp_folder


@click.group(context_settings={'auto_envvar_prefix': 'TEMPURA'})
def cli() -> None:
    """
    tempura - create, use and clean up temporary files and folders
    """
    colorama.just_fix_windows_console()


@click.command()
@click.argument('pattern', default='')
@click.option('-d', '--directory', is_flag=True, default=False,
              help='Create a folder instead of a file')
@click.option('--temp-root', type=click.Path(file_okay=False, path_type=pathlib.Path),
              default=None, help='Folder to create the entry in [default: system temp folder]')
def mktemp(pattern: str, directory: bool, temp_root: Optional[pathlib.Path]) -> None:
    '''Create a temporary file or folder, print its path and leave it in place.'''
    try:
        if directory:
            path = make_temp_folder(pattern, temp_root)
        else:
            file, path = make_temp_file(pattern, temp_root)
            file.close()
    except (OSError, ValueError) as e:
        print(f'{colorama.Fore.RED}✗ mktemp failed: {e}{colorama.Style.RESET_ALL}')
        sys.exit(1)
    print(path)


# Add commands
cli.add_command(demo_main, name='demo')
cli.add_command(mktemp, name='mktemp')


if __name__ == "__main__":
    cli()
