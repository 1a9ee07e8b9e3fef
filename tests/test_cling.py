from __future__ import annotations

import pathlib

import colorama
import pytest
from click.testing import CliRunner

from tempura.cling import cli


def test_demo(temp_root: pathlib.Path):
    result = CliRunner().invoke(cli, ['demo', '--temp-root', str(temp_root)])
    assert result.exit_code == 0, result.output
    assert 'Temp file name: ' in result.output
    assert list(temp_root.iterdir()) == []


def test_demo_temp_root_from_environment(temp_root: pathlib.Path):
    result = CliRunner().invoke(cli, ['demo'], env={'TEMPURA_DEMO_TEMP_ROOT': str(temp_root)})
    assert result.exit_code == 0, result.output
    assert f'Temp dir name: {temp_root.resolve()}' in result.output


def test_mktemp_file(temp_root: pathlib.Path):
    result = CliRunner().invoke(cli, ['mktemp', 'report-*.txt', '--temp-root', str(temp_root)])
    assert result.exit_code == 0, result.output
    path = pathlib.Path(result.output.strip())
    assert path.is_file()
    assert path.name.startswith('report-')
    assert path.name.endswith('.txt')


def test_mktemp_directory(temp_root: pathlib.Path):
    result = CliRunner().invoke(cli, ['mktemp', '-d', 'work_', '--temp-root', str(temp_root)])
    assert result.exit_code == 0, result.output
    path = pathlib.Path(result.output.strip())
    assert path.is_dir()
    assert path.name.startswith('work_')


def test_mktemp_bad_pattern(temp_root: pathlib.Path):
    result = CliRunner().invoke(cli, ['mktemp', 'a/b', '--temp-root', str(temp_root)])
    assert result.exit_code == 1
    assert 'mktemp failed' in result.output
    assert list(temp_root.iterdir()) == []


def test_windows_console_fixed_for_every_command(temp_root: pathlib.Path,
                                                 monkeypatch: pytest.MonkeyPatch):
    calls = []
    monkeypatch.setattr(colorama, 'just_fix_windows_console', lambda: calls.append(None))
    result = CliRunner().invoke(cli, ['mktemp', '--temp-root', str(temp_root)])
    assert result.exit_code == 0, result.output
    assert len(calls) == 1
