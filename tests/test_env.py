"""Tests for colour_kit.core.env — .env loading, walk-up logic and settings."""

import os
from pathlib import Path

import pytest
from colour_kit.core.env import Settings, _find_dotenv, _parse_dotenv, load_env, load_settings


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('COLOUR_KIT_HEX_CASE=upper\n')
        assert _parse_dotenv(f) == {'COLOUR_KIT_HEX_CASE': 'upper'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('KEY="hello world"\nKEY2=\'single\'\n')
        assert _parse_dotenv(f) == {'KEY': 'hello world', 'KEY2': 'single'}

    def test_comments_and_blank_lines_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nFOO=bar\n\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_export_prefix(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('export FOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_no_equals_skipped(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('NOEQUALS\nFOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}


class TestFindDotenv:
    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / '.git').mkdir(parents=True)
        (repo / 'src').mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        assert _find_dotenv(repo / 'src') is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        (repo / 'src').mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        assert _find_dotenv(repo / 'src') is None


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('TEST_COLOUR_KEY', raising=False)
        (tmp_path / '.env').write_text('TEST_COLOUR_KEY=fromfile\n')
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() == tmp_path / '.env'
        assert os.environ.get('TEST_COLOUR_KEY') == 'fromfile'

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_COLOUR_KEY2', 'original')
        (tmp_path / '.env').write_text('TEST_COLOUR_KEY2=fromfile\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('TEST_COLOUR_KEY2') == 'original'

    def test_explicit_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('TEST_COLOUR_KEY3', raising=False)
        custom = tmp_path / 'custom.env'
        custom.write_text('TEST_COLOUR_KEY3=custom\n')
        assert load_env(env_file=str(custom)) == custom
        assert os.environ.get('TEST_COLOUR_KEY3') == 'custom'

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'nope.env')) is None

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestLoadSettings:
    def test_defaults(self) -> None:
        assert load_settings({}) == Settings(upper=False, output='text', prefix=False)

    def test_all_set(self) -> None:
        env = {'COLOUR_KIT_HEX_CASE': 'UPPER', 'COLOUR_KIT_OUTPUT': 'json', 'COLOUR_KIT_PREFIX': 'yes'}
        assert load_settings(env) == Settings(upper=True, output='json', prefix=True)

    def test_unknown_output_falls_back(self) -> None:
        assert load_settings({'COLOUR_KIT_OUTPUT': 'xml'}).output == 'text'

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('COLOUR_KIT_HEX_CASE', 'upper')
        assert load_settings().upper is True
