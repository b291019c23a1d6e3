"""Tests for swatch_kit.core.env — .env discovery and typed settings."""

import os
from pathlib import Path

import pytest
from swatch_kit.core import env
from swatch_kit.core.env import _find_dotenv, _parse_dotenv, get_float, get_int, load_env


class TestParseDotenv:
    def test_settings_file(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# contrast defaults\n\nSWATCH_TARGET_RATIO=7\nSWATCH_STEPS="8"\nNOEQUALS\n')
        assert _parse_dotenv(f) == {'SWATCH_TARGET_RATIO': '7', 'SWATCH_STEPS': '8'}

    def test_single_quotes(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text("SWATCH_MAX_DISTANCE='80'\n")
        assert _parse_dotenv(f) == {'SWATCH_MAX_DISTANCE': '80'}


class TestFindDotenv:
    def test_finds_in_parent(self, tmp_path: Path) -> None:
        (tmp_path / 'palettes').mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('SWATCH_STEPS=3\n')
        assert _find_dotenv(tmp_path / 'palettes') == dotenv

    def test_stops_at_git_boundary(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / '.git').mkdir(parents=True)
        (repo / 'src').mkdir()
        (tmp_path / '.env').write_text('SWATCH_STEPS=3\n')
        assert _find_dotenv(repo / 'src') is None

    def test_stops_at_git_worktree_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (repo / '.git').write_text('gitdir: ../elsewhere\n')
        (tmp_path / '.env').write_text('SWATCH_STEPS=3\n')
        assert _find_dotenv(repo) is None


class TestLoadEnv:
    def test_os_environment_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(env.STEPS, '9')
        monkeypatch.delenv(env.MAX_DISTANCE, raising=False)
        (tmp_path / '.git').mkdir()
        (tmp_path / '.env').write_text('SWATCH_STEPS=3\nSWATCH_MAX_DISTANCE=75\n')
        monkeypatch.chdir(tmp_path)
        assert load_env() == tmp_path / '.env'
        assert os.environ[env.STEPS] == '9'
        assert os.environ[env.MAX_DISTANCE] == '75'

    def test_explicit_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(env.TARGET_RATIO, raising=False)
        custom = tmp_path / 'ci.env'
        custom.write_text('SWATCH_TARGET_RATIO=7\n')
        assert load_env(env_file=str(custom)) == custom
        assert os.environ[env.TARGET_RATIO] == '7'

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'absent.env')) is None

    def test_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestTypedSettings:
    def test_default_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(env.TARGET_RATIO, raising=False)
        assert get_float(env.TARGET_RATIO, 4.5) == 4.5

    def test_parsed_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(env.TARGET_RATIO, '7')
        monkeypatch.setenv(env.STEPS, '8')
        assert get_float(env.TARGET_RATIO, 4.5) == 7.0
        assert get_int(env.STEPS, 5) == 8

    def test_blank_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(env.STEPS, '  ')
        assert get_int(env.STEPS, 5) == 5

    def test_unparseable_warns_and_uses_default(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv(env.STEPS, 'lots')
        assert get_int(env.STEPS, 5) == 5
        assert 'SWATCH_STEPS' in capsys.readouterr().err
