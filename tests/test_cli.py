"""
Tests for cli.py - command line wrapper around the helpers.
"""

import json
import shutil
import subprocess
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ios_link_helpers import __version__
from ios_link_helpers.cli import app


FIXTURES_PATH = Path(__file__).resolve().parent.parent / "fixtures"

runner = CliRunner()


@pytest.fixture
def app_dir(tmp_path) -> Path:
    target = tmp_path / "rn_app"
    shutil.copytree(FIXTURES_PATH / "rn_app", target)
    return target


def _invoke(app_dir: Path, *args: str):
    module_dir = app_dir / "node_modules" / "react-native-launch-navigator"
    return runner.invoke(
        app,
        ["--project-dir", str(app_dir), "--module-dir", str(module_dir), *args],
    )


class TestCli:
    """Tests for the ios-link-helpers commands."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_locate(self, app_dir):
        result = _invoke(app_dir, "locate")
        assert result.exit_code == 0
        assert result.stdout.strip() == "ios/RNApp.xcodeproj"

    def test_locate_without_project(self, tmp_path):
        result = _invoke(tmp_path, "locate")
        assert result.exit_code == 1

    def test_build_setting(self, app_dir):
        result = _invoke(app_dir, "build-setting", "INFOPLIST_FILE")
        assert result.exit_code == 0
        assert result.stdout.strip() == "$(SRCROOT)/RNApp/Info.plist"

    def test_build_setting_missing(self, app_dir):
        result = _invoke(app_dir, "build-setting", "NOT_A_SETTING")
        assert result.exit_code == 1

    def test_plist(self, app_dir):
        result = _invoke(app_dir, "plist")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["CFBundleName"] == "RNApp"
        assert data["LSRequiresIPhoneOS"] is True

    def test_plist_missing(self, app_dir):
        (app_dir / "ios" / "RNApp" / "Info.plist").unlink()
        result = _invoke(app_dir, "plist")
        assert result.exit_code == 1

    def test_pod_install_ignores_failure(self, app_dir, monkeypatch):
        def fake_run(command, cwd=None, check=False):
            raise FileNotFoundError(command[0])

        monkeypatch.setattr(subprocess, "run", fake_run)
        result = _invoke(app_dir, "pod-install")
        assert result.exit_code == 0
