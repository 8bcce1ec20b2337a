"""
pytest configuration for ee_toolbox tests.
- Runs every test from an empty temporary working directory so the default
  calc_log.txt never lands in the source tree.
"""
import pytest


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
