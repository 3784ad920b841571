"""Tests for the keybase-local command line."""

import pytest

from keybase_local import ConfigStore, Installation, NotInstalledError
from keybase_local import cli
from keybase_local.platform_specific.darwin_probe import DarwinProbe


@pytest.fixture
def installation(config_path, fake_runner, monkeypatch):
    found = Installation(ConfigStore.load(str(config_path)), DarwinProbe(fake_runner))
    monkeypatch.setattr(cli.Installation, "discover", classmethod(lambda cls: found))
    return found


def test_status_running(installation, fake_runner, capsys):
    fake_runner.outputs.update({"pgrep": "812\n", "keybase": "keybase version 6.2.4\n"})
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert "Current user: alice" in out
    assert "Private dir:  /keybase/private/alice" in out
    assert "Public dir:   /keybase/public/alice" in out
    assert "Running:      yes" in out
    assert "Version:      6.2.4" in out


def test_status_not_running(installation, fake_runner, capsys):
    assert cli.main(["status"]) == 0
    out = capsys.readouterr().out
    assert "Running:      no" in out
    assert "Version" not in out
    assert fake_runner.commands() == ["pgrep"]


def test_users(installation, capsys):
    assert cli.main(["users"]) == 0
    assert capsys.readouterr().out.splitlines() == ["alice", "bob"]


def test_not_installed(monkeypatch, capsys, tmp_path):
    def missing(cls):
        raise NotInstalledError(str(tmp_path / "config.json"))

    monkeypatch.setattr(cli.Installation, "discover", classmethod(missing))
    assert cli.main([]) == 1
    assert "not appear to be installed" in capsys.readouterr().err


def test_status_process_exits_before_version(installation, fake_runner, capsys, monkeypatch):
    answers = iter([True, False])
    monkeypatch.setattr(installation.probe, "running", lambda: next(answers))
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert "Running:      yes" in out
    assert "Version:      unknown" in out


def test_status_keybase_binary_missing(installation, fake_runner, capsys):
    fake_runner.outputs["pgrep"] = "812\n"

    def run(args):
        fake_runner.calls.append(list(args))
        if args[0] == "keybase":
            raise FileNotFoundError(2, "No such file or directory", "keybase")
        return fake_runner.outputs.get(args[0], "")

    fake_runner.run = run
    assert cli.main([]) == 0
    assert "Version:      unknown" in capsys.readouterr().out
