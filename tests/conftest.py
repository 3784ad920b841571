import json
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.resolve()
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class FakeRunner:
    """ProcessRunner stand-in returning canned stdout per command name"""

    def __init__(self, outputs=None):
        self.outputs = outputs or {}
        self.calls = []

    def run(self, args):
        self.calls.append(list(args))
        return self.outputs.get(args[0], "")

    def commands(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def config_document():
    return {
        "current_user": "alice",
        "users": {
            "alice": {"name": "alice", "id": "uid-alice", "device": "dev-1", "salt": "salt-alice"},
            "bob": {"name": "bob", "id": "uid-bob", "device": "dev-2", "salt": "salt-bob"},
        },
    }


@pytest.fixture
def unix_home(tmp_path, config_document):
    """A HOME containing ~/.config/keybase/config.json"""
    config_dir = tmp_path / ".config" / "keybase"
    config_dir.mkdir(parents=True)
    (config_dir / "config.json").write_text(json.dumps(config_document))
    return tmp_path


@pytest.fixture
def config_path(unix_home):
    return unix_home / ".config" / "keybase" / "config.json"


@pytest.fixture
def proc_root(tmp_path):
    """Empty directory standing in for /proc"""
    root = tmp_path / "proc"
    root.mkdir()
    return root


@pytest.fixture
def make_process(proc_root):
    """Create <proc_root>/<pid>/comm for a fake process"""

    def _make(pid, comm):
        pid_dir = proc_root / str(pid)
        pid_dir.mkdir()
        (pid_dir / "comm").write_text(comm + "\n")
        return pid_dir

    return _make
