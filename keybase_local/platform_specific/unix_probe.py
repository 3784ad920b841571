#!/usr/bin/env python3
"""
Linux and other unix Keybase process detection via /proc
"""
import os
import logging

from keybase_local.core.paths import UNIX
from keybase_local.core.probe import ProcessProbe, PROCESS_NAME
from keybase_local.core.utils import read_first_line

logger = logging.getLogger(__name__)

PROC_ROOT = "/proc"


class UnixProbe(ProcessProbe):
    """Scans /proc/<pid>/comm for the keybase process"""

    platform_type = UNIX

    def __init__(self, runner=None, process_name=PROCESS_NAME, proc_root=PROC_ROOT, **kwargs):
        super().__init__(runner, **kwargs)
        self.process_name = process_name
        self.proc_root = proc_root

    def _pids(self):
        """Numeric entries of the proc root"""
        return [entry for entry in os.listdir(self.proc_root) if entry.isdigit()]

    def _comm(self, pid):
        """Command name of a pid, or None if the process exited mid-scan"""
        try:
            return read_first_line(os.path.join(self.proc_root, pid, 'comm'))
        except (FileNotFoundError, ProcessLookupError):
            logger.debug(f"Process {pid} went away during scan")
            return None

    def running(self):
        return any(self._comm(pid) == self.process_name for pid in self._pids())
