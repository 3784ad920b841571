#!/usr/bin/env python3
"""
Windows-specific Keybase process detection
"""
from keybase_local.core.paths import WINDOWS
from keybase_local.core.probe import ProcessProbe

WINDOWS_PROCESS_NAME = "keybase.exe"


class WindowsProbe(ProcessProbe):
    """Looks for keybase.exe in the tasklist output"""

    platform_type = WINDOWS

    def __init__(self, runner=None, process_name=WINDOWS_PROCESS_NAME, **kwargs):
        super().__init__(runner, **kwargs)
        self.process_name = process_name

    def running(self):
        output = self.runner.run(['tasklist'])
        for line in output.splitlines():
            fields = line.split()
            if fields and fields[0].lower() == self.process_name.lower():
                return True
        return False
