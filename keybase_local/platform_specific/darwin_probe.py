#!/usr/bin/env python3
"""
macOS-specific Keybase process detection
"""
from keybase_local.core.paths import DARWIN
from keybase_local.core.probe import ProcessProbe, PROCESS_NAME


class DarwinProbe(ProcessProbe):
    """Asks pgrep for the keybase process"""

    platform_type = DARWIN

    def __init__(self, runner=None, process_name=PROCESS_NAME, **kwargs):
        super().__init__(runner, **kwargs)
        self.process_name = process_name

    def running(self):
        return bool(self.runner.run(['pgrep', self.process_name]).strip())
