#!/usr/bin/env python3
"""
Base class for detecting the running Keybase process
"""
import logging

from keybase_local.core.exceptions import NotRunningError
from keybase_local.core.process import ProcessRunner

logger = logging.getLogger(__name__)

PROCESS_NAME = "keybase"
KEYBASE_BINARY = "keybase"


class ProcessProbe:
    """
    Uncached queries of the Keybase process state

    Subclasses implement running() for their platform. Every call goes back
    to the operating system, so the answer may be stale by the time the
    caller acts on it.
    """

    platform_type = None

    def __init__(self, runner=None, binary=KEYBASE_BINARY):
        self.runner = runner or ProcessRunner()
        self.binary = binary

    def running(self):
        """Whether Keybase is currently running"""
        raise NotImplementedError

    def running_version(self):
        """
        Version string reported by the keybase binary

        Raises:
            NotRunningError: Keybase is not running; the binary is not invoked
        """
        if not self.running():
            raise NotRunningError()

        output = self.runner.run([self.binary, '--version'])
        lines = output.splitlines()
        if not lines:
            return None

        # "keybase version 6.2.4-20240101011938+a1b2c3d4e5"
        fields = lines[0].split()
        if len(fields) < 3:
            logger.warning(f"Unexpected version output: {lines[0]!r}")
            return None
        return fields[2]
