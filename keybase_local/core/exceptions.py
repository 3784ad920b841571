#!/usr/bin/env python3
"""
Errors raised by keybase_local
"""


class KeybaseLocalError(Exception):
    """Base class for keybase_local errors"""


class NotInstalledError(KeybaseLocalError):
    """Raised when no Keybase configuration file can be found"""

    def __init__(self, config_file):
        self.config_file = config_file
        super().__init__(f"Keybase does not appear to be installed (no config at {config_file})")


class NotRunningError(KeybaseLocalError):
    """Raised when the Keybase process is needed but not running"""

    def __init__(self, message="Keybase is not running"):
        super().__init__(message)
