#!/usr/bin/env python3
"""
keybase_local - discovery of a local Keybase installation
"""
import logging

from keybase_local.core.config import ConfigStore, InstallationConfig, KBFS_MOUNT, PRIVATE, PUBLIC
from keybase_local.core.exceptions import KeybaseLocalError, NotInstalledError, NotRunningError
from keybase_local.core.paths import detect_platform, config_dir, config_file
from keybase_local.core.process import ProcessRunner
from keybase_local.core.probe import ProcessProbe
from keybase_local.core.user import User
from keybase_local.platform_specific import get_probe

__version__ = "0.0.6"
VERSION = __version__

logger = logging.getLogger(__name__)


class Installation:
    """
    The local Keybase installation

    Build one with discover() at startup and pass it to whatever needs it.
    The configuration is read once; process queries are made on every call.
    """

    def __init__(self, store, probe):
        self.store = store
        self.probe = probe

    @classmethod
    def discover(cls, sys_platform=None, environ=None, runner=None):
        """
        Locate and load the installation for this machine

        Raises:
            NotInstalledError: no config.json at the platform's location
        """
        platform_type = detect_platform(sys_platform)
        path = config_file(platform_type, environ)
        logger.debug(f"Detected platform {platform_type}, config file {path}")
        return cls(ConfigStore.load(path), get_probe(platform_type, runner))

    @property
    def config(self):
        return self.store.config

    @property
    def platform_type(self):
        return self.probe.platform_type

    def current_user(self):
        return self.store.current_user()

    def local_users(self):
        return self.store.local_users()

    def private_dir(self):
        return self.store.private_dir()

    def public_dir(self):
        return self.store.public_dir()

    def running(self):
        return self.probe.running()

    def running_version(self):
        return self.probe.running_version()


__all__ = [
    'VERSION',
    'Installation',
    'InstallationConfig',
    'ConfigStore',
    'ProcessProbe',
    'ProcessRunner',
    'User',
    'KeybaseLocalError',
    'NotInstalledError',
    'NotRunningError',
    'KBFS_MOUNT',
    'PRIVATE',
    'PUBLIC',
    'detect_platform',
    'config_dir',
    'config_file',
    'get_probe',
]
