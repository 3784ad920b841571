#!/usr/bin/env python3
"""
Loading of the local Keybase configuration
"""
import os
import json
import logging
import posixpath
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, List, Mapping, Optional

from keybase_local.core.exceptions import NotInstalledError
from keybase_local.core.user import User
from keybase_local.core.utils import freeze

logger = logging.getLogger(__name__)

# KBFS mountpoint and the visibility segments below it
KBFS_MOUNT = "/keybase"
PRIVATE = "private"
PUBLIC = "public"
VISIBILITIES = (PRIVATE, PUBLIC)


@dataclass(frozen=True)
class InstallationConfig:
    """The parts of Keybase's config.json this package relies on"""

    current_user: Optional[str]
    users: Mapping[str, Mapping[str, Any]] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    config_file: Optional[str] = None

    @classmethod
    def from_document(cls, document, config_file=None):
        """Build a frozen config from an already parsed config.json document"""
        if not isinstance(document, dict):
            raise ValueError(f"Keybase config must be a JSON object, got {type(document).__name__}")
        users = document.get('users') or {}
        if not isinstance(users, dict):
            raise ValueError(f"Keybase config 'users' must be a JSON object, got {type(users).__name__}")

        return cls(
            current_user=document.get('current_user'),
            users=freeze(users),
            config_file=config_file,
        )


class ConfigStore:
    """Read-only accessors over a loaded InstallationConfig"""

    def __init__(self, config: InstallationConfig):
        self.config = config

    @classmethod
    def load(cls, config_file):
        """
        Load config.json once

        Raises:
            NotInstalledError: config_file is not a regular file
            json.JSONDecodeError: config_file is not valid JSON
        """
        if not os.path.isfile(config_file):
            raise NotInstalledError(config_file)

        logger.info(f"Loading Keybase configuration from {config_file}")
        with open(config_file, 'r', encoding='utf-8') as f:
            document = json.load(f)

        config = InstallationConfig.from_document(document, config_file=config_file)
        logger.debug(f"Configuration lists {len(config.users)} local users")
        return cls(config)

    def current_user(self) -> Optional[str]:
        return self.config.current_user

    def local_users(self) -> List[User]:
        return [User(username, record) for username, record in self.config.users.items()]

    def user_dir(self, visibility) -> str:
        """KBFS directory of the current user for a visibility"""
        if visibility not in VISIBILITIES:
            raise ValueError(f"Unknown KBFS visibility: {visibility!r}")
        return posixpath.join(KBFS_MOUNT, visibility, self.current_user())

    def private_dir(self) -> str:
        return self.user_dir(PRIVATE)

    def public_dir(self) -> str:
        return self.user_dir(PUBLIC)
