#!/usr/bin/env python3
"""
Local Keybase user records
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class User:
    """A user known to the local Keybase installation"""

    username: str
    record: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}), hash=False)

    @property
    def name(self) -> Optional[str]:
        return self.record.get('name')

    @property
    def uid(self) -> Optional[str]:
        return self.record.get('id')

    @property
    def device_id(self) -> Optional[str]:
        return self.record.get('device')

    @property
    def salt(self) -> Optional[str]:
        return self.record.get('salt')
