#!/usr/bin/env python3
"""
Platform detection and location of the Keybase configuration
"""
import os
import sys
import ntpath
import posixpath

WINDOWS = "windows"
DARWIN = "darwin"
UNIX = "unix"

PLATFORMS = (WINDOWS, DARWIN, UNIX)

CONFIG_FILENAME = "config.json"


def detect_platform(sys_platform=None):
    """Map sys.platform onto one of WINDOWS, DARWIN or UNIX"""
    sys_platform = sys_platform or sys.platform
    if sys_platform in ('win32', 'cygwin'):
        return WINDOWS
    if sys_platform == 'darwin':
        return DARWIN
    return UNIX


def _path_module(platform_type):
    return ntpath if platform_type == WINDOWS else posixpath


def _home(environ):
    return environ.get('HOME') or os.path.expanduser('~')


def config_dir(platform_type, environ=None):
    """
    Get the Keybase configuration directory for a platform

    Args:
        platform_type: One of WINDOWS, DARWIN, UNIX
        environ: Environment mapping, defaults to os.environ

    Returns:
        str: Configuration directory. On Windows a missing LOCALAPPDATA gives
        the drive-root \\Keybase; opening it later is what fails.
    """
    if environ is None:
        environ = os.environ

    if platform_type == WINDOWS:
        return ntpath.join(environ.get('LOCALAPPDATA') or '\\', 'Keybase')
    elif platform_type == DARWIN:
        return posixpath.join(_home(environ), 'Library', 'Application Support', 'Keybase')
    elif platform_type == UNIX:
        return posixpath.join(_home(environ), '.config', 'keybase')

    raise ValueError(f"Unknown platform: {platform_type!r}")


def config_file(platform_type, environ=None):
    """Get the path of Keybase's config.json for a platform"""
    directory = config_dir(platform_type, environ)
    return _path_module(platform_type).join(directory, CONFIG_FILENAME)
