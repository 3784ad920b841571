from keybase_local.core.paths import WINDOWS, DARWIN, UNIX
from keybase_local.platform_specific.windows_probe import WindowsProbe
from keybase_local.platform_specific.darwin_probe import DarwinProbe
from keybase_local.platform_specific.unix_probe import UnixProbe

PROBES = {
    WINDOWS: WindowsProbe,
    DARWIN: DarwinProbe,
    UNIX: UnixProbe,
}


def get_probe(platform_type, runner=None, **kwargs):
    """Get the process probe for a platform"""
    try:
        probe_class = PROBES[platform_type]
    except KeyError:
        raise ValueError(f"Unknown platform: {platform_type!r}") from None
    return probe_class(runner, **kwargs)
