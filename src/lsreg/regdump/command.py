import os
import platform
from typing import Optional, Tuple

_LSREGISTER_SUPPORT = "LaunchServices.framework/Versions/A/Support/lsregister"

# 10.4 and earlier ship LaunchServices inside ApplicationServices
LEGACY_LSREGISTER = (
    "/System/Library/Frameworks/ApplicationServices.framework/Versions/A/Frameworks/"
    + _LSREGISTER_SUPPORT
)
LSREGISTER = (
    "/System/Library/Frameworks/CoreServices.framework/Versions/A/Frameworks/"
    + _LSREGISTER_SUPPORT
)

DUMP_FLAG = "-dump"


def _parse_mac_version(release: str) -> Optional[Tuple[int, int]]:
    parts = release.split(".")
    try:
        major = int(parts[0])
        minor = int(parts[1]) if len(parts) > 1 else 0
    except ValueError:
        return None
    return major, minor


def default_command(mac_release: Optional[str] = None) -> str:
    """
    Returns the "lsregister -dump" command line for the running system.

    LSREG_COMMAND in the environment takes precedence.
    """
    override = os.getenv("LSREG_COMMAND")
    if override:
        return override

    if mac_release is None:
        mac_release = platform.mac_ver()[0]

    version = _parse_mac_version(mac_release) if mac_release else None
    if version is not None and version < (10, 5):
        return f"{LEGACY_LSREGISTER} {DUMP_FLAG}"
    return f"{LSREGISTER} {DUMP_FLAG}"
