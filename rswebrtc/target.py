"""Host platform and cross-compilation target

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern import pkcli
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc
import pydantic
import sys

#: Used when target_cpu is not supplied
DEFAULT_TARGET_CPU = "x64"

#: Host platforms we can build on
PLATFORMS = frozenset(("linux", "mac", "win"))

_DEBIAN_ARCH = PKDict(
    arm="armhf",
    arm64="arm64",
    x64="amd64",
    x86="i386",
)

# msys is git bash (mingw-w64) on Windows
_HOST_PREFIXES = (
    ("darwin", "mac"),
    ("linux", "linux"),
    ("cygwin", "win"),
    ("msys", "win"),
    ("win", "win"),
)


class BuildTarget(pydantic.BaseModel):
    """Where we build and what we build for

    Fixed before any fetch or compile step runs.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    platform: str
    target_cpu: str
    target_os: str

    @classmethod
    def create(cls, platform, target_os=None, target_cpu=None):
        """Fill in defaults for target_os and target_cpu

        Args:
            platform (str): host platform (linux, mac, win)
            target_os (str): cross-compilation os [platform]
            target_cpu (str): cross-compilation cpu [x64]

        Returns:
            BuildTarget: immutable target
        """
        return cls(
            platform=platform,
            target_cpu=target_cpu or DEFAULT_TARGET_CPU,
            target_os=target_os or platform,
        )

    @property
    def debian_arch(self):
        return debian_arch(self.target_cpu)

    @pydantic.field_validator("platform")
    @classmethod
    def validate_platform(cls, value):
        if value not in PLATFORMS:
            raise ValueError(f"platform={value} not in {sorted(PLATFORMS)}")
        return value


def debian_arch(target_cpu):
    """Debian architecture name for `target_cpu`

    Args:
        target_cpu (str): e.g. x64, arm

    Returns:
        str: e.g. amd64, armhf or `target_cpu` if unknown
    """
    return _DEBIAN_ARCH.get(target_cpu, target_cpu)


def host_platform(host_id=None, override=None):
    """Map the host identifier to linux, mac, or win

    Args:
        host_id (str): os identifier, e.g. linux-gnu, darwin19 [`sys.platform`]
        override (str): used verbatim if supplied

    Returns:
        str: one of `PLATFORMS`
    """
    if override:
        if override not in PLATFORMS:
            pkcli.command_error(
                "invalid platform={} must be one of {}", override, sorted(PLATFORMS)
            )
        return override
    h = (host_id or sys.platform).lower()
    for p, res in _HOST_PREFIXES:
        if h.startswith(p):
            pkdc("host_id={} platform={}", h, res)
            return res
    pkcli.command_error("Building on unsupported OS={}", h)
