"""Verify (and install) what the host needs to fetch and build

Installs are idempotent: nothing runs when a binary is already on the path.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern import pkcli
from pykern import pkio
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc, pkdlog
from rswebrtc import shell
import shutil

#: Checked for the multiverse repository
APT_SOURCES = "/etc/apt/sources.list"

#: Arguments to src/build/install-build-deps.sh
_INSTALL_BUILD_DEPS_ARGS = (
    "--no-syms",
    "--no-arm",
    "--no-chromeos-fonts",
    "--no-nacl",
    "--no-prompt",
)

#: (package, binary) installed on linux
_LINUX_PACKAGES = (
    ("curl", None),
    ("git", None),
    ("python3", None),
    ("lbzip2", None),
    ("lsb-release", "lsb_release"),
)

#: Accepts the msttcorefonts EULA so install-build-deps.sh doesn't prompt
_MSCOREFONTS_EULA = "ttf-mscorefonts-installer msttcorefonts/accepted-mscorefonts-eula select true\n"

#: Binaries which we can't install automatically
_REQUIRED_BINARIES = PKDict(
    mac=("git",),
    win=("git", "7z"),
)


def check_build_env(target):
    """Make sure host build dependencies are present

    On linux, missing packages are installed with apt-get (via sudo).

    Args:
        target (BuildTarget): platform to check
    """
    if target.platform == "linux":
        _check_linux()
    for b in _REQUIRED_BINARIES.get(target.platform, tuple()):
        if not shutil.which(b):
            pkcli.command_error(
                "{}: required on platform={} and must be installed manually",
                b,
                target.platform,
            )


def check_depot_tools(depot_tools_dir, url):
    """Clone depot_tools or reset an existing clone

    Args:
        depot_tools_dir (str): where depot_tools lives
        url (str): git repo to clone from if `depot_tools_dir` is missing

    Returns:
        py.path: depot_tools directory
    """
    d = pkio.py_path(depot_tools_dir)
    if not d.check(dir=True):
        pkdlog("Cloning depot_tools from={} into={}", url, d)
        shell.call(("git", "clone", "-q", url, d))
        return d
    shell.call(("git", "reset", "--hard", "-q"), cwd=d)
    return d


def check_webrtc_deps(target, outdir):
    """Install dependencies declared by the WebRTC checkout

    Only linux needs (and supports) this.

    Args:
        target (BuildTarget): host platform
        outdir (str): directory containing src
    """
    if target.platform != "linux":
        return
    shell.call(("sudo", "debconf-set-selections"), input=_MSCOREFONTS_EULA)
    shell.call(
        (
            "sudo",
            pkio.py_path(outdir).join("src", "build", "install-build-deps.sh"),
            *_INSTALL_BUILD_DEPS_ARGS,
        ),
    )


def ensure_package(name, binary=None):
    """Install `name` with apt-get if `binary` is not on the path

    Args:
        name (str): apt package
        binary (str): executable to look for [name]

    Returns:
        bool: True if package was installed
    """
    p = shutil.which(binary or name)
    if p:
        pkdc("package={} present path={}", name, p)
        return False
    pkdlog("Installing package={}", name)
    shell.call(("sudo", "apt-get", "update", "-qq"))
    shell.call(("sudo", "apt-get", "install", "-y", name))
    return True


def multiverse_enabled(path=None):
    """Is the multiverse repository in apt sources?

    Args:
        path (str): apt sources file [APT_SOURCES]

    Returns:
        bool: True if an uncommented line mentions multiverse
    """
    p = pkio.py_path(path or APT_SOURCES)
    if not p.check(file=True):
        return False
    for l in pkio.read_text(p).splitlines():
        if "#" not in l and "multiverse" in l:
            return True
    return False


def _check_linux():
    if not multiverse_enabled():
        pkdlog(
            "*** Warning: The Multiverse repository is probably not enabled,"
            + " which is required for things like msttcorefonts ***"
        )
    if not shutil.which("sudo"):
        shell.call(("apt-get", "update", "-qq"))
        shell.call(("apt-get", "install", "-y", "sudo"))
    for n, b in _LINUX_PACKAGES:
        ensure_package(n, b)
