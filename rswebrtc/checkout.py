"""Fetch and sync the WebRTC working copy to an exact revision

The working copy (``src``) and gclient's metadata in `outdir` belong to
one target_os at a time. `MARKER` records which one.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern import pkio
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdlog
from rswebrtc import shell

#: File in outdir which holds the target_os of the last checkout
MARKER = ".rswebrtc_target_os"

#: Working copy directory in outdir
SRC_DIR = "src"

_DEFAULT_RECIPE = "webrtc"

#: Removed when target_os changes
_GCLIENT_STATE = (SRC_DIR, ".gclient", ".gclient_entries", MARKER)

_RECIPES = PKDict(
    android="webrtc_android",
    ios="webrtc_ios",
)


def checkout(outdir, target_os, sha):
    """Make `outdir`/src a clean working copy at `sha`

    Args:
        outdir (str): directory holding src and gclient metadata
        target_os (str): cross-compilation os
        sha (str): full revision to pin to
    """
    o = pkio.py_path(outdir)
    remove_if_target_changed(o, target_os)
    s = o.join(SRC_DIR)
    if not s.check(dir=True):
        pkdlog("Fetching recipe={} into={}", recipe(target_os), o)
        shell.call(("fetch", "--nohooks", recipe(target_os)), cwd=o)
    # untracked files break gclient sync
    shell.call(("git", "clean", "-f"), cwd=s)
    shell.call(("gclient", "sync", "--force", "--revision", sha), cwd=o)
    pkio.write_text(o.join(MARKER), target_os + "\n")


def previous_target_os(outdir):
    """target_os recorded by the last checkout

    Args:
        outdir (py.path): directory holding `MARKER`

    Returns:
        str: target_os or None if never checked out
    """
    m = pkio.py_path(outdir).join(MARKER)
    if not m.check(file=True):
        return None
    return pkio.read_text(m).strip() or None


def recipe(target_os):
    """depot_tools fetch recipe for `target_os`"""
    return _RECIPES.get(target_os, _DEFAULT_RECIPE)


def remove_if_target_changed(outdir, target_os):
    """Delete working copy and gclient metadata if target_os changed

    Args:
        outdir (py.path): directory holding src
        target_os (str): requested cross-compilation os

    Returns:
        bool: True if state was removed
    """
    p = previous_target_os(outdir)
    if p is None or p == target_os:
        return False
    pkdlog(
        "target_os changed from={} to={}; removing working copy", p, target_os
    )
    pkio.unchecked_remove(*(outdir.join(x) for x in _GCLIENT_STATE))
    return True
