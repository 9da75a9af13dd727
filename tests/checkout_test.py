"""test rswebrtc.checkout

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

import pytest


def _old_checkout(d, target_os):
    from pykern import pkio

    pkio.mkdir_parent(d.join("src"))
    pkio.write_text(d.join("src", "stale.cc"), "int x;\n")
    pkio.write_text(d.join(".gclient"), "solutions = []\n")
    pkio.write_text(d.join(".gclient_entries"), "entries = {}\n")
    pkio.write_text(d.join(".rswebrtc_target_os"), target_os + "\n")


def test_target_os_changed(commands):
    from pykern import pkio, pkunit
    from pykern.pkunit import pkeq, pkok
    from rswebrtc import checkout

    seen = []

    def _fetch(cmd, cwd):
        seen.append(pkio.py_path(cwd).join("src", "stale.cc").exists())
        pkio.mkdir_parent(pkio.py_path(cwd).join("src"))

    commands.effects[("fetch",)] = _fetch
    with pkunit.save_chdir_work() as d:
        _old_checkout(d, "linux")
        checkout.checkout(d, "android", "sha1")
        pkeq([False], seen)
        pkok(not d.join(".gclient").exists(), ".gclient not removed")
        pkok(not d.join(".gclient_entries").exists(), ".gclient_entries not removed")
        pkeq(
            [
                ["fetch", "--nohooks", "webrtc_android"],
                ["git", "clean", "-f"],
                ["gclient", "sync", "--force", "--revision", "sha1"],
            ],
            commands.cmds(),
        )
        pkeq(str(d), commands.calls[0].cwd)
        pkeq(str(d.join("src")), commands.calls[1].cwd)
        pkeq(str(d), commands.calls[2].cwd)
        pkeq("android", checkout.previous_target_os(d))


def test_target_os_unchanged(commands):
    from pykern import pkunit
    from pykern.pkunit import pkeq, pkok
    from rswebrtc import checkout

    with pkunit.save_chdir_work() as d:
        _old_checkout(d, "linux")
        checkout.checkout(d, "linux", "sha2")
        pkok(d.join("src", "stale.cc").exists(), "src removed when target_os same")
        pkok(d.join(".gclient").exists(), ".gclient removed when target_os same")
        pkeq(
            [
                ["git", "clean", "-f"],
                ["gclient", "sync", "--force", "--revision", "sha2"],
            ],
            commands.cmds(),
        )
        pkeq("linux", checkout.previous_target_os(d))


def test_first_checkout(commands):
    from pykern import pkio, pkunit
    from pykern.pkunit import pkeq, pkok
    from rswebrtc import checkout

    commands.effects[("fetch",)] = lambda cmd, cwd: pkio.mkdir_parent(
        pkio.py_path(cwd).join("src")
    )
    with pkunit.save_chdir_work() as d:
        pkeq(None, checkout.previous_target_os(d))
        pkok(not checkout.remove_if_target_changed(d, "ios"), "nothing to remove")
        checkout.checkout(d, "ios", "sha3")
        pkeq(["fetch", "--nohooks", "webrtc_ios"], commands.cmds()[0])
        pkeq("ios\n", pkio.read_text(d.join(checkout.MARKER)))


def test_sync_fails(commands):
    from pykern import pkio, pkunit
    from pykern.pkunit import pkexcept, pkok
    from rswebrtc import checkout

    def _fail(cmd, cwd):
        raise RuntimeError("error exit(1)")

    commands.effects[("gclient",)] = _fail
    with pkunit.save_chdir_work() as d:
        pkio.mkdir_parent(d.join("src"))
        with pkexcept("error exit"):
            checkout.checkout(d, "linux", "sha4")
        pkok(not d.join(checkout.MARKER).exists(), "marker written after failure")


def test_recipe():
    from pykern.pkunit import pkeq
    from rswebrtc import checkout

    pkeq("webrtc_android", checkout.recipe("android"))
    pkeq("webrtc_ios", checkout.recipe("ios"))
    pkeq("webrtc", checkout.recipe("linux"))
    pkeq("webrtc", checkout.recipe("win"))
