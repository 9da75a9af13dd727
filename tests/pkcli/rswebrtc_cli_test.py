"""test rswebrtc.pkcli

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

import pytest

_SHA = "abc1234def5678abc1234def5678abc1234def56"


def test_package_pattern():
    from pykern.pkunit import pkeq
    from rswebrtc.pkcli import package

    pkeq(
        "webrtc-abc1234-android-arm64",
        package.pattern(
            "webrtc-%sr%-%to%-%tc%",
            _SHA,
            "26001",
            platform="linux",
            target_os="android",
            target_cpu="arm64",
        ),
    )


def test_package_pattern_bad_number(capsys):
    from pykern import pkcli
    from pykern.pkunit import pkeq, pkre

    pkeq(
        1,
        pkcli.main("rswebrtc", ["rswebrtc", "package", "pattern", "x", "abc", "12x"]),
    )
    pkre("error: number=12x must be an integer", capsys.readouterr().err)


def test_revision_resolve(commands, gitiles):
    from pykern import pkjson
    from pykern.pkunit import pkeq
    from rswebrtc.pkcli import revision

    commands.outputs[("git", "ls-remote")] = f"{_SHA}\trefs/heads/branch-heads/72\n"
    gitiles.commits[_SHA] = "tree x\n\nCr-Commit-Position: refs/heads/master@{#26001}\n"
    j = pkjson.load_any(revision.resolve(branch="branch-heads/72"))
    pkeq(_SHA, j.sha)
    pkeq(26001, j.number)
    pkeq("abc1234", j.short)
    pkeq(_SHA, revision.latest())


def test_revision_latest_error(capsys, commands):
    from pykern import pkcli
    from pykern.pkunit import pkeq, pkre

    commands.outputs[("git", "ls-remote")] = ""
    pkeq(1, pkcli.main("rswebrtc", ["rswebrtc", "revision", "latest"]))
    pkre("error: Could not get HEAD revision", capsys.readouterr().err)


def test_build_unsupported(capsys, commands):
    from pykern import pkcli, pkconfig
    from pykern.pkunit import pkeq, pkre

    pkconfig.reset_state_for_testing(add_to_environ={"RSWEBRTC_BUILD_PLATFORM": "beos"})
    pkeq(1, pkcli.main("rswebrtc", ["rswebrtc", "build", "-o", "out"]))
    pkre("error: invalid platform=beos", capsys.readouterr().err)
    pkeq([], commands.calls)


def test_build_bad_flag():
    from pykern import pkcli

    with pytest.raises(SystemExit) as e:
        pkcli.main("rswebrtc", ["rswebrtc", "build", "--no-such-flag"])
    assert e.value.code != 0
