"""Package naming from the command line

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern.pkdebug import pkdp


def pattern(
    pattern,
    sha,
    number,
    branch=None,
    platform=None,
    target_os=None,
    target_cpu=None,
):
    """Expand a package filename pattern

    Args:
        pattern (str): e.g. webrtc-%sr%-%to%-%tc%
        sha (str): full revision
        number (str): revision number
        branch (str): branch name
        platform (str): host platform [detected]
        target_os (str): cross-compilation os [platform]
        target_cpu (str): cross-compilation cpu [x64]

    Returns:
        str: package base name
    """
    from pykern import pkcli
    from rswebrtc import package, revision, target

    try:
        n = int(number)
    except ValueError:
        pkcli.command_error("number={} must be an integer", number)
    return package.interpret_pattern(
        pattern,
        target.BuildTarget.create(
            target.host_platform(override=platform),
            target_os=target_os,
            target_cpu=target_cpu,
        ),
        branch,
        revision.Revision(number=n, sha=sha, short=revision.short(sha)),
    )
