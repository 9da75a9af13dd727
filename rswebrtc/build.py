"""Fetch, compile, and package a WebRTC revision

`settings` reads configuration once; `run` executes each stage in order
and stops at the first failure.

Configuration is via environment variables ``$RSWEBRTC_BUILD_<PARAM>``,
e.g. ``$RSWEBRTC_BUILD_TARGET_OS=android``.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern import pkconfig
from pykern import pkio
from pykern.pkdebug import pkdlog
from rswebrtc import checkout, compiler, env, package, revision, target
from rswebrtc.target import BuildTarget
import os
import pydantic
import re
import typing

#: Default package base name: <project>-<short-rev>-<target-os>-<target-cpu>
DEFAULT_PACKAGE_FILENAME_PATTERN = "webrtc-%sr%-%to%-%tc%"

_CONFIGS_SEP_RE = re.compile(r"[\s,:;]+")


class Settings(pydantic.BaseModel):
    """Everything a run needs; constructed once by `settings`"""

    model_config = pydantic.ConfigDict(frozen=True)

    branch: typing.Optional[str] = None
    configs: typing.Tuple[str, ...]
    depot_tools_dir: str
    depot_tools_url: str
    outdir: str
    package_filename_pattern: str
    repo_url: str
    revision: typing.Optional[str] = None
    target: BuildTarget


def run(settings):
    """Execute all stages

    Args:
        settings (Settings): what to build

    Returns:
        PackageManifest: describes the archive
    """
    s = settings
    t = s.target
    pkdlog("Host OS: {}", t.platform)
    pkdlog("Target OS: {}", t.target_os)
    pkdlog("Target CPU: {}", t.target_cpu)
    o = pkio.mkdir_parent(s.outdir)
    pkdlog("Checking build environment dependencies")
    env.check_build_env(t)
    pkdlog("Checking depot-tools")
    _prepend_path(env.check_depot_tools(s.depot_tools_dir, s.depot_tools_url))
    r = revision.resolve(s.repo_url, branch=s.branch, sha=s.revision)
    pkdlog("Building branch={} revision={} number={}", s.branch, r.sha, r.number)
    pkdlog("Checking out WebRTC revision (this will take a while): {}", r.sha)
    checkout.checkout(o, t.target_os, r.sha)
    pkdlog("Checking WebRTC dependencies")
    env.check_webrtc_deps(t, o)
    pkdlog("Compiling WebRTC configs={}", s.configs)
    compiler.build(t, o, s.configs)
    n = package.interpret_pattern(s.package_filename_pattern, t, s.branch, r)
    pkdlog("Packaging WebRTC: {}", n)
    package.prepare(t, o, n, s.configs)
    a = package.archive(t, o, n)
    res = package.manifest(t, o, n, a, s.branch, r)
    pkdlog("Build successful archive={}", a)
    return res


def settings(**overrides):
    """Read configuration and apply overrides

    Args:
        overrides (dict): same names as config params; None values are ignored

    Returns:
        Settings: immutable settings
    """
    c = pkconfig.init(
        branch=(None, str, "build the head of this branch [remote HEAD]"),
        configs=(
            compiler.CONFIGS,
            _cfg_configs,
            "build configurations (separated by spaces, commas, or colons)",
        ),
        depot_tools_dir=("depot_tools", str, "where depot_tools is installed"),
        depot_tools_url=(
            "https://chromium.googlesource.com/chromium/tools/depot_tools.git",
            str,
            "where to clone depot_tools from if missing",
        ),
        outdir=("out", str, "working copy, build, and package directory"),
        package_filename_pattern=(
            DEFAULT_PACKAGE_FILENAME_PATTERN,
            str,
            "package base name with tokens %p% %to% %tc% %b% %r% %rn% %da% %sr%",
        ),
        platform=(None, str, "host platform (linux, mac, win) [detected]"),
        repo_url=(revision.DEFAULT_REPO_URL, str, "WebRTC git repo"),
        revision=(None, str, "exact sha to build (overrides branch)"),
        target_cpu=(target.DEFAULT_TARGET_CPU, str, "cross-compilation cpu"),
        target_os=(None, str, "cross-compilation os [platform]"),
    )
    c.pkupdate({k: v for k, v in overrides.items() if v is not None})
    return Settings(
        branch=c.branch,
        configs=_cfg_configs(c.configs),
        depot_tools_dir=str(pkio.py_path(c.depot_tools_dir)),
        depot_tools_url=c.depot_tools_url,
        outdir=str(pkio.py_path(c.outdir)),
        package_filename_pattern=c.package_filename_pattern,
        repo_url=c.repo_url,
        revision=c.revision,
        target=BuildTarget.create(
            target.host_platform(override=c.platform),
            target_os=c.target_os,
            target_cpu=c.target_cpu,
        ),
    )


def _cfg_configs(value):
    if isinstance(value, str):
        value = _CONFIGS_SEP_RE.split(value.strip())
    res = tuple(x for x in value if x)
    if not res:
        pkconfig.raise_error("configs may not be empty")
    for x in res:
        if x not in compiler.CONFIGS:
            pkconfig.raise_error(f"unknown config={x} expecting one of {compiler.CONFIGS}")
    return res


def _prepend_path(directory):
    p = os.environ.get("PATH", "")
    d = str(directory)
    if p.split(os.pathsep)[0] == d:
        return
    os.environ["PATH"] = d + os.pathsep + p if p else d
