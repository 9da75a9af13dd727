"""Build and package WebRTC from the command line

Example::

    rswebrtc build -o out -b branch-heads/72 --target-os android --target-cpu arm64

Flags override ``$RSWEBRTC_BUILD_*`` configuration.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern.pkdebug import pkdp
import argh


@argh.arg("-o", "--outdir", help="output directory [out]")
@argh.arg("-b", "--branch", help="latest revision on git branch, e.g. branch-heads/72")
@argh.arg("-r", "--revision", help="exact sha to build; overrides --branch")
@argh.arg("--target-os", help="cross-compilation os, e.g. android, ios [host]")
@argh.arg("--target-cpu", help="cross-compilation cpu, e.g. arm64, x86 [x64]")
@argh.arg("-d", "--depot-tools", help="where depot_tools is installed [depot_tools]")
@argh.arg("-c", "--configs", help="build configurations [Debug Release]")
@argh.arg("-v", "--verbose", help="print all executed commands")
def default_command(
    outdir=None,
    branch=None,
    revision=None,
    target_os=None,
    target_cpu=None,
    depot_tools=None,
    configs=None,
    verbose=False,
):
    """Fetch, compile, and package WebRTC

    Returns:
        str: path to the archive
    """
    from pykern import pkdebug, pkio
    from rswebrtc import build

    if verbose:
        pkdebug.init(control=r"rswebrtc|pksubprocess")
    s = build.settings(
        branch=branch,
        configs=configs,
        depot_tools_dir=depot_tools,
        outdir=outdir,
        revision=revision,
        target_cpu=target_cpu,
        target_os=target_os,
    )
    m = build.run(s)
    return str(pkio.py_path(s.outdir).join(m.file))
