"""Generate ninja files with gn and compile each build configuration

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern import pkio
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdlog
from rswebrtc import shell
import os.path

# is_component_build=false forces a static CRT.
# enable_iterator_debugging=false: libstdc++ debugging breaks linking
# unless every consumer defines _GLIBCXX_DEBUG=1.
_COMMON_ARGS = (
    "rtc_include_tests=false",
    "treat_warnings_as_errors=false",
    "use_rtti=true",
    "rtc_build_examples=false",
    "rtc_build_tools=false",
    "is_component_build=false",
    "enable_iterator_debugging=false",
)

_CONFIG_ARGS = PKDict(
    Debug=tuple(),
    Release=(
        "is_debug=false",
        "strip_debug_info=true",
        "symbol_level=0",
    ),
)

#: Build configurations we know how to compile
CONFIGS = tuple(_CONFIG_ARGS.keys())


def build(target, outdir, configs):
    """Run gn and ninja for each config in order

    Args:
        target (BuildTarget): target_os and target_cpu
        outdir (str): directory containing src
        configs (iterable): e.g. ("Debug", "Release")
    """
    s = pkio.py_path(outdir).join("src")
    for c in configs:
        d = build_dir(target.target_cpu, c)
        a = " ".join(gn_args(target, c))
        pkdlog("Generating project files config={} args={}", c, a)
        shell.call(("gn", "gen", d, "--args=" + a), cwd=s)
        pkdlog("Compiling config={} dir={}", c, d)
        shell.call(("ninja", "-C", d), cwd=s)


def build_dir(target_cpu, config):
    """Build output directory relative to src

    Args:
        target_cpu (str): e.g. x64
        config (str): e.g. Debug

    Returns:
        str: out/<target_cpu>/<config>
    """
    return os.path.join("out", target_cpu, config)


def gn_args(target, config):
    """Arguments passed to ``gn gen --args``

    Args:
        target (BuildTarget): target_os and target_cpu
        config (str): one of `CONFIGS`

    Returns:
        list: gn arguments
    """
    if config not in _CONFIG_ARGS:
        raise ValueError(f"unknown config={config} expecting one of {CONFIGS}")
    return [
        *_COMMON_ARGS,
        f'target_os="{target.target_os}"',
        f'target_cpu="{target.target_cpu}"',
        *_CONFIG_ARGS[config],
    ]
