"""Run external commands

Every command is blocking. A non-zero exit raises and is never retried.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern import pkio
from pykern.pkdebug import pkdc, pkdlog
import pykern.pksubprocess
import subprocess


def call(cmd, cwd=None, input=None):
    """Run `cmd` to completion with output going to the terminal

    Signals (SIGINT, SIGTERM) are passed on to the child.

    Args:
        cmd (iterable): command and arguments (converted to str)
        cwd (str or py.path): where to run [current directory]
        input (str): sent to stdin; if None, stdin is `os.devnull`

    Raises:
        RuntimeError: non-zero exit (error exit(N))
        subprocess.CalledProcessError: non-zero exit when `input` is supplied
    """
    c = _args(cmd)
    with pkio.save_chdir(cwd or pkio.py_path()):
        if input is None:
            pykern.pksubprocess.check_call_with_signals(c, msg=pkdc)
            return
        pkdc("cmd={} with input", c)
        subprocess.run(c, input=input, text=True, check=True)


def output(cmd, cwd=None):
    """Run `cmd` and return its stdout

    Args:
        cmd (iterable): command and arguments (converted to str)
        cwd (str or py.path): where to run [current directory]

    Returns:
        str: decoded stdout

    Raises:
        subprocess.CalledProcessError: non-zero exit
    """
    c = _args(cmd)
    pkdc("cwd={} cmd={}", cwd, c)
    try:
        return subprocess.check_output(
            c,
            cwd=None if cwd is None else str(cwd),
            text=True,
        )
    except subprocess.CalledProcessError as e:
        pkdlog("exit={} cmd={} output={}", e.returncode, c, e.output)
        raise


def _args(cmd):
    return [str(x) for x in cmd]
