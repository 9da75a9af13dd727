"""Resolve a branch (or HEAD) to a commit and its revision number

The revision number is the ``{#NNNNN}`` marker Gerrit appends to the
commit position footer of WebRTC commit messages. It is fetched from
gitiles, which returns the raw commit base64 encoded with ``?format=TEXT``.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern import pkcli
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc, pkdlog
from rswebrtc import shell
import base64
import pydantic
import re
import requests

#: Where WebRTC lives
DEFAULT_REPO_URL = "https://webrtc.googlesource.com/src"

#: Number of characters in a short sha
SHORT_LEN = 7

_HEADS_PREFIX = "refs/heads/"

_NUMBER_RE = re.compile(r"\{#(\d+)\}")


class Revision(pydantic.BaseModel):
    """Exact commit for the run; immutable once resolved"""

    model_config = pydantic.ConfigDict(frozen=True)

    number: int
    sha: str
    short: str

    @pydantic.field_validator("sha")
    @classmethod
    def validate_sha(cls, value):
        if not value:
            raise ValueError("sha may not be empty")
        return value


def branch_head(repo_url, branch):
    """Commit at the head of `branch`

    An exact ref match (``refs/heads/<branch>``) wins over other refs
    which git ls-remote matches by suffix. Otherwise the first ref wins.

    Args:
        repo_url (str): git repo
        branch (str): e.g. ``branch-heads/72``

    Returns:
        str: full sha
    """
    rows = _ls_remote(repo_url, "--heads", branch)
    if not rows:
        pkcli.command_error(
            "Could not get branch revision branch={} repo_url={}", branch, repo_url
        )
    r = branch if branch.startswith("refs/") else _HEADS_PREFIX + branch
    for s, ref in rows:
        if ref == r:
            return s
    pkdlog(
        "no exact match for branch={}; using first of refs={}",
        branch,
        [x[1] for x in rows],
    )
    return rows[0][0]


def latest(repo_url):
    """Commit of the remote's HEAD

    Args:
        repo_url (str): git repo

    Returns:
        str: full sha
    """
    rows = _ls_remote(repo_url, "HEAD")
    if not rows:
        pkcli.command_error("Could not get HEAD revision repo_url={}", repo_url)
    return rows[0][0]


def number(repo_url, sha):
    """Revision number for `sha`

    Args:
        repo_url (str): gitiles repo
        sha (str): full commit

    Returns:
        int: revision number
    """
    u = f"{repo_url}/+/{sha}"
    pkdc("GET {}?format=TEXT", u)
    r = requests.get(u, params=PKDict(format="TEXT"))
    if not r.ok:
        pkcli.command_error(
            "Could not get revision number sha={} status={} url={}",
            sha,
            r.status_code,
            u,
        )
    l = [x for x in base64.b64decode(r.content).decode("utf-8").splitlines() if x]
    m = _NUMBER_RE.search(l[-1]) if l else None
    if not m:
        pkcli.command_error(
            "Could not get revision number sha={} last_line={}",
            sha,
            l[-1] if l else None,
        )
    return int(m.group(1))


def resolve(repo_url, branch=None, sha=None):
    """Determine the commit to build and its revision number

    Args:
        repo_url (str): git repo
        branch (str): head of branch [remote HEAD]
        sha (str): overrides `branch`

    Returns:
        Revision: resolved revision
    """
    if not sha:
        sha = branch_head(repo_url, branch) if branch else latest(repo_url)
    return Revision(number=number(repo_url, sha), sha=sha, short=short(sha))


def short(sha):
    """First `SHORT_LEN` characters of `sha`"""
    return sha[:SHORT_LEN]


def _ls_remote(repo_url, *args):
    res = []
    for l in shell.output(("git", "ls-remote", repo_url, *args)).splitlines():
        x = l.split()
        if len(x) >= 2:
            res.append((x[0], x[1]))
    return res
