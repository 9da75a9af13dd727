"""Query WebRTC revisions without building

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern.pkdebug import pkdp
from rswebrtc import revision


def latest(repo_url=revision.DEFAULT_REPO_URL):
    """Sha of the remote HEAD

    Args:
        repo_url (str): git repo

    Returns:
        str: full sha
    """
    return revision.latest(repo_url)


def resolve(branch=None, sha=None, repo_url=revision.DEFAULT_REPO_URL):
    """Sha, revision number, and short sha of a branch head (or HEAD)

    Args:
        branch (str): head of branch [remote HEAD]
        sha (str): use this commit instead of branch
        repo_url (str): git repo

    Returns:
        str: json
    """
    from pykern import pkjson

    return pkjson.dump_pretty(
        revision.resolve(repo_url, branch=branch, sha=sha).model_dump(),
    )
