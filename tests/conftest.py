import pytest


@pytest.fixture(scope="function")
def commands(monkeypatch):
    """Replace `rswebrtc.shell` with a recorder

    ``calls`` is a list of PKDict(cmd, cwd, input) in the order run.
    ``outputs`` maps a command prefix (tuple) to what `shell.output` returns.
    ``effects`` maps a command prefix to ``func(cmd, cwd)`` run by `shell.call`,
    which may create files or raise.
    """
    from pykern.pkcollections import PKDict
    from rswebrtc import shell

    res = PKDict(calls=[], effects={}, outputs={})

    def _match(table, cmd):
        for k, v in table.items():
            if tuple(cmd[: len(k)]) == k:
                return v
        return None

    def _record(cmd, cwd, input):
        c = [str(x) for x in cmd]
        res.calls.append(
            PKDict(cmd=c, cwd=None if cwd is None else str(cwd), input=input)
        )
        return c

    def _call(cmd, cwd=None, input=None):
        c = _record(cmd, cwd, input)
        e = _match(res.effects, c)
        if e:
            e(c, cwd)

    def _output(cmd, cwd=None):
        c = _record(cmd, cwd, None)
        o = _match(res.outputs, c)
        if o is None:
            raise AssertionError(f"unexpected output cmd={c}")
        return o

    res.cmds = lambda: [x.cmd for x in res.calls]
    monkeypatch.setattr(shell, "call", _call)
    monkeypatch.setattr(shell, "output", _output)
    return res


@pytest.fixture(scope="function")
def gitiles(monkeypatch):
    """Replace `requests.get` with a fake gitiles server

    ``commits`` maps sha to commit text. ``requests`` records (url, params).
    """
    from pykern.pkcollections import PKDict
    import base64
    import requests

    res = PKDict(commits=PKDict(), requests=[])

    def _get(url, params=None, **kwargs):
        res.requests.append((url, params))
        t = res.commits.get(url.split("/+/")[-1])
        return PKDict(
            content=base64.b64encode((t or "").encode("utf-8")),
            ok=t is not None,
            status_code=200 if t is not None else 404,
        )

    monkeypatch.setattr(requests, "get", _get)
    return res
