"""Stage, archive, and describe compiled WebRTC artifacts

The staging tree is ``<outdir>/<package_filename>``::

    include/...                      headers, relative to src
    lib/<target_cpu>/<config>/...    libraries, flat

The archive (``.tar.bz2`` or ``.7z`` on win) and the manifest
(``.json``) are written beside the staging tree.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern import pkcli
from pykern import pkio
from pykern import pkjinja
from pykern import pkjson
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc, pkdlog
from rswebrtc import compiler, shell
import dateutil.parser
import dateutil.tz
import hashlib
import os.path
import pydantic
import re

#: Only these third_party paths are packaged (gflags, ffmpeg,
#: openh264, openmax_dl, winsdk_samples, yasm are not)
DEPENDENCY_RE = re.compile(
    r"abseil-cpp|boringssl|expat/files|jsoncpp/source/json|libjpeg|libjpeg_turbo"
    + r"|libsrtp|libyuv|libvpx|opus|protobuf|usrsctp/usrsctpout/usrsctpout"
)

#: Library file names which are packaged
LIBRARY_RE = re.compile(r"webrtc\.|boringssl|protobuf|system_wrappers")

#: Resource rendered on linux for each config
PKGCONFIG_BASENAME = "libwebrtc_full.pc"

#: Vendored dependencies (relative to src)
THIRD_PARTY_DIR = "third_party"

_ARCHIVE_EXT = PKDict(
    linux=".tar.bz2",
    mac=".tar.bz2",
    win=".7z",
)

_DEPENDENCY_FILE_RE = re.compile(r"(?:\.h|(?:^|/)(?:COPYING|LICENSE|README))$")

_HEADER_RE = re.compile(r"\.h$")

_LIBRARY_EXT_RE = re.compile(r"\.(?:a|dll|jar|lib|so)$")

_TOKEN_RE = re.compile(r"%(b|da|p|rn|r|sr|tc|to)%")

_UNKNOWN_TOKEN_RE = re.compile(r"%\w+%")


class PackageManifest(pydantic.BaseModel):
    """Written as json beside the archive"""

    model_config = pydantic.ConfigDict(frozen=True)

    branch: str
    checksum: str
    date: str
    file: str
    revision: str
    revision_number: int
    target_cpu: str
    target_os: str


def archive(target, outdir, package_filename):
    """Compress lib/<target_cpu> and include from the staging tree

    An existing archive of the same name is removed first.

    Args:
        target (BuildTarget): platform selects the format
        outdir (str): where the staging tree is and the archive goes
        package_filename (str): base name

    Returns:
        py.path: archive
    """
    o = pkio.py_path(outdir)
    res = o.join(package_filename + _ARCHIVE_EXT[target.platform])
    pkio.unchecked_remove(res)
    l = os.path.join("lib", target.target_cpu)
    if target.platform == "win":
        c = ("7z", "a", res, l, "include")
    elif target.platform == "linux":
        c = ("tar", "--use-compress-program=lbzip2", "-cf", res, l, "include")
    else:
        c = ("tar", "-cjf", res, l, "include")
    shell.call(c, cwd=o.join(package_filename))
    return res


def checksum(path):
    """sha256 of the contents of `path`

    Args:
        path (py.path): file to digest

    Returns:
        str: hex digest
    """
    h = hashlib.sha256()
    with open(str(path), "rb") as f:
        for b in iter(lambda: f.read(1024 * 1024), b""):
            h.update(b)
    return h.hexdigest()


def copy_headers(src_d, include_d):
    """Copy headers from src into include, keeping relative paths

    Everything in `THIRD_PARTY_DIR` is skipped except headers and
    notices (README, LICENSE, COPYING) whose path matches `DEPENDENCY_RE`.

    Args:
        src_d (py.path): WebRTC src
        include_d (py.path): staging include directory

    Returns:
        int: number of files copied
    """
    res = 0
    p = THIRD_PARTY_DIR + "/"
    for f in pkio.walk_tree(src_d):
        r = src_d.bestrelpath(f).replace(os.sep, "/")
        if r.startswith(p):
            if not (_DEPENDENCY_FILE_RE.search(r) and DEPENDENCY_RE.search(r)):
                continue
        elif not _HEADER_RE.search(r):
            continue
        t = include_d.join(r)
        pkio.mkdir_parent_only(t)
        f.copy(t)
        res += 1
    if res == 0:
        pkcli.command_error("no headers found in src={}", src_d)
    return res


def copy_libraries(build_d, lib_d):
    """Copy matching libraries from a build directory into lib_d (flat)

    Args:
        build_d (py.path): e.g. src/out/x64/Debug
        lib_d (py.path): staging lib directory for the config

    Returns:
        int: number of files copied
    """
    res = 0
    for f in pkio.walk_tree(build_d, _LIBRARY_EXT_RE):
        if not LIBRARY_RE.search(f.basename):
            continue
        pkdc("library={}", f)
        f.copy(lib_d.join(f.basename))
        res += 1
    if res == 0:
        pkcli.command_error("no libraries found in build_dir={}", build_d)
    return res


def interpret_pattern(pattern, target, branch, revision):
    """Expand tokens in a package filename pattern

    Tokens: ``%p%`` platform, ``%to%`` target_os, ``%tc%`` target_cpu,
    ``%b%`` branch, ``%r%`` revision, ``%rn%`` revision number,
    ``%da%`` debian arch, ``%sr%`` short revision. Every occurrence is
    replaced. Unknown tokens are left as is.

    Args:
        pattern (str): e.g. ``webrtc-%sr%-%to%-%tc%``
        target (BuildTarget): platform and target
        branch (str): may be None
        revision (Revision): resolved revision

    Returns:
        str: package base name
    """
    v = PKDict(
        b=branch or "",
        da=target.debian_arch,
        p=target.platform,
        r=revision.sha,
        rn=str(revision.number),
        sr=revision.short,
        tc=target.target_cpu,
        to=target.target_os,
    )
    res = _TOKEN_RE.sub(lambda m: v[m.group(1)], pattern)
    u = [x for x in _UNKNOWN_TOKEN_RE.findall(pattern) if x[1:-1] not in v]
    if u:
        pkdlog("unknown tokens={} left in pattern={}", u, pattern)
    return res


def manifest(target, outdir, package_filename, archive_path, branch, revision):
    """Write ``<package_filename>.json`` beside the archive

    Args:
        target (BuildTarget): target_os and target_cpu
        outdir (str): contains src and the archive
        package_filename (str): base name
        archive_path (py.path): archive to checksum
        branch (str): may be None
        revision (Revision): resolved revision

    Returns:
        PackageManifest: what was written
    """
    o = pkio.py_path(outdir)
    res = PackageManifest(
        branch=branch or "",
        checksum=checksum(archive_path),
        date=revision_date(o.join("src")),
        file=pkio.py_path(archive_path).basename,
        revision=revision.sha,
        revision_number=revision.number,
        target_cpu=target.target_cpu,
        target_os=target.target_os,
    )
    pkjson.dump_pretty(res.model_dump(), filename=o.join(package_filename + ".json"))
    return res


def prepare(target, outdir, package_filename, configs):
    """Create the staging tree from src and the build directories

    An existing staging tree is removed first.

    Args:
        target (BuildTarget): platform and target_cpu
        outdir (str): directory containing src
        package_filename (str): staging directory name
        configs (iterable): build configurations

    Returns:
        py.path: staging directory
    """
    o = pkio.py_path(outdir)
    s = o.join("src")
    res = o.join(package_filename)
    pkio.unchecked_remove(res)
    pkdlog("Copying headers from={}", s)
    copy_headers(s, pkio.mkdir_parent(res.join("include")))
    for c in configs:
        l = pkio.mkdir_parent(res.join("lib", target.target_cpu, c))
        pkdlog("Copying libraries config={}", c)
        copy_libraries(s.join(compiler.build_dir(target.target_cpu, c)), l)
        if target.platform == "linux":
            write_pkgconfig(l, target, c)
    return res


def revision_date(src_d):
    """Commit date of HEAD in `src_d`

    Args:
        src_d (py.path): git working copy

    Returns:
        str: UTC time as ``YYYY-MM-DDTHH:MM:SSZ``
    """
    return (
        dateutil.parser.isoparse(
            shell.output(("git", "log", "-1", "--format=%cI"), cwd=src_d).strip(),
        )
        .astimezone(dateutil.tz.UTC)
        .strftime("%Y-%m-%dT%H:%M:%SZ")
    )


def write_pkgconfig(lib_d, target, config):
    """Render the pkg-config file for `config` into lib_d/pkgconfig

    Args:
        lib_d (py.path): staging lib directory for the config
        target (BuildTarget): target_cpu
        config (str): build configuration

    Returns:
        py.path: pkg-config file
    """
    res = pkio.mkdir_parent(lib_d.join("pkgconfig")).join(PKGCONFIG_BASENAME)
    pkjinja.render_resource(
        PKGCONFIG_BASENAME,
        PKDict(config=config, target_cpu=target.target_cpu),
        output=res,
    )
    return res
