"""
automatically maintains the latest git tag + revision info in a python file

"""
from __future__ import annotations

import os
import re
import subprocess

VERSION_MATCHER = re.compile(r"""^__version__\s*=\s*["']([^"']+)["']""", re.MULTILINE)


def pep440ify(git_describe_version: str) -> str:
    """Turn `git describe` output such as 1.2.0-4-gdeadbee into 1.2.0+gdeadbee"""
    parts = git_describe_version.rsplit("-", 2)
    if len(parts) == 3 and parts[1].isdigit():
        version, _commits, sha = parts
        return f"{version}+{sha}"
    if re.match(r"^\d+\.\d+\.\d+$", git_describe_version):
        return git_describe_version
    # a bare commit hash, add some mockery to version so it is parseable by setuptools
    return f"0.0.0+{git_describe_version}"


def _read_file_version(version_file: str) -> str | None:
    try:
        with open(version_file, encoding="utf-8") as fp:
            match = VERSION_MATCHER.search(fp.read())
    except OSError:
        return None
    return match.group(1) if match else None


def get_project_version(version_file: str, default: str | None = None) -> str:
    version_file = os.path.join(os.path.dirname(os.path.realpath(__file__)), version_file)
    file_ver = _read_file_version(version_file)

    try:
        proc = subprocess.Popen(
            ["git", "describe", "--tags", "--always"],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            cwd=os.path.dirname(version_file),
        )
        stdout, _ = proc.communicate()
        if proc.returncode == 0 and stdout:
            git_ver = pep440ify(stdout.splitlines()[0].strip().decode("utf-8"))
            if git_ver and git_ver != file_ver:
                with open(version_file, "w", encoding="utf-8") as fp:
                    fp.write('__version__ = "%s"\n' % git_ver)
                return git_ver
    except OSError:
        pass

    if not file_ver and default:
        # neither git nor a previous build, e.g. an unpacked source archive
        with open(version_file, "w", encoding="utf-8") as fp:
            fp.write('__version__ = "%s"\n' % default)
        return default

    if not file_ver:
        raise Exception("version not available from git or from file %r" % version_file)

    return file_ver


if __name__ == "__main__":
    import sys

    get_project_version(sys.argv[1])
