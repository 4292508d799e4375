"""Git hash capture so result files can be traced to the code that made them."""

import subprocess


def _git(*args: str) -> str:
    return subprocess.check_output(
        ["git", *args], stderr=subprocess.DEVNULL
    ).decode().strip()


def get_git_hash() -> str:
    """Short SHA of HEAD, suffixed ``-dirty`` when there are local changes.

    Returns ``"unknown"`` outside a git checkout or without git installed.
    """
    try:
        sha = _git("rev-parse", "--short", "HEAD")
    except (subprocess.CalledProcessError, FileNotFoundError):
        return "unknown"

    # unstaged, then staged
    for diff_args in (("diff", "--quiet"), ("diff", "--quiet", "--cached")):
        try:
            _git(*diff_args)
        except subprocess.CalledProcessError:
            return f"{sha}-dirty"
    return sha
