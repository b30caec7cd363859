# wgraph/_display.py

import re

_ANSI_RE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
_CTRL_RE = re.compile(r"[\x00-\x1f\x7f]")  # non-printable/control chars


def safe_str(x: object, max_len: int = 120) -> str:
    """
    Best-effort safe string for logs/printing:
    - uses str() then strips ANSI escapes and control chars
    - truncates long values to avoid log spam
    """
    s = _CTRL_RE.sub("", _ANSI_RE.sub("", str(x)))
    if len(s) > max_len:
        s = s[: max_len - 1] + "…"
    return s
