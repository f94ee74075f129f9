"""Text helpers for header labels pulled out of markup."""

from __future__ import annotations

import re

NBSP_RE = re.compile(r"&nbsp;?|\xa0")
WS_RE = re.compile(r"\s+")


def clean_cell(text: str) -> str:
    text = NBSP_RE.sub(" ", text)
    return WS_RE.sub(" ", text).strip()
