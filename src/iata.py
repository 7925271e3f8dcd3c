from __future__ import annotations

import re
from typing import NamedTuple, Optional

_TRAILING_CODE = re.compile(r"\(([A-Z]{3})\)$")


class IataSplit(NamedTuple):
    base_text: str
    iata: Optional[str]


def split_iata(label: Optional[str]) -> IataSplit:
    """Split a trailing "(XXX)" airport code off a label.

    Only a code closing the (right-trimmed) label counts, so an earlier aside as in
    "SANTIAGO (SCQ) NORTE" is never read as a code. Never raises; `None` behaves like "".
    """
    text = (label or "").rstrip()
    match = _TRAILING_CODE.search(text)
    if match is None:
        return IataSplit(text.strip(), None)
    return IataSplit(text[: match.start()].strip(), match.group(1))
