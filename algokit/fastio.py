"""Fast integer reading from a text or binary stream."""

from __future__ import annotations

import re
from typing import IO, Iterator, Union

_CHUNK = 1 << 18
_INT_RUN = re.compile(r"[-0-9]+")


def _parse(run: str) -> int:
    digits = run.replace("-", "")
    value = int(digits) if digits else 0
    return -value if "-" in run else value


def iter_ints(stream: IO[Union[str, bytes]]) -> Iterator[int]:
    """Yield every integer in ``stream``.

    An integer is a maximal run of digits and minus signs; it is negative when
    it contains any minus sign, and its digits form the magnitude. Everything
    else separates runs.
    """
    pending = ""
    while True:
        chunk = stream.read(_CHUNK)
        if not chunk:
            break
        if isinstance(chunk, bytes):
            chunk = chunk.decode("latin-1")
        text = pending + chunk
        pending = ""
        for match in _INT_RUN.finditer(text):
            if match.end() == len(text):
                pending = match.group()
            else:
                yield _parse(match.group())
    if pending:
        yield _parse(pending)