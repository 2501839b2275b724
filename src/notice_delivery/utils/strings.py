"""String helpers for notice text."""

from __future__ import annotations

import re

_WORD = re.compile(r"[^\W\d_]+(?:['’][^\W\d_]+)*")


def title_case(text: str) -> str:
    """Capitalise the first letter of each word and lowercase the rest.

    Apostrophes inside a word do not start a new word ("don't" -> "Don't").
    Applying it twice gives the same result as applying it once.
    """
    return _WORD.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(), text)
