"""Vowel Run Replacement — collapse every maximal vowel run into MARKER.

Invariants:
    - Total over str: empty in, empty out; no vowels in, same string out
    - One MARKER per maximal run, regardless of run length
    - Non-vowel characters kept verbatim and in order
    - None / non-str rejected with InvalidWordError (never coerced)

Design Decisions:
    - Single left-to-right pass carrying one boolean (previous_was_vowel);
      "no previous character" is simply previous_was_vowel = False
    - Pieces collected in a list and joined once: linear in len(word)
"""

from typing import Any

from bazinga.core.domain_types import MARKER, UPPERCASE_VOWELS, VOWELS, VowelPolicy
from bazinga.core.errors import InvalidWordError


def is_vowel(char: str, policy: VowelPolicy = VowelPolicy.LOWERCASE) -> bool:
    """True if char counts as a vowel under policy."""
    if char in VOWELS:
        return True
    return policy == VowelPolicy.CASE_INSENSITIVE and char in UPPERCASE_VOWELS


def require_word(word: Any) -> str:
    """Boundary check shared by every core entry point."""
    if not isinstance(word, str):
        raise InvalidWordError(word)
    return word


def bazingafy(word: str, policy: VowelPolicy = VowelPolicy.LOWERCASE) -> str:
    """Replace every maximal run of vowels in word with "bazinga".

    >>> bazingafy("bear")
    'bbazingar'
    >>> bazingafy("aeiou")
    'bazinga'
    """
    word = require_word(word)
    pieces: list[str] = []
    previous_was_vowel = False
    for char in word:
        if is_vowel(char, policy):
            if not previous_was_vowel:
                pieces.append(MARKER)
            previous_was_vowel = True
        else:
            pieces.append(char)
            previous_was_vowel = False
    return "".join(pieces)
