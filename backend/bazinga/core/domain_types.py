"""Domain Types — vowel set, marker and the enums shared across layers.

Invariants:
    - VOWELS is exactly the five ASCII lowercase vowels
    - MARKER is emitted once per maximal vowel run, never per vowel
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (API responses echo the policy)
    - Uppercase vowels only count under CASE_INSENSITIVE; the default treats them as
      ordinary characters
"""

from enum import Enum


VOWELS: frozenset[str] = frozenset("aeiou")
UPPERCASE_VOWELS: frozenset[str] = frozenset("AEIOU")
MARKER = "bazinga"


class VowelPolicy(str, Enum):
    """Which characters count as vowels."""
    LOWERCASE = "lowercase"
    CASE_INSENSITIVE = "case_insensitive"


class SegmentKind(str, Enum):
    """Segment classification produced by segment_word()."""
    CHARACTER = "character"
    VOWEL_RUN = "vowel_run"
