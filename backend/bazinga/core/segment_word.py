"""Word Segmentation — explicit partition of a word into characters and vowel runs.

Invariants:
    - Concatenating segment texts reproduces the input exactly
    - No two VOWEL_RUN segments are adjacent (runs are maximal)
    - render_segments(segment_word(w, p)) == bazingafy(w, p)
"""

from dataclasses import dataclass

from bazinga.core.domain_types import MARKER, SegmentKind, VowelPolicy
from bazinga.core.replace_vowel_runs import is_vowel, require_word


@dataclass(frozen=True)
class Segment:
    """One piece of a word: a single non-vowel or a maximal vowel run."""
    kind: SegmentKind
    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)


def segment_word(
    word: str, policy: VowelPolicy = VowelPolicy.LOWERCASE,
) -> list[Segment]:
    """Partition word left to right into CHARACTER and VOWEL_RUN segments."""
    word = require_word(word)
    segments: list[Segment] = []
    run_start: int | None = None

    for index, char in enumerate(word):
        if is_vowel(char, policy):
            if run_start is None:
                run_start = index
            continue
        if run_start is not None:
            segments.append(
                Segment(SegmentKind.VOWEL_RUN, word[run_start:index], run_start),
            )
            run_start = None
        segments.append(Segment(SegmentKind.CHARACTER, char, index))

    if run_start is not None:
        segments.append(
            Segment(SegmentKind.VOWEL_RUN, word[run_start:], run_start),
        )
    return segments


def render_segments(segments: list[Segment]) -> str:
    """Emit MARKER for each vowel run and the text of every other segment."""
    return "".join(
        MARKER if s.kind == SegmentKind.VOWEL_RUN else s.text
        for s in segments
    )


def count_vowel_runs(
    word: str, policy: VowelPolicy = VowelPolicy.LOWERCASE,
) -> int:
    return sum(
        1 for s in segment_word(word, policy) if s.kind == SegmentKind.VOWEL_RUN
    )


def remove_vowel_runs(
    word: str, policy: VowelPolicy = VowelPolicy.LOWERCASE,
) -> str:
    """The word with every vowel run deleted (non-vowels only, in order)."""
    word = require_word(word)
    return "".join(c for c in word if not is_vowel(c, policy))
