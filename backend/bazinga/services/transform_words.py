"""Transform Words — applies bazingafy under the configured request limits.

Invariants:
    - Limits checked before any work: WordTooLongError / BatchTooLargeError
    - Batch order preserved (results[i] belongs to words[i])
    - Core stays log-free; all transform logging happens here
"""

import logging
from dataclasses import dataclass

from bazinga.config import Settings
from bazinga.core.domain_types import VowelPolicy
from bazinga.core.errors import BatchTooLargeError, ErrorContext, WordTooLongError
from bazinga.core.replace_vowel_runs import bazingafy, require_word
from bazinga.core.segment_word import (
    Segment, count_vowel_runs, render_segments, segment_word,
)

logger = logging.getLogger(__name__)


@dataclass
class TransformResult:
    word: str
    result: str
    vowel_runs: int
    policy: VowelPolicy


def _check_word(word: str, settings: Settings, field: str = "word") -> str:
    word = require_word(word)
    if len(word) > settings.max_word_length:
        raise WordTooLongError(
            len(word), settings.max_word_length, ErrorContext(field=field),
        )
    return word


def transform_word(
    word: str, policy: VowelPolicy, settings: Settings,
) -> TransformResult:
    """Bazingafy a single word and count its vowel runs."""
    word = _check_word(word, settings)
    result = bazingafy(word, policy)
    vowel_runs = count_vowel_runs(word, policy)
    logger.debug(
        "Transformed word",
        extra={
            "word_length": len(word),
            "vowel_runs": vowel_runs,
            "policy": policy.value,
        },
    )
    return TransformResult(word, result, vowel_runs, policy)


def transform_batch(
    words: list[str], policy: VowelPolicy, settings: Settings,
) -> list[TransformResult]:
    """Bazingafy every word in order. Fails fast on the first limit breach."""
    if len(words) > settings.max_batch_size:
        raise BatchTooLargeError(
            len(words), settings.max_batch_size, ErrorContext(field="words"),
        )
    for index, word in enumerate(words):
        _check_word(word, settings, field=f"words.{index}")

    results = [transform_word(w, policy, settings) for w in words]
    logger.info(
        f"Transformed batch of {len(results)} words",
        extra={
            "batch_size": len(results),
            "vowel_runs": sum(r.vowel_runs for r in results),
            "policy": policy.value,
        },
    )
    return results


def explain_word(
    word: str, policy: VowelPolicy, settings: Settings,
) -> tuple[str, list[Segment]]:
    """Return (result, segments) so callers can see which runs were collapsed."""
    word = _check_word(word, settings)
    segments = segment_word(word, policy)
    return render_segments(segments), segments
