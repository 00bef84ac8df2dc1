"""Transform Schemas — Pydantic models for the bazingafy API boundary.

Invariants:
    - word is required and must be a string; null is a validation error, never ""
    - policy None means "use Settings.default_vowel_policy"
    - Batch requests carry at least one word

Design Decisions:
    - Length limits enforced in the service (configurable), not with Field(max_length)
"""

from pydantic import BaseModel, Field

from bazinga.core.domain_types import SegmentKind, VowelPolicy


class BazingafyRequest(BaseModel):
    """Single-word transform request."""
    word: str
    policy: VowelPolicy | None = None


class BazingafyResponse(BaseModel):
    word: str
    result: str
    vowel_runs: int = Field(ge=0)
    policy: VowelPolicy


class BazingafyBatchRequest(BaseModel):
    """Batch transform request — results returned in request order."""
    words: list[str] = Field(min_length=1)
    policy: VowelPolicy | None = None


class BazingafyBatchResponse(BaseModel):
    results: list[BazingafyResponse]
    total_vowel_runs: int = Field(ge=0)


class SegmentOut(BaseModel):
    kind: SegmentKind
    text: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)


class SegmentsResponse(BaseModel):
    """Word partition alongside the rendered result."""
    word: str
    result: str
    segments: list[SegmentOut]
