"""Bazingafy Routes — single, batch and segment-explaining transforms.

Invariants:
    - Request bodies validated by Pydantic before reaching the handler
    - Omitted policy falls back to Settings.default_vowel_policy
    - Limit errors raised by the service surface through the global BazingaError handler
"""

import logging

from fastapi import APIRouter, Depends

from bazinga.config import Settings, get_settings
from bazinga.core.domain_types import VowelPolicy
from bazinga.schemas.transform import (
    BazingafyBatchRequest, BazingafyBatchResponse,
    BazingafyRequest, BazingafyResponse,
    SegmentOut, SegmentsResponse,
)
from bazinga.services.transform_words import (
    TransformResult, explain_word, transform_batch, transform_word,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/bazingafy", tags=["bazingafy"])


def _resolve_policy(policy: VowelPolicy | None, settings: Settings) -> VowelPolicy:
    return policy or settings.default_vowel_policy


def _to_response(r: TransformResult) -> BazingafyResponse:
    return BazingafyResponse(
        word=r.word, result=r.result, vowel_runs=r.vowel_runs, policy=r.policy,
    )


@router.post("", response_model=BazingafyResponse)
async def bazingafy_word(
    body: BazingafyRequest, settings: Settings = Depends(get_settings),
):
    """Replace every vowel run in one word."""
    policy = _resolve_policy(body.policy, settings)
    return _to_response(transform_word(body.word, policy, settings))


@router.post("/batch", response_model=BazingafyBatchResponse)
async def bazingafy_batch(
    body: BazingafyBatchRequest, settings: Settings = Depends(get_settings),
):
    """Replace vowel runs in many words; results keep request order."""
    policy = _resolve_policy(body.policy, settings)
    results = transform_batch(body.words, policy, settings)
    return BazingafyBatchResponse(
        results=[_to_response(r) for r in results],
        total_vowel_runs=sum(r.vowel_runs for r in results),
    )


@router.post("/segments", response_model=SegmentsResponse)
async def bazingafy_segments(
    body: BazingafyRequest, settings: Settings = Depends(get_settings),
):
    """Show how a word is partitioned into characters and vowel runs."""
    policy = _resolve_policy(body.policy, settings)
    result, segments = explain_word(body.word, policy, settings)
    return SegmentsResponse(
        word=body.word,
        result=result,
        segments=[
            SegmentOut(kind=s.kind, text=s.text, start=s.start, end=s.end)
            for s in segments
        ],
    )
