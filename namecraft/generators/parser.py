"""Tolerant parsing of completion output into name candidates."""

import json
import logging
import re
from typing import Any, List, Optional

from ..models import NameCandidate, ParseKind, ParseResult

logger = logging.getLogger(__name__)

DEFAULT_SCORE = 7
DEFAULT_EXPLANATION = 'AI-generated name'

LINE_RE = re.compile(r"^\d+\.\s*(.+?)(?:\s*-\s*(.+))?$")


def _coerce_score(value: Any) -> float:
    try:
        score = float(value)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_SCORE
    if score != score:  # NaN
        return DEFAULT_SCORE
    return max(1.0, min(10.0, score))


def _candidate_from_item(item: Any) -> Optional[NameCandidate]:
    if isinstance(item, str):
        name = item.strip()
        return NameCandidate(name=name, explanation=DEFAULT_EXPLANATION, brandability_score=DEFAULT_SCORE) if name else None

    if not isinstance(item, dict):
        return None

    name = item.get('name')
    if not isinstance(name, str) or not name.strip():
        return None

    concerns = item.get('concerns') or ''
    if isinstance(concerns, list):
        concerns = '; '.join(str(c) for c in concerns)

    return NameCandidate(
        name=name.strip(),
        explanation=str(item.get('explanation') or DEFAULT_EXPLANATION),
        brandability_score=_coerce_score(item.get('brandability_score')),
        concerns=str(concerns)
    )


def _structured_items(raw: str) -> Optional[List[Any]]:
    """The list of raw items if raw is usable JSON, else None."""
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning(f"Failed to parse completion as JSON: {e}")
        return None

    if isinstance(parsed, list):
        return parsed
    if isinstance(parsed, dict) and isinstance(parsed.get('names'), list):
        return parsed['names']

    logger.warning("Completion JSON has no usable name list")
    return None


def fallback_parse(raw: str) -> List[NameCandidate]:
    """Pick ``<n>. <name>[ - <explanation>]`` lines out of free text."""
    names = []
    for line in raw.splitlines():
        match = LINE_RE.match(line.strip())
        if not match:
            continue
        name = match.group(1).strip()
        if not name:
            continue
        names.append(NameCandidate(
            name=name,
            explanation=(match.group(2) or DEFAULT_EXPLANATION).strip(),
            brandability_score=DEFAULT_SCORE
        ))
    return names


def parse_response(raw: Optional[str]) -> ParseResult:
    if not raw or not raw.strip():
        return ParseResult(kind=ParseKind.EMPTY)

    items = _structured_items(raw)
    if items is not None:
        candidates = [c for c in (_candidate_from_item(i) for i in items) if c is not None]
        return ParseResult(kind=ParseKind.STRUCTURED if candidates else ParseKind.EMPTY, candidates=candidates)

    candidates = fallback_parse(raw)
    return ParseResult(kind=ParseKind.FALLBACK if candidates else ParseKind.EMPTY, candidates=candidates)


def parse(raw: Optional[str]) -> List[NameCandidate]:
    return parse_response(raw).candidates
