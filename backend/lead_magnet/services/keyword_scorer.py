"""Deterministic keyword scoring used to shortlist scenarios before the LLM sees them."""

import logging
from typing import Iterable

from lead_magnet.models.scenario import ScenarioTemplate

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 30

NAME_MATCH_POINTS = 10
DESCRIPTION_MATCH_POINTS = 5
KEYWORD_IN_QUERY_POINTS = 3
TOKEN_OVERLAP_POINTS = 1
CATEGORY_BONUS_POINTS = 5

# Terms that earn a bonus when present in both the query and the category
CATEGORY_BONUS_TERMS = ("sync", "import", "export")


def score_template(query: str, template: ScenarioTemplate) -> int:
    """Score a single template against a use-case query.

    Scoring factors:
    - Query contains the template name (+10)
    - Description contains the whole query (+5)
    - Each keyword contained in the query (+3)
    - Each query token overlapping a keyword, in either direction (+1)
    - Query and category share "sync", "import" or "export" (+5 each)

    A single-word keyword present in the query is counted by both the +3 and
    the +1 rules.
    """
    query_lower = query.lower()
    tokens = query_lower.split()

    score = 0

    if template.name.lower() in query_lower:
        score += NAME_MATCH_POINTS

    if query_lower in template.description.lower():
        score += DESCRIPTION_MATCH_POINTS

    for keyword in template.keywords:
        keyword_lower = keyword.lower()
        if keyword_lower in query_lower:
            score += KEYWORD_IN_QUERY_POINTS
        for token in tokens:
            if token in keyword_lower or keyword_lower in token:
                score += TOKEN_OVERLAP_POINTS

    for term in CATEGORY_BONUS_TERMS:
        if term in query_lower and term in template.category:
            score += CATEGORY_BONUS_POINTS

    return score


def score_all(query: str, catalog: Iterable[ScenarioTemplate]) -> list[tuple[ScenarioTemplate, int]]:
    """Score every template and return (template, score) pairs, best first.

    Ties keep catalog order.
    """
    scored = [(template, score_template(query, template)) for template in catalog]
    # sorted() is stable, so equal scores stay in catalog order
    return sorted(scored, key=lambda item: item[1], reverse=True)


def score(
    query: str,
    catalog: Iterable[ScenarioTemplate],
    limit: int = DEFAULT_LIMIT,
) -> list[ScenarioTemplate]:
    """Shortlist the ``limit`` best-scoring templates for a query.

    Args:
        query: Free-text use case
        catalog: Templates to rank
        limit: Maximum number of templates to return

    Returns:
        Templates ordered by descending score
    """
    ranked = score_all(query, catalog)[:limit]

    if ranked:
        top, top_score = ranked[0]
        logger.info(f"Keyword shortlist: {len(ranked)} scenarios (top: '{top.id}' score={top_score})")

    return [template for template, _ in ranked]
