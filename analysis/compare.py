"""
Side-by-side comparison runner.
Runs the structural, topic and feature detectors for a target/competitor pair
and merges the results when the target is compared against several competitors.
"""

import logging
from typing import Mapping, Optional

from analysis.features import find_feature_gaps
from analysis.structural import find_structural_gaps
from analysis.thresholds import GapThresholds, resolve
from analysis.topics import find_topic_gaps
from content.models import ContentGap, WebsiteContent

logger = logging.getLogger(__name__)

_SEVERITY_RANK = {"critical": 0, "significant": 1, "moderate": 2}


class InvalidComparisonInputError(ValueError):
    """Raised when a comparison is called without usable sites or names."""


def _check_site(site, role: str) -> None:
    if not isinstance(site, WebsiteContent):
        raise InvalidComparisonInputError(
            f"{role} must be a WebsiteContent, got {type(site).__name__}"
        )


def _check_name(name, role: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise InvalidComparisonInputError(f"{role} name must be a non-empty string")


def compare_websites(
    target: WebsiteContent,
    competitor: WebsiteContent,
    target_name: str,
    competitor_name: str,
    thresholds: Optional[GapThresholds] = None,
) -> tuple[ContentGap, ...]:
    """
    Compare the target site to one competitor.

    Returns structural gaps first, then topic gaps, then feature gaps. Sites
    without pages are valid input and simply produce fewer gaps.
    """
    _check_site(target, "target")
    _check_site(competitor, "competitor")
    _check_name(target_name, "target")
    _check_name(competitor_name, "competitor")
    thresholds = resolve(thresholds)

    logger.info("Comparing %s vs %s", target_name, competitor_name)
    gaps = (
        find_structural_gaps(target, competitor, competitor_name, thresholds)
        + find_topic_gaps(target, competitor, competitor_name, thresholds)
        + find_feature_gaps(target, competitor, competitor_name, thresholds)
    )

    logger.info(
        "Found %d gaps vs %s (%d critical)",
        len(gaps),
        competitor_name,
        sum(1 for g in gaps if g.severity == "critical"),
    )
    return gaps


def merge_gaps(gap_lists: list[tuple[ContentGap, ...]]) -> tuple[ContentGap, ...]:
    """
    Collapse gaps with the same title found against different competitors.

    The merged gap keeps the fields of its most severe occurrence (the first
    one on ties) and lists every competitor that has it, in the order the
    lists were given. Gaps stay in order of first appearance.
    """
    chosen: dict[str, ContentGap] = {}
    names: dict[str, list[str]] = {}

    for gaps in gap_lists:
        for gap in gaps:
            title = gap.gap_title
            current = chosen.get(title)
            if current is None or _SEVERITY_RANK[gap.severity] < _SEVERITY_RANK[current.severity]:
                chosen[title] = gap
            seen = names.setdefault(title, [])
            for name in gap.competitors_have_this:
                if name not in seen:
                    seen.append(name)

    return tuple(
        gap.model_copy(update={"competitors_have_this": tuple(names[title])})
        for title, gap in chosen.items()
    )


def compare_against_competitors(
    target: WebsiteContent,
    competitors: Mapping[str, WebsiteContent],
    target_name: str,
    thresholds: Optional[GapThresholds] = None,
) -> tuple[ContentGap, ...]:
    """Run one comparison per competitor and merge the results."""
    if not competitors:
        raise InvalidComparisonInputError("at least one competitor is required")

    results = []
    for competitor_name, competitor in competitors.items():
        gaps = compare_websites(target, competitor, target_name, competitor_name, thresholds)
        results.append(gaps)

    merged = merge_gaps(results)
    logger.info(
        "Merged %d gaps from %d competitors into %d",
        sum(len(r) for r in results),
        len(results),
        len(merged),
    )
    return merged
