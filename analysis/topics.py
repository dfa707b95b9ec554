"""
Topic gaps: subjects the competitor keeps coming back to that the target
never mentions.

Page frequency stands in for topic importance; there is no relevance signal
beyond the tags the upstream extractor assigns.
"""

import logging
from typing import Optional

from analysis.patterns import capitalize_words
from analysis.thresholds import GapThresholds, resolve
from content.models import ContentGap, GapTemplate, Page, WebsiteContent

logger = logging.getLogger(__name__)

_TIERS = {
    # severity:     (gap_type,            estimated_impact)
    "critical":    ("critical_topic",    "high"),
    "significant": ("significant_topic", "medium"),
    "moderate":    ("moderate_topic",    "low"),
}


def _site_topics(site: WebsiteContent) -> set[str]:
    return {t.lower() for p in site.pages for t in p.main_topics}


def _topic_pages(site: WebsiteContent) -> dict[str, list[Page]]:
    """Lower-cased topic -> pages tagged with it, in first-seen order."""
    index: dict[str, list[Page]] = {}
    for page in site.pages:
        # A page counts once per topic even if the extractor repeated the tag.
        for topic in dict.fromkeys(t.lower() for t in page.main_topics):
            index.setdefault(topic, []).append(page)
    return index


def _severity(page_count: int, thresholds: GapThresholds) -> str:
    if page_count >= thresholds.topic_critical_pages:
        return "critical"
    if page_count >= thresholds.topic_significant_pages:
        return "significant"
    return "moderate"


def find_missing_topics(
    target: WebsiteContent,
    competitor: WebsiteContent,
    thresholds: Optional[GapThresholds] = None,
) -> list[tuple[str, list[Page]]]:
    """
    Topics on the competitor that the target lacks, most frequent first.
    Ties keep the order in which the competitor's pages introduced them.
    """
    thresholds = resolve(thresholds)
    target_topics = _site_topics(target)

    missing = [
        (topic, pages)
        for topic, pages in _topic_pages(competitor).items()
        if topic not in target_topics
        and len(topic) > thresholds.topic_min_length
        and len(pages) >= thresholds.topic_min_pages
    ]
    missing.sort(key=lambda item: len(item[1]), reverse=True)
    return missing


def find_topic_gaps(
    target: WebsiteContent,
    competitor: WebsiteContent,
    competitor_name: str,
    thresholds: Optional[GapThresholds] = None,
) -> tuple[ContentGap, ...]:
    thresholds = resolve(thresholds)
    missing = find_missing_topics(target, competitor, thresholds)

    gaps = []
    for topic, pages in missing[: thresholds.topic_gap_limit]:
        severity = _severity(len(pages), thresholds)
        gap_type, impact = _TIERS[severity]
        gaps.append(ContentGap(
            gap_type=gap_type,
            gap_title=f"Missing Topic Coverage: {capitalize_words(topic)}",
            gap_description=(
                f'Competitor {competitor_name} emphasizes "{topic}" across {len(pages)} pages, '
                "but your site doesn't cover this topic. This represents a content gap that "
                "competitors are using to attract customers searching for this information."
            ),
            severity=severity,
            competitors_have_this=(competitor_name,),
            recommended_action=(
                f'Add content about "{topic}" to relevant pages. Consider creating a dedicated '
                "page or blog post if it's a major service aspect. Include specific details, "
                "benefits, and how it relates to your services."
            ),
            content_type="website_content",
            competitor_example_url=pages[0].url,
            estimated_impact=impact,
            estimated_effort="medium",
            template_id=GapTemplate.TOPIC,
        ))

    logger.debug(
        "Topic gaps vs %s: %d candidates, %d reported",
        competitor_name, len(missing), len(gaps),
    )
    return tuple(gaps)
