"""
Feature gaps: booking/quote capability and overall content depth.
"""

import logging
from typing import Optional

from analysis.patterns import is_booking_page, is_booking_url
from analysis.thresholds import GapThresholds, resolve
from content.models import ContentGap, GapTemplate, WebsiteContent

logger = logging.getLogger(__name__)


def average_word_count(site: WebsiteContent) -> float:
    """Mean words per page; 0.0 for a site with no pages."""
    return sum(p.word_count for p in site.pages) / max(len(site.pages), 1)


def _booking_gap(target: WebsiteContent, competitor: WebsiteContent, competitor_name: str) -> Optional[ContentGap]:
    if any(is_booking_page(p) for p in target.pages):
        return None
    if not any(is_booking_page(p) for p in competitor.pages):
        return None

    example = next((p for p in competitor.pages if is_booking_url(p.url)), None)
    return ContentGap(
        gap_type="structural",
        gap_title="Missing Online Booking/Quote System",
        gap_description=(
            f"Competitor {competitor_name} offers online booking or instant quote requests. "
            "Modern customers expect 24/7 ability to request services without phone calls."
        ),
        severity="significant",
        competitors_have_this=(competitor_name,),
        recommended_action=(
            "Add online quote request form or booking system. Minimum: simple contact form with "
            "service selection, date preference, and details field. Better: integrated "
            "scheduling system."
        ),
        content_type="user_experience",
        competitor_example_url=example.url if example else None,
        estimated_impact="high",
        estimated_effort="medium",
        template_id=GapTemplate.BOOKING,
    )


def _content_depth_gap(
    target: WebsiteContent,
    competitor: WebsiteContent,
    competitor_name: str,
    thresholds: GapThresholds,
) -> Optional[ContentGap]:
    target_avg     = average_word_count(target)
    competitor_avg = average_word_count(competitor)

    if competitor_avg <= target_avg * thresholds.content_depth_ratio:
        return None

    longest = sorted(competitor.pages, key=lambda p: p.word_count, reverse=True)
    return ContentGap(
        gap_type="thematic",
        gap_title="Thin Content - Pages Need More Depth",
        gap_description=(
            f"Competitor {competitor_name} has significantly more detailed content "
            f"(avg {round(competitor_avg)} words per page vs your {round(target_avg)}). "
            "Search engines favor comprehensive, detailed content."
        ),
        severity="moderate",
        competitors_have_this=(competitor_name,),
        recommended_action=(
            "Expand key service pages with more detail: add sections on process, benefits, "
            "FAQs, pricing factors, and examples. Aim for 800-1200 words on main service pages."
        ),
        content_type="website_content",
        competitor_example_url=longest[0].url if longest else None,
        estimated_impact="medium",
        estimated_effort="high",
        template_id=GapTemplate.CONTENT_DEPTH,
    )


def find_feature_gaps(
    target: WebsiteContent,
    competitor: WebsiteContent,
    competitor_name: str,
    thresholds: Optional[GapThresholds] = None,
) -> tuple[ContentGap, ...]:
    thresholds = resolve(thresholds)
    candidates = (
        _booking_gap(target, competitor, competitor_name),
        _content_depth_gap(target, competitor, competitor_name, thresholds),
    )
    gaps = tuple(g for g in candidates if g is not None)
    logger.debug("Feature gaps vs %s: %d", competitor_name, len(gaps))
    return gaps
