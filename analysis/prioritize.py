"""
Turn a gap list into a summary, an implementation timeline and
step-by-step recommendations.
"""

import logging
from typing import Optional

from analysis.thresholds import GapThresholds, resolve
from content.models import (
    ComparisonSummary,
    ContentGap,
    GapTemplate,
    ImplementationTimeline,
    Recommendation,
    WebsiteContent,
)

logger = logging.getLogger(__name__)

_PRIORITY = {"critical": "high", "significant": "medium", "moderate": "low"}

_ACTION_STEPS = {
    GapTemplate.FAQ: (
        "Compile 10-15 most frequently asked customer questions",
        "Write clear, helpful answers (100-200 words each)",
        "Organize by category (pricing, scheduling, process, etc.)",
        "Add FAQ schema markup for rich snippets",
        "Link to FAQ from footer and contact page",
    ),
    GapTemplate.PROCESS: (
        "Document your step-by-step service process",
        "Create visual timeline or numbered steps",
        "Include estimated timeframes for each step",
        "Add photos or icons for each step",
        "Include CTA at end (Get Quote or Book Now)",
    ),
    GapTemplate.SCHEMA: (
        "Choose appropriate schema type (LocalBusiness, etc.)",
        "Add JSON-LD script to homepage <head>",
        "Include name, address, phone, hours, services",
        "Test with Google Structured Data Testing Tool",
        "Submit to Google Search Console",
    ),
}

_GENERIC_STEPS = (
    "Research competitor examples",
    "Create content outline",
    "Write/design content",
    "Review and refine",
    "Publish and promote",
)


# ── Summary ───────────────────────────────────────────────────────────────────

def _target_strengths(target: WebsiteContent, thresholds: GapThresholds) -> tuple[str, ...]:
    """Strengths read off the target's own flags; the competitor plays no part."""
    pages = target.pages
    checks = [
        (any(p.has_faq for p in pages),                    "Comprehensive FAQ section"),
        (any(p.has_process for p in pages),                "Clear process explanation"),
        (target.metadata.has_schema,                       "Proper schema markup implementation"),
        (any(p.has_reviews for p in pages),                "Customer testimonials displayed"),
        (len(pages) > thresholds.strong_site_page_count,   "Comprehensive site structure with multiple pages"),
    ]
    return tuple(label for passed, label in checks if passed)


def generate_summary(
    target: WebsiteContent,
    gaps: tuple[ContentGap, ...],
    thresholds: Optional[GapThresholds] = None,
) -> ComparisonSummary:
    thresholds = resolve(thresholds)
    weaknesses = [g.gap_title for g in gaps if g.severity in ("critical", "significant")]

    return ComparisonSummary(
        total_gaps=len(gaps),
        critical_gaps=sum(1 for g in gaps if g.severity == "critical"),
        significant_gaps=sum(1 for g in gaps if g.severity == "significant"),
        moderate_gaps=sum(1 for g in gaps if g.severity == "moderate"),
        target_strengths=_target_strengths(target, thresholds),
        target_weaknesses=tuple(weaknesses[: thresholds.weakness_limit]),
    )


# ── Timeline ──────────────────────────────────────────────────────────────────

def generate_implementation_timeline(
    gaps: tuple[ContentGap, ...],
    thresholds: Optional[GapThresholds] = None,
) -> ImplementationTimeline:
    """
    immediate  — critical gaps that are cheap to fix (effort low/medium)
    short_term — significant gaps and the expensive critical ones
    long_term  — moderate gaps

    Buckets are filled before capping and exclude anything already placed
    (by identity), so a gap never lands in two buckets.
    """
    thresholds = resolve(thresholds)

    immediate = [
        g for g in gaps
        if g.severity == "critical" and g.estimated_effort in ("low", "medium")
    ]
    placed = {id(g) for g in immediate}

    short_term = [
        g for g in gaps
        if (g.severity == "significant" or (g.severity == "critical" and g.estimated_effort == "high"))
        and id(g) not in placed
    ]
    placed.update(id(g) for g in short_term)

    long_term = [g for g in gaps if g.severity == "moderate" and id(g) not in placed]

    logger.debug(
        "Timeline: %d immediate, %d short-term, %d long-term (before caps)",
        len(immediate), len(short_term), len(long_term),
    )
    return ImplementationTimeline(
        immediate=tuple(immediate[: thresholds.immediate_limit]),
        short_term=tuple(short_term[: thresholds.short_term_limit]),
        long_term=tuple(long_term[: thresholds.long_term_limit]),
    )


# ── Recommendations ───────────────────────────────────────────────────────────

def action_steps(gap: ContentGap) -> tuple[str, ...]:
    return _ACTION_STEPS.get(gap.template_id, _GENERIC_STEPS)


def generate_recommendations(gaps: tuple[ContentGap, ...]) -> tuple[Recommendation, ...]:
    return tuple(
        Recommendation(
            title=gap.gap_title,
            description=gap.recommended_action,
            priority=_PRIORITY[gap.severity],
            impact=gap.estimated_impact,
            effort=gap.estimated_effort,
            steps=action_steps(gap),
            example_url=gap.competitor_example_url,
        )
        for gap in gaps
    )


def build_gap_report(
    target: WebsiteContent,
    gaps: tuple[ContentGap, ...],
    thresholds: Optional[GapThresholds] = None,
    summary: Optional[ComparisonSummary] = None,
    timeline: Optional[ImplementationTimeline] = None,
) -> dict:
    """
    Bundle gaps, summary, timeline and recommendations as JSON-ready data.
    A summary or timeline the caller already built is reused as is.
    """
    if summary is None:
        summary = generate_summary(target, gaps, thresholds)
    if timeline is None:
        timeline = generate_implementation_timeline(gaps, thresholds)
    recommendations = generate_recommendations(gaps)

    return {
        "target_url":      target.url,
        "summary":         summary.model_dump(mode="json"),
        "gaps":            [g.model_dump(mode="json") for g in gaps],
        "timeline":        timeline.model_dump(mode="json"),
        "recommendations": [r.model_dump(mode="json") for r in recommendations],
    }
