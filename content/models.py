"""
Content model: site snapshots in, content gaps and remediation plan out.

Every model is frozen. Snapshots are handed over by the upstream fetcher and
are only ever read here; gaps and the structures derived from them are built
once per comparison and never modified afterwards.
"""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["critical", "significant", "moderate"]
Level = Literal["high", "medium", "low"]

GapType = Literal[
    "structural",
    "thematic",
    "critical_topic",
    "significant_topic",
    "moderate_topic",
]

ContentType = Literal[
    "website_content",
    "service_pages",
    "trust_building",
    "technical_seo",
    "user_experience",
]


class GapTemplate(str, Enum):
    """Which check produced a gap. Drives the action-step checklist."""

    FAQ = "faq"
    PROCESS = "process"
    SCHEMA = "schema"
    REVIEWS = "reviews"
    SERVICE_PAGES = "service_pages"
    TOPIC = "topic"
    BOOKING = "booking"
    CONTENT_DEPTH = "content_depth"


# ── Snapshots ─────────────────────────────────────────────────────────────────

class Page(BaseModel):
    """One crawled page of a site."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(min_length=1)
    title: str
    main_topics: tuple[str, ...]
    word_count: int = Field(ge=0)
    has_faq: bool
    has_process: bool
    has_reviews: bool


class SiteMetadata(BaseModel):
    # The fetcher also sends title, description, phone numbers etc.
    model_config = ConfigDict(frozen=True, extra="ignore")

    has_schema: bool = False


class WebsiteContent(BaseModel):
    """A snapshot of one site: its root URL, parsed pages and site-wide flags."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(min_length=1)
    pages: tuple[Page, ...] = ()
    metadata: SiteMetadata = Field(default_factory=SiteMetadata)


# ── Gaps ──────────────────────────────────────────────────────────────────────

class ContentGap(BaseModel):
    """One difference between the target and a competitor."""

    model_config = ConfigDict(frozen=True)

    gap_type: GapType
    gap_title: str
    gap_description: str
    severity: Severity
    competitors_have_this: tuple[str, ...]
    recommended_action: str
    content_type: ContentType
    competitor_example_url: Optional[str] = None
    estimated_impact: Level
    estimated_effort: Level
    template_id: GapTemplate


class ComparisonSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_gaps: int
    critical_gaps: int
    significant_gaps: int
    moderate_gaps: int
    target_strengths: tuple[str, ...] = ()
    target_weaknesses: tuple[str, ...] = ()


class ImplementationTimeline(BaseModel):
    """
    Gaps bucketed by when to tackle them:
      immediate   — 1-2 weeks
      short_term  — 1-3 months
      long_term   — 3-6 months
    """

    model_config = ConfigDict(frozen=True)

    immediate: tuple[ContentGap, ...] = ()
    short_term: tuple[ContentGap, ...] = ()
    long_term: tuple[ContentGap, ...] = ()


class Recommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    priority: Level
    impact: Level
    effort: Level
    steps: tuple[str, ...]
    example_url: Optional[str] = None
