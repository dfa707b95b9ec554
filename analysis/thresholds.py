"""
Tunable heuristics for gap detection and prioritisation.

The defaults are the values the detectors have always used. None of them is
backed by measurement; they only keep one-off tags and small differences out
of the report. Override them from the `thresholds:` section of config.yaml.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GapThresholds(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # Topic detector
    topic_min_length:        int = Field(default=3, ge=0)   # topic must be longer than this
    topic_min_pages:         int = Field(default=2, ge=1)
    topic_gap_limit:         int = Field(default=5, ge=0)
    topic_critical_pages:    int = Field(default=4, ge=1)
    topic_significant_pages: int = Field(default=3, ge=1)

    # Feature / structural detectors
    content_depth_ratio: float = Field(default=1.5, gt=0)
    service_page_margin: int   = Field(default=2, ge=0)

    # Summary & timeline
    strong_site_page_count: int = Field(default=10, ge=0)
    weakness_limit:         int = Field(default=5, ge=0)
    immediate_limit:        int = Field(default=5, ge=0)
    short_term_limit:       int = Field(default=8, ge=0)
    long_term_limit:        int = Field(default=10, ge=0)

    @model_validator(mode="after")
    def _check_topic_tiers(self) -> "GapThresholds":
        if self.topic_significant_pages > self.topic_critical_pages:
            raise ValueError(
                "topic_significant_pages must not exceed topic_critical_pages "
                f"({self.topic_significant_pages} > {self.topic_critical_pages})"
            )
        return self


DEFAULT_THRESHOLDS = GapThresholds()


def resolve(thresholds: Optional[GapThresholds]) -> GapThresholds:
    return thresholds if thresholds is not None else DEFAULT_THRESHOLDS


def thresholds_from_config(config: dict) -> GapThresholds:
    """Build thresholds from the `thresholds:` section of a loaded config."""
    return GapThresholds.model_validate(config.get("thresholds") or {})
