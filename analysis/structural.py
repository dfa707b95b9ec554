"""
Structural gaps: whole page categories or site features the competitor has
and the target does not (FAQ, process page, schema, reviews, service pages).
"""

import logging
from typing import Callable, Optional

from analysis.patterns import is_faq_url, is_process_url, is_service_url
from analysis.thresholds import GapThresholds, resolve
from content.models import ContentGap, GapTemplate, Page, WebsiteContent

logger = logging.getLogger(__name__)


def _first_match(site: WebsiteContent, predicate: Callable[[Page], bool]) -> Optional[Page]:
    return next((p for p in site.pages if predicate(p)), None)


def _has_faq(page: Page) -> bool:
    return page.has_faq or is_faq_url(page.url)


def _has_process(page: Page) -> bool:
    return page.has_process or is_process_url(page.url)


def _has_reviews(page: Page) -> bool:
    return page.has_reviews


def _faq_gap(target: WebsiteContent, competitor: WebsiteContent, competitor_name: str) -> Optional[ContentGap]:
    example = _first_match(competitor, _has_faq)
    if example is None or _first_match(target, _has_faq) is not None:
        return None
    return ContentGap(
        gap_type="structural",
        gap_title="Missing FAQ Section",
        gap_description=(
            f"Competitor {competitor_name} has a comprehensive FAQ page addressing common "
            "customer questions. Your site lacks this critical trust-building element that "
            "helps reduce customer service burden and improves SEO."
        ),
        severity="significant",
        competitors_have_this=(competitor_name,),
        recommended_action=(
            "Create a dedicated FAQ page at /faq with 10-15 common questions covering: pricing, "
            "scheduling, service process, areas served, accepted payment methods, and guarantees."
        ),
        content_type="trust_building",
        competitor_example_url=example.url,
        estimated_impact="high",
        estimated_effort="medium",
        template_id=GapTemplate.FAQ,
    )


def _process_gap(target: WebsiteContent, competitor: WebsiteContent, competitor_name: str) -> Optional[ContentGap]:
    example = _first_match(competitor, _has_process)
    if example is None or _first_match(target, _has_process) is not None:
        return None
    return ContentGap(
        gap_type="structural",
        gap_title="Missing Process Explanation Page",
        gap_description=(
            f"Competitor {competitor_name} has a dedicated page explaining their service process "
            "step-by-step. This helps set customer expectations and builds trust by "
            "demonstrating professionalism and transparency."
        ),
        severity="critical",
        competitors_have_this=(competitor_name,),
        recommended_action=(
            "Create /how-it-works page with step-by-step process: 1) Initial contact/quote, "
            "2) Scheduling appointment, 3) On-site assessment, 4) Service execution, "
            "5) Follow-up. Include timeline expectations and what customers should prepare."
        ),
        content_type="service_pages",
        competitor_example_url=example.url,
        estimated_impact="high",
        estimated_effort="medium",
        template_id=GapTemplate.PROCESS,
    )


def _schema_gap(target: WebsiteContent, competitor: WebsiteContent, competitor_name: str) -> Optional[ContentGap]:
    if target.metadata.has_schema or not competitor.metadata.has_schema:
        return None
    # Effort stays low whatever the site size.
    return ContentGap(
        gap_type="structural",
        gap_title="Missing Schema Markup (Structured Data)",
        gap_description=(
            f"Competitor {competitor_name} uses schema markup to help search engines and AI "
            "platforms understand their business better. This improves visibility in search "
            "results and voice search responses."
        ),
        severity="critical",
        competitors_have_this=(competitor_name,),
        recommended_action=(
            "Implement LocalBusiness schema markup on homepage including: business name, "
            "address, phone, hours, services, aggregate rating, and price range. Use Google's "
            "Structured Data Testing Tool to validate."
        ),
        content_type="technical_seo",
        competitor_example_url=competitor.url,
        estimated_impact="high",
        estimated_effort="low",
        template_id=GapTemplate.SCHEMA,
    )


def _reviews_gap(target: WebsiteContent, competitor: WebsiteContent, competitor_name: str) -> Optional[ContentGap]:
    example = _first_match(competitor, _has_reviews)
    if example is None or _first_match(target, _has_reviews) is not None:
        return None
    return ContentGap(
        gap_type="structural",
        gap_title="Missing Customer Reviews/Testimonials Section",
        gap_description=(
            f"Competitor {competitor_name} prominently displays customer reviews and "
            "testimonials. Social proof is critical for conversion - 88% of consumers trust "
            "online reviews as much as personal recommendations."
        ),
        severity="significant",
        competitors_have_this=(competitor_name,),
        recommended_action=(
            "Add testimonials section to homepage with 3-5 customer reviews. Include customer "
            "name, service used, and specific results. Consider adding aggregate rating schema "
            "markup."
        ),
        content_type="trust_building",
        competitor_example_url=example.url,
        estimated_impact="high",
        estimated_effort="low",
        template_id=GapTemplate.REVIEWS,
    )


def _service_pages_gap(
    target: WebsiteContent,
    competitor: WebsiteContent,
    competitor_name: str,
    thresholds: GapThresholds,
) -> Optional[ContentGap]:
    target_count = sum(1 for p in target.pages if is_service_url(p.url))
    competitor_service = [p for p in competitor.pages if is_service_url(p.url)]

    if len(competitor_service) <= target_count + thresholds.service_page_margin:
        return None
    return ContentGap(
        gap_type="structural",
        gap_title="Insufficient Service-Specific Pages",
        gap_description=(
            f"Competitor {competitor_name} has {len(competitor_service)} dedicated service pages "
            f"while you have {target_count}. More specific service pages improve SEO and help "
            "customers find exactly what they need."
        ),
        severity="significant",
        competitors_have_this=(competitor_name,),
        recommended_action=(
            "Create dedicated pages for each major service offering. Each page should include: "
            "service description, process, pricing information, FAQs, and call-to-action."
        ),
        content_type="service_pages",
        competitor_example_url=competitor_service[0].url,
        estimated_impact="medium",
        estimated_effort="high",
        template_id=GapTemplate.SERVICE_PAGES,
    )


def find_structural_gaps(
    target: WebsiteContent,
    competitor: WebsiteContent,
    competitor_name: str,
    thresholds: Optional[GapThresholds] = None,
) -> tuple[ContentGap, ...]:
    """
    Run every structural check. Each check fires at most once and only when
    the competitor has something the target lacks.
    """
    thresholds = resolve(thresholds)
    candidates = (
        _faq_gap(target, competitor, competitor_name),
        _process_gap(target, competitor, competitor_name),
        _schema_gap(target, competitor, competitor_name),
        _reviews_gap(target, competitor, competitor_name),
        _service_pages_gap(target, competitor, competitor_name, thresholds),
    )
    gaps = tuple(g for g in candidates if g is not None)
    logger.debug("Structural gaps vs %s: %d", competitor_name, len(gaps))
    return gaps
