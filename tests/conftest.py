"""
Shared builders for snapshot fixtures.
"""

import pytest

from content.models import ContentGap, GapTemplate, Page, SiteMetadata, WebsiteContent


def make_gap(title, severity="moderate", effort="medium", template=GapTemplate.TOPIC, **overrides) -> ContentGap:
    fields = dict(
        gap_type="structural",
        gap_title=title,
        gap_description=f"{title} description",
        severity=severity,
        competitors_have_this=("Rival",),
        recommended_action=f"Fix {title}",
        content_type="website_content",
        competitor_example_url=f"https://c.example/{title.lower().replace(' ', '-')}",
        estimated_impact="medium",
        estimated_effort=effort,
        template_id=template,
    )
    fields.update(overrides)
    return ContentGap(**fields)


def make_page(url, title="", topics=(), word_count=0, has_faq=False, has_process=False, has_reviews=False) -> Page:
    return Page(
        url=url,
        title=title,
        main_topics=tuple(topics),
        word_count=word_count,
        has_faq=has_faq,
        has_process=has_process,
        has_reviews=has_reviews,
    )


def make_site(url, pages=(), has_schema=False) -> WebsiteContent:
    return WebsiteContent(url=url, pages=tuple(pages), metadata=SiteMetadata(has_schema=has_schema))


@pytest.fixture
def plain_target():
    """Five ordinary pages, no FAQ, no schema."""
    return make_site(
        "https://target.example",
        [
            make_page(f"https://target.example/page-{i}", title=f"Page {i}",
                      topics=("landscaping",), word_count=500)
            for i in range(5)
        ],
    )


@pytest.fixture
def faq_schema_competitor():
    """Same content as plain_target plus one FAQ page and schema markup."""
    pages = [
        make_page(f"https://rival.example/page-{i}", title=f"Page {i}",
                  topics=("landscaping",), word_count=500)
        for i in range(5)
    ]
    pages.append(make_page("https://rival.example/faq", title="FAQ",
                           topics=("landscaping",), word_count=500, has_faq=True))
    return make_site("https://rival.example", pages, has_schema=True)
