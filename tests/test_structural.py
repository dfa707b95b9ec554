"""
Unit tests for the structural gap detector.
"""

from analysis.structural import find_structural_gaps
from analysis.thresholds import GapThresholds
from content.models import GapTemplate

from conftest import make_page, make_site


def _by_template(gaps):
    return {g.template_id: g for g in gaps}


class TestFaqCheck:
    """Test suite for the FAQ presence check."""

    def test_flagged_faq_page_on_competitor_only(self):
        """Test that a competitor FAQ page produces a significant trust-building gap."""
        target = make_site("https://t.example", [make_page("https://t.example/")])
        competitor = make_site("https://c.example", [
            make_page("https://c.example/"),
            make_page("https://c.example/help", has_faq=True),
        ])

        gaps = find_structural_gaps(target, competitor, "Rival")

        assert len(gaps) == 1
        gap = gaps[0]
        assert gap.template_id == GapTemplate.FAQ
        assert gap.gap_type == "structural"
        assert gap.severity == "significant"
        assert gap.content_type == "trust_building"
        assert gap.estimated_impact == "high"
        assert gap.estimated_effort == "medium"
        assert gap.competitor_example_url == "https://c.example/help"
        assert gap.competitors_have_this == ("Rival",)
        assert "Rival" in gap.gap_description

    def test_faq_detected_from_url_pattern(self):
        """Test that /frequently-asked URLs count as FAQ pages without the flag."""
        target = make_site("https://t.example", [make_page("https://t.example/")])
        competitor = make_site("https://c.example", [
            make_page("https://c.example/Frequently-Asked-Questions"),
        ])

        gaps = find_structural_gaps(target, competitor, "Rival")

        assert [g.template_id for g in gaps] == [GapTemplate.FAQ]

    def test_target_with_faq_url_has_no_gap(self):
        """Test that a target FAQ URL suppresses the gap."""
        target = make_site("https://t.example", [make_page("https://t.example/questions")])
        competitor = make_site("https://c.example", [make_page("https://c.example/faq", has_faq=True)])

        assert find_structural_gaps(target, competitor, "Rival") == ()


class TestProcessCheck:
    """Test suite for the process explanation check."""

    def test_process_gap_is_critical(self):
        target = make_site("https://t.example", [make_page("https://t.example/")])
        competitor = make_site("https://c.example", [make_page("https://c.example/our-process")])

        gap = _by_template(find_structural_gaps(target, competitor, "Rival"))[GapTemplate.PROCESS]

        assert gap.severity == "critical"
        assert gap.content_type == "service_pages"
        assert gap.estimated_impact == "high"
        assert gap.estimated_effort == "medium"
        assert gap.competitor_example_url == "https://c.example/our-process"

    def test_has_process_flag_on_target_suppresses_gap(self):
        target = make_site("https://t.example", [make_page("https://t.example/about", has_process=True)])
        competitor = make_site("https://c.example", [make_page("https://c.example/how-it-works")])

        assert find_structural_gaps(target, competitor, "Rival") == ()


class TestSchemaCheck:
    """Test suite for the schema markup check."""

    def test_schema_gap_uses_competitor_root(self):
        target = make_site("https://t.example")
        competitor = make_site("https://c.example", has_schema=True)

        gaps = find_structural_gaps(target, competitor, "Rival")

        assert len(gaps) == 1
        assert gaps[0].template_id == GapTemplate.SCHEMA
        assert gaps[0].severity == "critical"
        assert gaps[0].content_type == "technical_seo"
        assert gaps[0].competitor_example_url == "https://c.example"

    def test_schema_effort_is_low_regardless_of_site_size(self):
        """Test that the schema gap effort stays low for large sites."""
        big_target = make_site(
            "https://t.example",
            [make_page(f"https://t.example/p{i}", word_count=2000) for i in range(200)],
        )
        competitor = make_site("https://c.example", has_schema=True)

        gap = _by_template(find_structural_gaps(big_target, competitor, "Rival"))[GapTemplate.SCHEMA]

        assert gap.estimated_effort == "low"

    def test_target_ahead_on_schema_produces_nothing(self):
        target = make_site("https://t.example", has_schema=True)
        competitor = make_site("https://c.example")

        assert find_structural_gaps(target, competitor, "Rival") == ()


class TestReviewsCheck:
    """Test suite for the reviews/testimonials check."""

    def test_reviews_gap(self):
        target = make_site("https://t.example", [make_page("https://t.example/")])
        competitor = make_site("https://c.example", [
            make_page("https://c.example/"),
            make_page("https://c.example/testimonials", has_reviews=True),
        ])

        gap = _by_template(find_structural_gaps(target, competitor, "Rival"))[GapTemplate.REVIEWS]

        assert gap.severity == "significant"
        assert gap.content_type == "trust_building"
        assert gap.estimated_impact == "high"
        assert gap.estimated_effort == "low"
        assert gap.competitor_example_url == "https://c.example/testimonials"


class TestServicePagesCheck:
    """Test suite for the service-page depth check."""

    def _competitor(self, count):
        return make_site("https://c.example", [
            make_page(f"https://c.example/services/s{i}") for i in range(count)
        ])

    def test_three_more_service_pages_fires(self):
        target = make_site("https://t.example", [make_page("https://t.example/lawn-service")])

        gaps = find_structural_gaps(target, self._competitor(4), "Rival")

        assert len(gaps) == 1
        gap = gaps[0]
        assert gap.template_id == GapTemplate.SERVICE_PAGES
        assert gap.severity == "significant"
        assert gap.estimated_impact == "medium"
        assert gap.estimated_effort == "high"
        assert gap.competitor_example_url == "https://c.example/services/s0"
        assert "4 dedicated service pages while you have 1" in gap.gap_description

    def test_margin_of_exactly_two_does_not_fire(self):
        target = make_site("https://t.example", [make_page("https://t.example/service/a")])

        assert find_structural_gaps(target, self._competitor(3), "Rival") == ()

    def test_margin_is_configurable(self):
        target = make_site("https://t.example")
        thresholds = GapThresholds(service_page_margin=0)

        gaps = find_structural_gaps(target, self._competitor(1), "Rival", thresholds)

        assert [g.template_id for g in gaps] == [GapTemplate.SERVICE_PAGES]


class TestAllChecks:
    """Test suite for running every check together."""

    def test_checks_are_independent_and_ordered(self):
        """Test that every check fires and gaps come out in check order."""
        target = make_site("https://t.example", [make_page("https://t.example/")])
        competitor = make_site(
            "https://c.example",
            [
                make_page("https://c.example/faq", has_faq=True),
                make_page("https://c.example/process"),
                make_page("https://c.example/reviews", has_reviews=True),
            ] + [make_page(f"https://c.example/services/s{i}") for i in range(3)],
            has_schema=True,
        )

        gaps = find_structural_gaps(target, competitor, "Rival")

        assert [g.template_id for g in gaps] == [
            GapTemplate.FAQ,
            GapTemplate.PROCESS,
            GapTemplate.SCHEMA,
            GapTemplate.REVIEWS,
            GapTemplate.SERVICE_PAGES,
        ]

    def test_empty_sites_produce_no_gaps(self):
        assert find_structural_gaps(make_site("https://t.example"), make_site("https://c.example"), "Rival") == ()
