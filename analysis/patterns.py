"""
URL and title heuristics used to recognise page categories.
"""

import re

from content.models import Page

_FAQ_RE     = re.compile(r"/(faq|frequently-asked|questions)")
_PROCESS_RE = re.compile(r"/(how-it-works|process|our-process|procedure)")
_SERVICE_RE = re.compile(r"/(services|service)/")

# Detection is broader than the pattern used to pick an example page.
_BOOKING_RE         = re.compile(r"book|schedule|appointment|quote|estimate")
_BOOKING_EXAMPLE_RE = re.compile(r"book|schedule|quote")


def is_faq_url(url: str) -> bool:
    return _FAQ_RE.search(url.lower()) is not None


def is_process_url(url: str) -> bool:
    return _PROCESS_RE.search(url.lower()) is not None


def is_service_url(url: str) -> bool:
    lower = url.lower()
    return _SERVICE_RE.search(lower) is not None or "-service" in lower


def is_booking_page(page: Page) -> bool:
    """A page that lets visitors book or request a quote."""
    title = page.title.lower()
    return (
        _BOOKING_RE.search(page.url) is not None
        or "book" in title
        or "quote" in title
    )


def is_booking_url(url: str) -> bool:
    return _BOOKING_EXAMPLE_RE.search(url) is not None


def capitalize_words(text: str) -> str:
    """'drain-cleaning repair' -> 'Drain-cleaning Repair'."""
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))
