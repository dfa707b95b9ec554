"""
Notifications: Slack webhook summary + local JSON report writer.
"""

import json
import logging
import os
import re
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Optional, Union

import requests

from content.models import ComparisonSummary, ImplementationTimeline

logger = logging.getLogger(__name__)

REPORTS_DIR = Path("reports")


def _slugify(name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return slug or "target"


# ── Slack ─────────────────────────────────────────────────────────────────────

def _slack_webhook_url() -> Optional[str]:
    return os.getenv("SLACK_WEBHOOK_URL")


def _bucket_lines(label: str, gaps) -> str:
    if not gaps:
        return f"*{label}:* nothing scheduled"
    items = "\n".join(f"• {g.gap_title} ({g.severity})" for g in gaps)
    return f"*{label}:*\n{items}"


def send_gap_slack_summary(
    target_name: str,
    summary: ComparisonSummary,
    timeline: ImplementationTimeline,
) -> bool:
    """
    Post the gap summary and timeline to Slack.
    Returns True on success, False on failure.
    """
    webhook_url = _slack_webhook_url()
    if not webhook_url:
        logger.warning("SLACK_WEBHOOK_URL not set — skipping Slack gap summary")
        return False

    emoji = "🔴" if summary.critical_gaps else ("⚠️" if summary.significant_gaps else "✅")
    headline = f"{emoji} Content Gap Analysis: {target_name}"

    message = {
        "text": f"{headline} — {summary.total_gaps} gaps",
        "blocks": [
            {
                "type": "header",
                "text": {"type": "plain_text", "text": headline, "emoji": True},
            },
            {
                "type": "section",
                "fields": [
                    {"type": "mrkdwn", "text": f"*Total gaps:*\n{summary.total_gaps}"},
                    {"type": "mrkdwn", "text": f"*Critical:*\n{summary.critical_gaps}"},
                    {"type": "mrkdwn", "text": f"*Significant:*\n{summary.significant_gaps}"},
                    {"type": "mrkdwn", "text": f"*Moderate:*\n{summary.moderate_gaps}"},
                ],
            },
            {
                "type": "section",
                "text": {
                    "type": "mrkdwn",
                    "text": "\n\n".join([
                        _bucket_lines("Immediate (1-2 weeks)", timeline.immediate),
                        _bucket_lines("Short term (1-3 months)", timeline.short_term),
                        _bucket_lines("Long term (3-6 months)", timeline.long_term),
                    ]),
                },
            },
            {
                "type": "context",
                "elements": [
                    {
                        "type": "mrkdwn",
                        "text": f"Generated at {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')} | Content Gap Analysis",
                    }
                ],
            },
        ],
    }

    try:
        resp = requests.post(webhook_url, json=message, timeout=10)
        if resp.status_code == 200:
            logger.info("Slack gap summary sent for %s (%d gaps)", target_name, summary.total_gaps)
            return True
        else:
            logger.error("Slack webhook returned %d: %s", resp.status_code, resp.text)
            return False
    except requests.RequestException as exc:
        logger.error("Failed to send Slack gap summary: %s", exc)
        return False


# ── JSON report ───────────────────────────────────────────────────────────────

def write_json_report(
    target_name: str,
    report: dict,
    report_dir: Union[str, Path] = REPORTS_DIR,
    report_date: Optional[date] = None,
) -> Path:
    """
    Write a structured JSON report to <report_dir>/<target-slug>-YYYY-MM-DD.json.
    Returns the path of the written file.
    """
    report_dir = Path(report_dir)
    report_dir.mkdir(parents=True, exist_ok=True)
    report_date = report_date or date.today()
    filepath = report_dir / f"{_slugify(target_name)}-{report_date.isoformat()}.json"

    payload = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "date":         report_date.isoformat(),
        "target":       target_name,
        **report,
    }

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)

    logger.info("JSON report written to %s", filepath)
    return filepath
