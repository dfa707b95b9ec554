"""
main.py — CLI entry point for the website content gap analysis.

Usage:
  python main.py --compare                    Compare the target against every competitor in config.yaml
  python main.py --compare --config other.yaml
  python main.py --validate FILE [FILE ...]   Check that snapshot files are well-formed
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv

load_dotenv()

# ── Logging setup ─────────────────────────────────────────────────────────────
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("gap_analysis.log", encoding="utf-8"),
    ],
)
logger = logging.getLogger("main")


# ── Config loader ─────────────────────────────────────────────────────────────

def load_config(path: str = "config.yaml") -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _resolve_snapshot(config_path: str, snapshot: str) -> Path:
    """Snapshot paths in the config are relative to the config file."""
    path = Path(snapshot)
    if path.is_absolute():
        return path
    return Path(config_path).parent / path


# ── Core pipeline ─────────────────────────────────────────────────────────────

def run_analysis(config: dict, config_path: str = "config.yaml") -> dict:
    """
    Load every snapshot named in the config, compare the target to each
    competitor, write the JSON report and optionally notify Slack.
    Returns the report dict.
    """
    from analysis.compare import InvalidComparisonInputError, compare_against_competitors
    from analysis.prioritize import build_gap_report, generate_implementation_timeline, generate_summary
    from analysis.thresholds import thresholds_from_config
    from content.loader import load_website_content
    from notifications.alerts import send_gap_slack_summary, write_json_report

    settings   = config.get("settings") or {}
    thresholds = thresholds_from_config(config)

    target_cfg  = config["target"]
    target_name = target_cfg["name"]
    target      = load_website_content(_resolve_snapshot(config_path, target_cfg["snapshot"]))

    competitors = {}
    for entry in config["competitors"] or []:
        name = entry["name"]
        if name in competitors:
            logger.error("Competitor %r is listed more than once in the config", name)
            raise InvalidComparisonInputError(f"duplicate competitor name: {name!r}")
        competitors[name] = load_website_content(
            _resolve_snapshot(config_path, entry["snapshot"])
        )

    logger.info("=== Comparing %s against %d competitors ===", target_name, len(competitors))
    gaps = compare_against_competitors(target, competitors, target_name, thresholds)

    logger.info("=== Writing report ===")
    summary  = generate_summary(target, gaps, thresholds)
    timeline = generate_implementation_timeline(gaps, thresholds)
    report   = build_gap_report(target, gaps, thresholds, summary=summary, timeline=timeline)
    report["competitors"] = list(competitors)
    report_path = write_json_report(
        target_name, report, report_dir=settings.get("report_dir", "reports")
    )
    logger.info("Report written to %s", report_path)

    if settings.get("notify_slack", False):
        send_gap_slack_summary(target_name, summary, timeline)

    return report


def print_report(target_name: str, report: dict) -> None:
    summary = report["summary"]
    print(f"\n{'='*60}")
    print(f"  Target:        {target_name} ({report['target_url']})")
    print(f"  Competitors:   {', '.join(report.get('competitors', []))}")
    print(
        f"  Gaps:          {summary['total_gaps']} total — "
        f"{summary['critical_gaps']} critical, "
        f"{summary['significant_gaps']} significant, "
        f"{summary['moderate_gaps']} moderate"
    )
    print(f"\n  Strengths:\n  {', '.join(summary['target_strengths']) or '-'}")
    print(f"\n  Weaknesses:\n  {', '.join(summary['target_weaknesses']) or '-'}")

    labels = [("immediate", "Immediate"), ("short_term", "Short term"), ("long_term", "Long term")]
    for key, label in labels:
        print(f"\n  {label}:")
        for gap in report["timeline"][key]:
            print(f"    - {gap['gap_title']} [{', '.join(gap['competitors_have_this'])}]")
    print()


def validate_snapshots(paths: list[str]) -> int:
    """Returns the number of snapshots that loaded cleanly."""
    from content.loader import load_website_content

    for path in paths:
        site = load_website_content(path)
        print(f"OK  {path}  {site.url}  ({len(site.pages)} pages)")
    return len(paths)


# ── CLI ───────────────────────────────────────────────────────────────────────

def main(argv=None) -> int:
    from pydantic import ValidationError

    from analysis.compare import InvalidComparisonInputError
    from content.loader import InvalidSnapshotError

    parser = argparse.ArgumentParser(
        description="Website content gap analysis — target site vs competitors"
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--compare",
        action="store_true",
        help="Compare the configured target against its competitors and write a report",
    )
    group.add_argument(
        "--validate",
        nargs="+",
        metavar="FILE",
        help="Validate WebsiteContent snapshot files",
    )
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to the config file (default: config.yaml)",
    )

    args = parser.parse_args(argv)

    try:
        if args.compare:
            config = load_config(args.config)
            report = run_analysis(config, config_path=args.config)
            print_report(config["target"]["name"], report)

        elif args.validate:
            validate_snapshots(args.validate)

    except (InvalidSnapshotError, InvalidComparisonInputError, ValidationError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 1
    except KeyError as exc:
        logger.error("Missing required config key: %s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
