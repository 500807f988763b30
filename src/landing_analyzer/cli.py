"""Command-line interface for the landing page analyzer."""

import asyncio
import json
import sys

from landing_analyzer.config import Config, ScoringThresholds, default_thresholds, settings
from landing_analyzer.issue_fix_pairer import pair_issues_with_fixes
from landing_analyzer.logging_config import setup_logging
from landing_analyzer.orchestrator import LandingPageAnalyzer
from landing_analyzer.priority_insight import (
    SECTIONS,
    generate_priority_insight,
    get_top_priority_fixes,
)
from landing_analyzer.screenshot import FileScreenshotStore
from landing_analyzer.verdict import get_verdict


def _top_fixes(result, thresholds: ScoringThresholds):
    return get_top_priority_fixes(
        result,
        limit=thresholds.top_fixes_limit,
        collapse_threshold=thresholds.collapse_threshold,
    )


def load_thresholds(path=None) -> ScoringThresholds:
    """Thresholds from a JSON file when given, else from LANDING_THRESHOLD_* variables."""
    if path:
        return ScoringThresholds.from_file(path)
    return ScoringThresholds.from_env()


def build_report(result, thresholds: ScoringThresholds = default_thresholds) -> dict:
    """JSON-ready report: the raw result plus verdict, priorities and pairs."""
    report = result.to_dict()
    if result.status != "completed":
        return report

    insight = generate_priority_insight(result)
    sections = result.sections()
    report["verdict"] = get_verdict(result.overall_score)
    report["priority_insight"] = vars(insight) if insight else None
    report["top_fixes"] = [vars(fix) for fix in _top_fixes(result, thresholds)]
    report["issue_fixes"] = {
        key: [vars(pair) for pair in pair_issues_with_fixes(section.issues, section.recommendations)]
        for key, section in sections.items()
    }
    return report


def print_report(result, thresholds: ScoringThresholds = default_thresholds):
    """Print an analysis result in a formatted way.

    Args:
        result: AnalysisResult from the orchestrator
    """
    print(f"\n{'=' * 60}")
    print(f"Landing Page Analysis for: {result.url}")
    print(f"{'=' * 60}")

    if result.status != "completed":
        print(f"\n❌ Analysis failed: {result.error}")
        print(f"\n{'=' * 60}\n")
        return

    if result.page_metadata and result.page_metadata.title:
        print(f"\n📄 {result.page_metadata.title}")

    print(f"\n📊 Overall Score: {result.overall_score}/100 ({get_verdict(result.overall_score)})")

    sections = result.sections()
    print("\nSection Scores:")
    for info in SECTIONS:
        print(f"  {info.icon} {info.name}: {sections[info.key].score}/100")

    insight = generate_priority_insight(result)
    if insight:
        print(f"\n🚩 Priority ({insight.impact_level}): {insight.section_name}")
        print(f"  {insight.primary_issue}")

    fixes = _top_fixes(result, thresholds)
    if fixes:
        print("\n💡 Top Fixes:")
        for fix in fixes:
            print(f"  {fix.section_icon} [{fix.severity}] {fix.section_name}: {fix.recommendation}")

    for info in SECTIONS:
        section = sections[info.key]
        pairs = pair_issues_with_fixes(section.issues, section.recommendations)
        if not pairs:
            continue
        print(f"\n{info.icon} {info.name}")
        for pair in pairs:
            if pair.issue:
                print(f"  ⚠️  [{pair.impact}] {pair.issue}")
                if pair.fix:
                    print(f"      → {pair.fix}")
            else:
                print(f"  ✅ [{pair.impact}] {pair.fix}")

    if result.screenshot:
        print(f"\n📷 Screenshot: {result.screenshot.pathname}")

    print(f"\n{'=' * 60}\n")


def analyze_command(args):
    """Analyze one or more landing pages."""
    config = Config.from_env()
    store = FileScreenshotStore(args.screenshot_dir) if args.screenshot_dir else None
    thresholds = load_thresholds(getattr(args, "thresholds", None))
    analyzer = LandingPageAnalyzer(
        config=config, settings=settings, thresholds=thresholds, screenshot_store=store
    )

    results = []
    exit_code = 0
    for url in args.urls:
        print(f"Analyzing {url}...", file=sys.stderr)
        try:
            result = asyncio.run(analyzer.analyze(url))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            exit_code = 1
            continue

        if result.status != "completed":
            exit_code = 1

        if args.output == "text":
            print_report(result, thresholds)
        else:
            results.append(build_report(result, thresholds))

    if args.output == "json":
        output = json.dumps(results, indent=2, default=str, ensure_ascii=False)
        if args.output_file:
            with open(args.output_file, "w", encoding="utf-8") as f:
                f.write(output)
            print(f"Results written to {args.output_file}", file=sys.stderr)
        else:
            print(output)

    if exit_code:
        sys.exit(exit_code)


def main():
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Landing Page Analyzer - score a landing page for conversion readiness"
    )

    # Global flags (before subcommands)
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=settings.LOG_LEVEL.upper() if settings.LOG_LEVEL else "INFO",
        help="Set logging verbosity (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-file",
        help="Write logs to file in addition to console",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser(
        "analyze", help="Analyze one or more landing pages."
    )
    analyze_parser.add_argument(
        "urls", nargs="+", help="URLs to analyze (one or more)"
    )
    analyze_parser.add_argument(
        "--output",
        "-o",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    analyze_parser.add_argument(
        "--output-file",
        "-f",
        help="Write output to file (only for json format)",
    )
    analyze_parser.add_argument(
        "--screenshot-dir",
        help="Save a viewport screenshot of each page under this directory",
    )
    analyze_parser.add_argument(
        "--thresholds",
        help="JSON file with scoring thresholds (default: LANDING_THRESHOLD_* variables)",
    )
    analyze_parser.set_defaults(func=analyze_command)

    args = parser.parse_args()

    setup_logging(
        level=args.log_level,
        log_file=getattr(args, "log_file", None),
    )

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
