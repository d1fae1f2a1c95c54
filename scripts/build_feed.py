#!/usr/bin/env python3
"""Build the episode feed once and write it as JSON for the static site."""

import sys
import json
import asyncio
import argparse
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import structlog

from spooky_feed.pipeline.aggregator import FeedAggregator

# stdout carries the JSON, so log lines go to stderr
structlog.configure(logger_factory=structlog.PrintLoggerFactory(file=sys.stderr))


def print_header(title):
    print(f"\n{'='*60}", file=sys.stderr)
    print(f" {title}", file=sys.stderr)
    print('='*60, file=sys.stderr)


def select_episodes(feed, args):
    """Apply --category and --latest to the feed's episodes."""
    episodes = list(feed.episodes)
    if args.category:
        episodes = [e for e in episodes if e.category == args.category]
    if args.latest is not None:
        episodes = episodes[:args.latest]
    return episodes


def main():
    parser = argparse.ArgumentParser(description="Build the Spooky Bitch Show episode feed")
    parser.add_argument("--out", type=Path, help="Write JSON to this file instead of stdout")
    parser.add_argument("--latest", type=int, help="Only the newest N episodes")
    parser.add_argument("--category", help="Only episodes of this category")
    parser.add_argument("--pattern", action="store_true", help="Use the regex extractor instead of lxml")
    args = parser.parse_args()

    aggregator = FeedAggregator()
    if args.pattern:
        from spooky_feed.extraction.pattern import PatternExtractor
        aggregator.extractor = PatternExtractor()

    feed = asyncio.run(aggregator.build_feed())
    episodes = select_episodes(feed, args)

    data = feed.to_dict()
    data["episodes"] = [e.to_dict() for e in episodes]
    output = json.dumps(data, indent=2, ensure_ascii=False)

    print_header("SPOOKY BITCH SHOW FEED")
    print(f"  State:    {aggregator.state.value}", file=sys.stderr)
    print(f"  Episodes: {len(episodes)} of {len(feed.episodes)}", file=sys.stderr)

    if args.out:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(output, encoding="utf-8")
        print(f"  Written:  {args.out}\n", file=sys.stderr)
    else:
        print(output)


if __name__ == "__main__":
    main()
