#!/usr/bin/env python3
"""
CLI for a one-off stats pass over the clip store.

Usage:
    uv run python scripts/refresh_stats.py
    uv run python scripts/refresh_stats.py --json --clips-file ./clips.json
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from clipstats.core.config import get_settings
from clipstats.core.store import ClipStore, ClipStoreError, get_clip_store
from clipstats.models.clip import ClipperSummary
from clipstats.services.stats import StatsService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


async def main():
    parser = argparse.ArgumentParser(
        description="Fetch fresh clip stats and rank clippers by views"
    )
    parser.add_argument(
        "--clips-file",
        type=Path,
        default=None,
        help="Clip store JSON file (default: CLIPS_FILE setting)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output raw JSON instead of formatted text",
    )

    args = parser.parse_args()

    settings = get_settings()
    store = ClipStore(args.clips_file) if args.clips_file else get_clip_store()
    service = StatsService.from_settings(settings, store)

    try:
        summaries = await service.by_clipper()
    except ClipStoreError as e:
        logging.error(f"Stats pass failed: {e}")
        print(f"\nError: {e}")
        sys.exit(1)

    if args.json:
        print(json.dumps([s.to_dict() for s in summaries], indent=2))
    else:
        print_ranking(summaries)


def print_ranking(summaries: list[ClipperSummary]):
    """Pretty print the clipper ranking."""
    print(f"\n{'='*60}")
    print("CLIPPER RANKING")
    print(f"{'='*60}")

    if not summaries:
        print("  No clips tracked yet.\n")
        return

    for i, summary in enumerate(summaries, 1):
        platforms = ", ".join(f"{p}: {n}" for p, n in summary.platforms.items())
        print(f"\n{i}. {summary.clipper} ({summary.total_clips} clips; {platforms})")
        print(
            f"   👁 {summary.total_views:,} | ❤️ {summary.total_likes:,} | "
            f"💬 {summary.total_comments:,} | 🔁 {summary.total_shares:,}"
        )
        for item in summary.clips:
            if item.stats.error:
                print(f"   ⚠️ {item.clip.url}: {item.stats.error}")

    print("\n")


if __name__ == "__main__":
    asyncio.run(main())
