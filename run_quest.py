"""
Main Execution Script for Pirate's Quest.

Shows a group's dashboard or the GameMaster overview, and applies
GameMaster actions (toggle a station, reset a group, reset everything).

Run with: python run_quest.py --group 3
GM view:  python run_quest.py --gamemaster
Toggle:   python run_quest.py --complete 3 mermaids-lagoon --gamemaster
Watch:    python run_quest.py --group 3 --watch
"""

import argparse
import logging
import sys
import time
from datetime import datetime
from typing import List, Optional

from dataset import load_quest_config
from models import parse_clock
from quest import Dashboard, PartialBulkFailure, ProgressTracker
from quest.config import get_settings
from store import create_store

logger = logging.getLogger("Main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pirate's Quest schedule and progress console")
    parser.add_argument("--group", type=int, help="Show this group's dashboard")
    parser.add_argument("--gamemaster", action="store_true", help="Show all groups' progress")
    parser.add_argument("--complete", nargs=2, metavar=("GROUP", "ACTIVITY_ID"),
                        help="Toggle a station's completion for a group")
    parser.add_argument("--reset", type=int, metavar="GROUP", help="Reset one group's progress")
    parser.add_argument("--reset-all", action="store_true", help="Reset every group's progress")
    parser.add_argument("--at", metavar="HH:MM", help="Pretend the clock shows this time")
    parser.add_argument("--watch", action="store_true", help="Re-render the dashboard on every clock tick")
    return parser


def print_dashboard(view: Dashboard) -> None:
    print("\n" + "=" * 50)
    print(f"🧭 GROUP {view.group_id} SCHEDULE - {view.group_name}")
    print("=" * 50)
    for entry in view.itinerary:
        marks = ""
        if entry.is_completed:
            marks += " ✅"
        if entry.is_active:
            marks += " ⏳ Active Now"
        pointer = "➤" if view.selected == entry else " "
        print(f"{pointer} {entry.time_slot:<14} {entry.activity.badge:<12} {entry.activity.theme} @ {entry.activity.location}{marks}")

    print(f"\n🏆 Activities Completed: {view.progress.completed_count}/{view.progress.total_count}")
    covered = [loc for loc, is_covered in view.fog_of_war.items() if is_covered]
    print(f"🗺️  Still under fog: {', '.join(covered) if covered else 'none'}")
    for notice in view.notices:
        print(f"⚠️  {notice}")


def print_overview(tracker: ProgressTracker, now: Optional[datetime]) -> None:
    print("\n" + "=" * 50)
    print(f"🛡️  GAMEMASTER - ALL GROUPS PROGRESS ({tracker.clock(now)})")
    print("=" * 50)
    for row in tracker.overview():
        print(f"#{row.group_id:<3} {row.group_name:<26} "
              f"{row.progress.completed_count}/{row.progress.total_count} ({row.progress.percentage:.0f}%)")
        for label in row.completed_stations:
            print(f"       ✅ {label}")
    for notice in tracker.notices:
        print(f"⚠️  {notice}")


def resolve_now(at: Optional[str]) -> Optional[datetime]:
    if not at:
        return None
    return datetime.combine(datetime.now().date(), parse_clock(at))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    config = load_quest_config()
    tracker = ProgressTracker(config, create_store(settings))
    tracker.refresh()
    now = resolve_now(args.at)

    # --- GameMaster actions ---
    exit_code = 0
    try:
        if args.complete:
            group_id, activity_id = int(args.complete[0]), args.complete[1]
            done = tracker.toggle(group_id, activity_id)
            print(f"Group {group_id}: {activity_id} {'completed' if done else 'reopened'}")
        if args.reset is not None:
            tracker.reset_group(args.reset)
            print(f"Group {args.reset} reset")
        if args.reset_all:
            tracker.reset_all()
            print("All groups reset")
    except PartialBulkFailure as e:
        logger.error(f"❌ {e}")
        exit_code = 1
    except ValueError as e:
        logger.error(f"❌ {e}")
        return 1

    # --- Views ---
    if args.gamemaster:
        print_overview(tracker, now)

    if args.group is None:
        return exit_code

    if args.group not in config.group_ids:
        logger.error(f"❌ Group {args.group} is not on the roster")
        return 1

    while True:
        print_dashboard(tracker.dashboard(args.group, now))
        if not args.watch:
            return exit_code
        time.sleep(settings.refresh_interval_seconds)
        tracker.refresh()


if __name__ == "__main__":
    sys.exit(main())
