#!/usr/bin/env python3
"""
Fetch UMD courses from the command line:
- list courses (honoring mock mode and the cache, same as the web page)
- or look up a single course by id

Examples:
  python scripts/fetch_courses.py --limit 10
  python scripts/fetch_courses.py --course CMSC131 --json
  python scripts/fetch_courses.py --mock on
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from umd_courses.api.dependencies import build_services, load_config
from umd_courses.presentation import process_courses


class FixedMockMode:
    """Mock-mode flag pinned for a single run, bypassing the settings file."""

    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    def mock_mode_enabled(self) -> bool:
        return self.enabled


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def print_courses(courses, as_json: bool) -> None:
    if as_json:
        print(json.dumps(courses, indent=2))
        return
    if not courses:
        print("No courses available.")
        return
    for course in process_courses(courses):
        print(f"{course.get('course_id', '?'):<10} {course.get('name', '')}")
        if course.get("grading_method"):
            print(f"{'':<10} grading: {course['grading_method']}")


async def run(args: argparse.Namespace) -> int:
    cfg = load_config()
    settings = FixedMockMode(args.mock == "on") if args.mock else None
    services = build_services(cfg, settings=settings)
    client = services.client

    try:
        if args.course:
            course = await client.fetch_course(args.course)
            if course is None:
                print(f"Course {args.course} could not be fetched.", file=sys.stderr)
                return 1
            print(json.dumps(course, indent=2))
            return 0

        courses = await client.fetch_courses(args.limit)
        for notice in client.notices():
            print(f"! {notice}", file=sys.stderr)
        if client.is_mock_mode_enabled():
            print("(mock mode: showing fixture data)", file=sys.stderr)
        print_courses(courses, args.json)
        return 0
    finally:
        await services.aclose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Fetch courses from the UMD API")
    parser.add_argument("--limit", type=int, default=50, help="Number of courses to request (default: 50)")
    parser.add_argument("--course", help="Fetch a single course by id, e.g. CMSC131")
    parser.add_argument("--mock", choices=["on", "off"], help="Override the persisted mock mode flag for this run")
    parser.add_argument("--json", action="store_true", help="Print raw JSON records")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    if args.limit < 1:
        parser.error("--limit must be a positive integer")

    setup_logging(args.verbose)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
