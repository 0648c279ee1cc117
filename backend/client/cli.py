#!/usr/bin/env python3
"""
Command-line front end for the Event Discovery API.

Usage:
    events-cli list                          # all events, nearest first if located
    events-cli list --location miami --unit mi
    events-cli list --search meetup --no-sort
    events-cli show 3
    events-cli create --title "Book Club" --location Boston \\
        --date 2025-12-01T19:00:00 --max-participants 12
    events-cli create --title "Pop-up Market" --location "Here" \\
        --date 2025-12-06T10:00:00 --max-participants 40 --here
    events-cli register 3
    events-cli health

Connection and location settings come from the environment (see
client/config.py) and can be overridden per call with the global flags.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from client.api import EventsAPIError
from client.browser import EventBrowser
from client.config import ClientSettings
from core.logging import configure_logging
from geo.distance import UNITS, format_distance
from schemas.event import EventResponse


def _event_line(event: EventResponse, unit: str) -> str:
    line = (
        f"#{event.id:<3} {event.title} | {event.location} | {event.date} | "
        f"{event.current_participants}/{event.max_participants}"
    )
    distance = getattr(event, "distance", None)
    if distance is not None:
        line += f" | {format_distance(distance, unit)}"
    return line


def _print_event(event: EventResponse, unit: str) -> None:
    print(event.title)
    print(f"  id:           {event.id}")
    print(f"  when:         {event.date}")
    print(f"  where:        {event.location}")
    if event.has_coordinates:
        print(f"  coordinates:  {event.latitude}, {event.longitude}")
    distance = getattr(event, "distance", None)
    if distance is not None:
        print(f"  distance:     {format_distance(distance, unit)}")
    status = "FULL" if event.spots_left == 0 else f"{event.spots_left} left"
    print(f"  participants: {event.current_participants}/{event.max_participants} ({status})")
    if event.description:
        print(f"  about:        {event.description}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="events-cli", description="Browse and book events")
    parser.add_argument("--api-url", help="Base URL of the events API (default: $API_URL)")
    parser.add_argument(
        "--location-provider",
        choices=["ip", "fixed", "none"],
        help="Where the user's position comes from (default: $LOCATION_PROVIDER)",
    )
    parser.add_argument("--lat", type=float, help="Latitude for the fixed provider")
    parser.add_argument("--lon", type=float, help="Longitude for the fixed provider")
    parser.add_argument("--log-level", default="ERROR", help="Log level (default: ERROR)")

    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List events")
    p_list.add_argument("--location", help="Filter by location (partial, case-insensitive)")
    p_list.add_argument("--search", help="Search title, description and location")
    p_list.add_argument("--no-sort", action="store_true", help="Keep server order even when located")
    p_list.add_argument("--unit", choices=UNITS, default="km")

    p_show = sub.add_parser("show", help="Show one event")
    p_show.add_argument("event_id")
    p_show.add_argument("--unit", choices=UNITS, default="km")

    p_create = sub.add_parser("create", help="Create an event")
    p_create.add_argument("--title", required=True)
    p_create.add_argument("--location", required=True)
    p_create.add_argument("--date", required=True, help="ISO-8601 timestamp, stored as given")
    p_create.add_argument("--max-participants", required=True, type=int)
    p_create.add_argument("--description", default="")
    p_create.add_argument("--latitude", type=float)
    p_create.add_argument("--longitude", type=float)
    p_create.add_argument(
        "--here", action="store_true", help="Use your current location for the coordinates"
    )

    p_register = sub.add_parser("register", help="Register for an event")
    p_register.add_argument("event_id")

    sub.add_parser("health", help="Check the API is up")
    return parser


def _settings_from_args(args: argparse.Namespace) -> ClientSettings:
    overrides = {}
    if args.api_url:
        overrides["api_url"] = args.api_url
    if args.location_provider:
        overrides["location_provider"] = args.location_provider
    if args.lat is not None and args.lon is not None:
        overrides["location_latitude"] = args.lat
        overrides["location_longitude"] = args.lon
        overrides.setdefault("location_provider", "fixed")
    return ClientSettings(**overrides)


def run(args: argparse.Namespace, browser: EventBrowser) -> int:
    """Execute one parsed command. Returns the process exit code."""
    if args.command == "list":
        listing = browser.load_events(
            location=args.location,
            search=args.search,
            sort_by_distance=False if args.no_sort else None,
        )
        if listing.error:
            print(f"Error: {listing.error}", file=sys.stderr)
            return 1
        if not listing.events:
            print("No events found.")
        for event in listing.events:
            print(_event_line(event, args.unit))
        return 0

    if args.command == "show":
        result = browser.load_event(args.event_id)
        if result.error:
            print(f"Error: {result.error}", file=sys.stderr)
            return 1
        _print_event(result.event, args.unit)
        return 0

    if args.command == "create":
        result = browser.create_event({
            "title": args.title,
            "description": args.description,
            "location": args.location,
            "latitude": args.latitude,
            "longitude": args.longitude,
            "date": args.date,
            "max_participants": args.max_participants,
        }, use_current_location=args.here)
    elif args.command == "register":
        result = browser.register(args.event_id)
    elif args.command == "health":
        try:
            status = browser.api.health()
        except EventsAPIError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return 1
        print(f"{status.get('status')} at {status.get('timestamp')}")
        return 0
    else:
        raise ValueError(f"unknown command {args.command!r}")

    if result.error:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1
    print(f"{result.message}: #{result.event.id} {result.event.title} "
          f"({result.event.current_participants}/{result.event.max_participants})")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level, stream=sys.stderr)
    with EventBrowser.from_settings(_settings_from_args(args)) as browser:
        return run(args, browser)


if __name__ == "__main__":
    sys.exit(main())
