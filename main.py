import argparse
import json
from pathlib import Path

from backend.app import app as flask_app
from src.airline_names import canonicalize_airline
from src.city_names import canonical_city
from src.config import Settings
from src.fetch import fetch_page
from src.logging_setup import setup_logging
from src.scraper import run_scrape
from src.store import JsonFileStore

# Expose Flask app for serverless platforms expecting `app`.
app = flask_app


def parse_args():
    parser = argparse.ArgumentParser(
        description="Scrape the AENA PMI listings and publish the canonical airport/airline catalog."
    )
    parser.add_argument(
        "--snapshot-dir",
        type=str,
        help="Directory for the JSON snapshot store (defaults to SNAPSHOT_DIR or ./snapshots)."
    )
    parser.add_argument(
        "--destinations-html",
        type=str,
        help="Read the destinations page from a saved HTML file instead of fetching it."
    )
    parser.add_argument(
        "--airlines-html",
        type=str,
        help="Read the airlines page from a saved HTML file instead of fetching it."
    )
    parser.add_argument(
        "--city",
        action="append",
        help="Print the canonical form of a raw destination label and exit. Repeatable."
    )
    parser.add_argument(
        "--airline",
        action="append",
        help="Print the canonical form of a raw airline label and exit. Repeatable."
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full canonical result as JSON instead of a summary."
    )
    return parser.parse_args()


def saved_page_fetcher(settings, destinations_html=None, airlines_html=None):
    """Serve pages from local files where given; other URLs go through the normal fetcher."""
    overrides = {}
    if destinations_html:
        overrides[settings.destinations_url] = Path(destinations_html)
    if airlines_html:
        overrides[settings.airlines_url] = Path(airlines_html)

    def fetch(url, **kwargs):
        path = overrides.get(url)
        if path is None:
            return fetch_page(url, **kwargs)
        return path.read_text(encoding="utf-8")

    return fetch


def print_canonical_labels(cities, airlines):
    for label in cities or []:
        print(f"{label!r} -> {canonical_city(label).display_label!r}")
    for label in airlines or []:
        print(f"{label!r} -> {canonicalize_airline(label)!r}")


def print_summary(run):
    canonical = run.canonical
    print(f"Scrape for {canonical['airport']} at {canonical['generated_at']}")
    print(f"Airports: {len(canonical['airports'])}")
    print(f"Airlines: {len(canonical['airlines'])}")
    print(f"Routes (airlines page): {len(run.raw['routes'])}")
    if run.errors:
        print("Errors:")
        for error in run.errors:
            print(f"- {error}")


def main():
    args = parse_args()

    if args.city or args.airline:
        print_canonical_labels(args.city, args.airline)
        return

    setup_logging()
    settings = Settings.from_env()
    snapshot_dir = Path(args.snapshot_dir) if args.snapshot_dir else settings.snapshot_dir
    store = JsonFileStore(snapshot_dir)
    fetch = saved_page_fetcher(settings, args.destinations_html, args.airlines_html)

    run = run_scrape(store, settings, fetch=fetch)

    if args.json:
        print(json.dumps(run.canonical, ensure_ascii=False, indent=2))
    else:
        print_summary(run)
        print(f"Snapshot written to {snapshot_dir} ({run.date_key})")


if __name__ == "__main__":
    main()
