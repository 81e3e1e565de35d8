import argparse
import sys
from dataclasses import replace
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from ipo_tracker.compute.aggregate import ALL_NEWS, ALL_SECTORS
from ipo_tracker.compute.dashboard import build_dashboard
from ipo_tracker.compute.refresh import refresh_state
from ipo_tracker.config import load_config


def main() -> None:
    p = argparse.ArgumentParser(
        description="Fetch IPO + angel records once and print the dashboard lists and news feed."
    )
    p.add_argument("--sector", type=str, default=ALL_SECTORS, help='Company sector filter (default: "All")')
    p.add_argument("--news-sector", type=str, default=ALL_NEWS, help='News sector filter (default: "all")')
    p.add_argument(
        "--mode",
        choices=["local", "http"],
        default=None,
        help="Record Source mode (default: RECORD_SOURCE_MODE)",
    )
    p.add_argument("--base-url", type=str, default=None, help="Record Source base URL for --mode http")
    args = p.parse_args()

    cfg = load_config()
    if args.mode:
        cfg = replace(cfg, RECORD_SOURCE_MODE=args.mode)
    if args.base_url:
        cfg = replace(cfg, RECORD_SOURCE_BASE_URL=args.base_url)

    state = refresh_state(None, cfg)
    if state.snapshot is None:
        print(f"ERROR: {state.error}")
        raise SystemExit(1)

    view = build_dashboard(state.snapshot, sector=args.sector, news_sector=args.news_sector)

    print(f"Sectors: {', '.join(view['sectors'])}")
    print(f"Last updated: {state.last_updated}")

    print(f"\nUpcoming IPOs ({view['counts']['ipos']}):")
    for c in view["ipos"]:
        print(
            f"  {c['name']:<28} {c['sector']:<14} {c['stage'] or '-':<10} "
            f"risk={c['risk'] or '-':<12} debut={c['expectedDebutDateDisplay']}"
        )

    print(f"\nAngel investments ({view['counts']['angels']}):")
    for c in view["angels"]:
        print(f"  {c['name']:<28} {c['sector']:<14} {c['stage'] or '-':<10} risk={c['risk'] or '-'}")

    print(f"\nNews ({view['counts']['news']} of {view['counts']['news_total']}):")
    for n in view["news"]:
        print(f"  {n['displayDate']:<13} [{n['sector']}] {n['company']}: {n['title']}")


if __name__ == "__main__":
    main()
