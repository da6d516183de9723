#!/usr/bin/env python3
"""Load every data source once and print where each one came from.

Usage:
    python scripts/load_summary.py [config_dir]
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from streacs_app.config.loader import ConfigLoader
from streacs_app.data.loader import DataLoader
from streacs_app.logging import configure_logging
from streacs_app.query import DataQueries
from streacs_app.scenarios import build_vre_scenarios


def main():
    configure_logging(level="INFO")

    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    config = ConfigLoader.create(config_dir).merge_config()

    queries = DataQueries.from_loader(DataLoader(config))

    print("\n📦 Sources")
    for name, summary in queries.source_summary().items():
        print(f"  • {name}: {summary['origin']} ({summary['entries']} entries)")

    countries = queries.get_countries()
    print(f"\n🌍 {len(countries)} countries with market structure data")

    print("\n📈 VRE scenarios")
    for name, points in build_vre_scenarios(config).items():
        path = ", ".join(f"{p.year}: {p.value}" for p in points if p.year % 5 == 0)
        print(f"  • {name}: {path}")


if __name__ == "__main__":
    main()
