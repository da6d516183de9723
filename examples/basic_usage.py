#!/usr/bin/env python3
"""
Basic Usage Example - STREACS Data Layer

This script demonstrates the basic usage of the STREACS data layer. It shows
how to:
- Load every data source once per session
- Query market codes along the map timeline
- Build a country profile and the Armenia case study
- Compare countries in a given year

Run: python examples/basic_usage.py
"""

from streacs_app.analysis import ArmeniaCaseStudy, CountryComparison
from streacs_app.config.loader import ConfigLoader
from streacs_app.data.loader import DataLoader
from streacs_app.logging import configure_logging
from streacs_app.query import DataQueries


def print_profile(queries: DataQueries, country: str, year: int) -> None:
    """Print the country profile panel for one country."""
    code = queries.get_market_code(country, year)
    regulator = queries.get_regulator(country)
    ipp = queries.get_ipp(country)

    print(f"📊 {country} ({year})")
    print(f"  Market: {queries.get_market_label(code)} [{code.value if code else '-'}]")
    print(f"  Liberalization score: {queries.get_liberalization_score(code)}")
    print(f"  Regulator: {regulator.name if regulator else 'N/A'}")
    print(f"  First IPP: {ipp.year_first_ipp if ipp else 'N/A'} "
          f"({queries.get_ipp_type_label(country)})")
    vre = queries.get_vre_value(country, year)
    print(f"  Solar + wind share: {vre if vre is not None else 'N/A'}%")
    for change in queries.get_market_evolution(country):
        print(f"    {change.year}: {change.label}")
    print()


def main():
    """Main demo function."""
    configure_logging(level="WARNING")

    print("🚀 STREACS Data Layer - Basic Usage Demo")
    print("=" * 60)

    print("1. Loading data sources...")
    config = ConfigLoader.create().merge_config()
    loader = DataLoader(config)
    queries = DataQueries.from_loader(loader)
    for name, summary in queries.source_summary().items():
        print(f"   {name}: {summary['origin']} ({summary['entries']} entries)")
    print()

    print("2. Timeline for Armenia...")
    timeline = config["timeline"]
    for year in range(timeline["start_year"], timeline["end_year"] + 1, 5):
        code = queries.get_market_code("Armenia", year)
        print(f"   {year}: {queries.get_market_label(code)} "
              f"{queries.get_market_color(code)}")
    print()

    print("3. Country profile...")
    print_profile(queries, "Armenia", 2024)

    print("4. Armenia case study...")
    study = ArmeniaCaseStudy.from_config(queries, config)
    for point in study.combined_series():
        print(f"   {point.year}: VRE {point.vre_share}% / score {point.liberalization_score}")
    for milestone in study.milestones():
        print(f"   {milestone.year} - {milestone.event}")
    print()

    print("5. Comparison...")
    comparison = CountryComparison(queries, ["Armenia", "Georgia", "Chile"])
    for row in comparison.rows():
        print(f"   {row.country:<12} score {row.score}  VRE {row.vre_share}%  {row.label}")

    print("\n✅ Demo completed successfully!")


if __name__ == "__main__":
    main()
