"""
Showcase 01: FredClient with Live FRED Data

This showcase walks through the main endpoint families with real data:
1. Browse the category tree (Trade Balance, id 125)
2. Look up a series and its observations (GNPCA)
3. List geography tags
4. Walk a release table tree (Personal consumption expenditures)

Requirements:
- FRED API key in environment or .env (FRED_API_KEY)
- Internet connection for API calls

Status: Live smoke test with real FRED data
"""

import sys
from datetime import date

print("=" * 80)
print("SHOWCASE 01: FredClient with Live FRED Data")
print("=" * 80)

# === Step 1: Setup ===

print("\n[Step 1] Importing modules and setup...")
from fred_xml import FredClient
from fred_xml.config import get_app_config
from fred_xml.errors import FredError
from fred_xml.models.requests import (
    CategoryParameters,
    CategorySeriesParameters,
    ObservationParameters,
    ReleaseTablesParameters,
    SeriesParameters,
    TagsParameters,
)
from fred_xml.types import SeriesOrderBy, SortOrder, TagGroupId

config = get_app_config()

print(f"  Base URL: {config.fred_base_url}")
print(f"  Timeout: {config.fred_request_timeout or 'none'}")

if not config.fred_api_key:
    print("\n❌ ERROR: FRED_API_KEY not found!")
    print("   Please set FRED_API_KEY in your .env file")
    print("   Configuration is loaded via config.get_app_config()")
    sys.exit(1)

try:
    with FredClient() as client:

        # === Step 2: Categories ===

        print("\n[Step 2] Browsing categories...")
        category = client.get_category(CategoryParameters(id=125))
        print(f"  ✓ {category.id}: {category.name} (parent {category.parent_id})")

        top_series = client.get_category_series(
            CategorySeriesParameters(
                id=125,
                limit=5,
                order_by=SeriesOrderBy.POPULARITY,
                sort_order=SortOrder.DESCENDING
            )
        )
        for series in top_series:
            print(f"    - {series.id:<12} {series.title}")

        # === Step 3: Series and observations ===

        print("\n[Step 3] Fetching series GNPCA...")
        series = client.get_series(SeriesParameters(id='GNPCA'))
        print(f"  ✓ {series.title} [{series.units_short}], updated {series.last_updated_at:%Y-%m-%d}")

        observations = client.get_series_observations(
            ObservationParameters(id='GNPCA', observation_start=date(2015, 1, 1))
        )
        for observation in observations:
            value = 'missing' if observation.is_missing else f"{observation.value:,.1f}"
            print(f"    {observation.date}: {value}")

        # === Step 4: Tags ===

        print("\n[Step 4] Listing geography tags...")
        tags = client.get_tags(TagsParameters(group_id=TagGroupId.GEOGRAPHY, limit=10))
        print(f"  ✓ {', '.join(t.name for t in tags)}")

        # === Step 5: Release tables ===

        print("\n[Step 5] Walking release table 53/12886...")
        elements = client.get_release_tables(ReleaseTablesParameters(id=53, element_id=12886))
        for element in elements:
            for node in element.walk():
                print(f"    {'  ' * node.level}{node.name}")

except FredError as e:
    print(f"\n❌ ERROR: {type(e).__name__}: {e}")
    sys.exit(1)

print("\n" + "=" * 80)
print("✓ SHOWCASE 01 COMPLETE")
print("=" * 80)
