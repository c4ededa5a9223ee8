"""
Shared fixtures: the real config.yaml plus small synthetic census tables
and community area FeatureCollections (no network, no downloaded files).
"""

import os
import pytest
import pandas as pd
from indicators import load_config, load_indicators

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

AREA_NAMES = [
    "Rogers Park", "West Ridge", "Uptown", "Lincoln Square", "North Center",
    "Lake View", "Lincoln Park", "Near North Side", "Edison Park", "Norwood Park",
]


@pytest.fixture
def config():
    return load_config(os.path.join(ROOT, 'config.yaml'))


@pytest.fixture
def indicators(config):
    return load_indicators(config)


def make_census_frame(indicators, area_ids, with_summary_row=False):
    rows = []
    for pos, area_id in enumerate(area_ids):
        row = {
            "Community Area Number": area_id,
            "COMMUNITY AREA NAME": AREA_NAMES[pos % len(AREA_NAMES)],
        }
        for k, indicator in enumerate(indicators):
            row[indicator.column] = float(pos + 1) * (k + 1) + 0.5
        rows.append(row)
    if with_summary_row:
        summary = {"Community Area Number": None, "COMMUNITY AREA NAME": "CHICAGO"}
        summary.update({i.column: 1.0 for i in indicators})
        rows.append(summary)
    return pd.DataFrame(rows)


def make_feature_collection(area_ids):
    features = []
    for area_id in area_ids:
        x = -87.7 + area_id * 0.01
        features.append({
            "type": "Feature",
            "geometry": {
                "type": "Polygon",
                "coordinates": [[[x, 41.8], [x + 0.01, 41.8], [x + 0.01, 41.81], [x, 41.81], [x, 41.8]]],
            },
            "properties": {"area_numbe": str(area_id), "community": f"AREA {area_id}"},
        })
    return {"type": "FeatureCollection", "features": features}


@pytest.fixture
def area_ids():
    return list(range(1, 11))


@pytest.fixture
def raw_census(indicators, area_ids):
    return make_census_frame(indicators, area_ids, with_summary_row=True)


@pytest.fixture
def census(raw_census, indicators, config):
    from load_data import clean_census_table
    return clean_census_table(raw_census, indicators, config['columns'])


@pytest.fixture
def geo_data(area_ids):
    # Geometry order differs from table order on purpose
    return make_feature_collection(list(reversed(area_ids)))


@pytest.fixture
def joined(census, geo_data):
    from join_areas import join_areas
    return join_areas(census, geo_data, 'area_numbe')
