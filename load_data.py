import json
import pandas as pd
from errors import JoinMismatch, MalformedNumeric, MissingField


def load_census_table(path, indicators, columns):
    """Read the census CSV into a DataFrame indexed by area_id.

    The result has an ``area_name`` column plus one float column per
    indicator, named after the indicator's source column. The citywide
    summary row (no area number) is dropped.
    """
    print(f"Loading census table from {path}...")
    df = pd.read_csv(path)
    return clean_census_table(df, indicators, columns, source=path)


def clean_census_table(df, indicators, columns, source='census table'):
    df = df.rename(columns=lambda c: str(c).strip())

    number_col = columns['area_number']
    name_col = columns['area_name']
    required = [number_col, name_col] + [i.column for i in indicators]
    for col in required:
        if col not in df.columns:
            raise MissingField(col, source)

    df = df[required].copy()

    # The public export ends with a "CHICAGO" total that has no area number
    summary_rows = df[number_col].isna()
    if summary_rows.any():
        dropped = ", ".join(df.loc[summary_rows, name_col].astype(str))
        print(f"   Dropping {summary_rows.sum()} row(s) without an area number ({dropped})")
        df = df[~summary_rows]

    area_ids = pd.to_numeric(df[number_col], errors='coerce')
    bad_ids = area_ids.isna() | (area_ids % 1 != 0)
    if bad_ids.any():
        raise MalformedNumeric(number_col, df.loc[bad_ids, number_col].tolist())
    df['area_id'] = area_ids.astype(int)

    repeated = df['area_id'][df['area_id'].duplicated()]
    if not repeated.empty:
        raise JoinMismatch(duplicates=set(repeated))

    for indicator in indicators:
        values = pd.to_numeric(df[indicator.column], errors='coerce')
        if values.isna().any():
            raise MalformedNumeric(indicator.column, df.loc[values.isna(), name_col].tolist())
        df[indicator.column] = values.astype(float)

    df = df.rename(columns={name_col: 'area_name'})
    df['area_name'] = df['area_name'].astype(str).str.strip()
    return df.set_index('area_id')[['area_name'] + [i.column for i in indicators]]


def load_community_areas(path, key_property):
    print(f"Loading community area boundaries from {path}...")
    with open(path, 'r') as f:
        geo_data = json.load(f)
    validate_feature_collection(geo_data, key_property, source=path)
    return geo_data


def validate_feature_collection(geo_data, key_property, source='GeoJSON'):
    if not isinstance(geo_data, dict) or not isinstance(geo_data.get('features'), list):
        raise MissingField('features', source)

    for feature in geo_data['features']:
        props = feature.get('properties') or {}
        if key_property not in props:
            raise MissingField(key_property, source)
        feature_area_id(feature, key_property)


def feature_area_id(feature, key_property):
    raw = feature['properties'][key_property]
    try:
        as_float = float(raw)
    except (TypeError, ValueError):
        raise MalformedNumeric(key_property, [raw])
    if not as_float.is_integer():
        raise MalformedNumeric(key_property, [raw])
    return int(as_float)
