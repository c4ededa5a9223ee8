import pandas as pd
from errors import JoinMismatch
from load_data import feature_area_id


def join_areas(df_census, geo_data, key_property):
    """Attach census rows to community area polygons by area number.

    Returns a list of GeoJSON features (new dicts, inputs untouched) in
    geometry order. Every polygon must match exactly one census row and
    vice versa, otherwise JoinMismatch is raised.
    """
    features = geo_data['features']
    geo_keys = pd.DataFrame({
        'area_id': [feature_area_id(f, key_property) for f in features],
        'feature_pos': range(len(features)),
    })

    duplicates = set(geo_keys['area_id'][geo_keys['area_id'].duplicated()])
    duplicates |= set(df_census.index[df_census.index.duplicated()])
    if duplicates:
        raise JoinMismatch(duplicates=duplicates)

    table = df_census.rename_axis('area_id').reset_index()
    merged = geo_keys.merge(table, on='area_id', how='outer', indicator=True)

    missing_in_table = merged.loc[merged['_merge'] == 'left_only', 'area_id']
    missing_in_geometry = merged.loc[merged['_merge'] == 'right_only', 'area_id']
    if not missing_in_table.empty or not missing_in_geometry.empty:
        raise JoinMismatch(
            missing_in_table=set(int(a) for a in missing_in_table),
            missing_in_geometry=set(int(a) for a in missing_in_geometry),
        )

    value_cols = [c for c in df_census.columns if c != 'area_name']
    joined = []
    for row in merged.sort_values('feature_pos').to_dict('records'):
        source = features[int(row['feature_pos'])]
        properties = dict(source.get('properties') or {})
        properties['area_id'] = int(row['area_id'])
        properties['area_name'] = row['area_name']
        for col in value_cols:
            properties[col] = float(row[col])
        joined.append({
            'type': 'Feature',
            'geometry': source['geometry'],
            'properties': properties,
        })

    print(f"   Joined {len(joined)} community areas to census rows.")
    return joined


def joined_frame(joined):
    """Tabular view of joined features, indexed by area_id."""
    return pd.DataFrame([f['properties'] for f in joined]).set_index('area_id')
