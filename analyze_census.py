from bucketize import bucketize_all, gradient
from indicators import load_indicators
from join_areas import join_areas, joined_frame
from load_data import load_census_table, load_community_areas


def run_analysis(config):
    """Load, join and bucketize both sources. Raises CensusMapError on bad data."""
    indicators = load_indicators(config)
    columns = config['columns']

    df_census = load_census_table(config['files']['census_csv'], indicators, columns)
    geo_data = load_community_areas(config['files']['community_areas_geojson'], columns['geojson_area_number'])

    joined = join_areas(df_census, geo_data, columns['geojson_area_number'])
    df_areas = joined_frame(joined)

    start, end = config['map']['gradient']
    colors = gradient(start, end)
    buckets = bucketize_all(df_areas, indicators, colors)

    print_summary(df_areas, indicators, buckets, len(colors))

    return {
        'joined': joined,
        'indicators': indicators,
        'buckets': buckets,
        'colors': colors,
    }


def print_summary(df_areas, indicators, buckets, n_buckets):
    print("\n" + "="*80)
    print(f"CHICAGO COMMUNITY AREAS: {len(df_areas)} areas, {len(indicators)} indicators")
    print("="*80)
    for indicator in indicators:
        values = df_areas[indicator.column]
        sizes = buckets[indicator.name]['bucket'].value_counts().sort_index()
        size_text = " / ".join(str(sizes.get(b, 0)) for b in range(n_buckets))
        print(f"{indicator.name:<50} min {values.min():>10,.1f}  max {values.max():>10,.1f}  buckets {size_text}")
    print("="*80 + "\n")
