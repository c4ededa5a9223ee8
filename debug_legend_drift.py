import sys
from analyze_census import run_analysis
from bucketize import bucket_ranges
from errors import CensusMapError
from indicators import load_config
from join_areas import joined_frame
from labels import format_value


def run_legend_drift(config):
    """Print live bucket ranges next to the legend labels shipped in config.yaml."""
    context = run_analysis(config)
    df_areas = joined_frame(context['joined'])

    print("\n" + "="*80)
    print("LEGEND DRIFT: configured labels vs. current bucket ranges")
    print("="*80)

    for indicator in context['indicators']:
        ranges = bucket_ranges(df_areas[indicator.column], context['buckets'][indicator.name])
        print(f"\n{indicator.name}")
        for bucket, label in enumerate(indicator.legend_labels):
            if bucket in ranges.index:
                row = ranges.loc[bucket]
                live = f"{format_value(row['min'], indicator.unit)} - {format_value(row['max'], indicator.unit)} ({int(row['count'])} areas)"
            else:
                live = "empty"
            print(f"  {bucket}: {label:<22} live: {live}")


if __name__ == "__main__":
    try:
        run_legend_drift(load_config())
    except CensusMapError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
