import argparse
import webbrowser
import os
import sys
from analyze_census import run_analysis
from download import download_sources
from errors import CensusMapError
from generate_map import build_map
from indicators import load_config


def main(argv=None):
    parser = argparse.ArgumentParser(description="Chicago Census Choropleth Map")
    parser.add_argument('--download', action='store_true', help="Download the census CSV and community area boundaries first")
    parser.add_argument('--config', default='config.yaml', help="Path to the YAML config")
    parser.add_argument('--output', help="Where to write the map HTML (overrides config)")
    parser.add_argument('--no-browser', action='store_true', help="Do not automatically open the browser at the end")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    output_file = args.output or config['files']['output_map_html']

    try:
        if args.download:
            download_sources(config)

        context = run_analysis(config)
        m = build_map(context['joined'], context['indicators'], context['buckets'], context['colors'], config)
    except CensusMapError as e:
        print(f"ERROR: {e}")
        return 1

    m.save(output_file)
    print(f"✅ Map saved to {output_file}")

    if not args.no_browser:
        webbrowser.open('file://' + os.path.realpath(output_file))
    return 0


if __name__ == "__main__":
    sys.exit(main())
