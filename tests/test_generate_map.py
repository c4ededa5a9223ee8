"""
Map rendering tests: per-layer features and the folium document.
"""

import folium
import pytest
from bucketize import bucketize_all, gradient
from generate_map import build_layer_features, build_map
from join_areas import joined_frame
from labels import build_labels


@pytest.fixture
def colors():
    return gradient()


@pytest.fixture
def buckets(joined, indicators, colors):
    return bucketize_all(joined_frame(joined), indicators, colors)


class TestLayerFeatures:

    def test_layer_carries_render_contract(self, joined, indicators, buckets):
        indicator = indicators[0]
        labels = build_labels(joined_frame(joined), indicator)
        layer = build_layer_features(joined, indicator, buckets[indicator.name], labels)

        assert layer['type'] == 'FeatureCollection'
        assert len(layer['features']) == len(joined)
        for feature, source in zip(layer['features'], joined):
            props = feature['properties']
            assert feature['geometry'] == source['geometry']
            assert props['group'] == indicator.name
            assert props['fill_color'] == buckets[indicator.name].loc[props['area_id'], 'color']
            assert props['label'] == labels[props['area_id']]

    def test_darkest_color_on_highest_value(self, joined, indicators, buckets, colors):
        indicator = indicators[0]
        df = joined_frame(joined)
        layer = build_layer_features(joined, indicator, buckets[indicator.name], build_labels(df, indicator))
        top_area = df[indicator.column].idxmax()
        top = next(f for f in layer['features'] if f['properties']['area_id'] == top_area)
        assert top['properties']['fill_color'] == colors[-1]
        assert top['properties']['bucket'] == 4


class TestBuildMap:

    def test_one_base_layer_per_indicator(self, joined, indicators, buckets, colors, config):
        m = build_map(joined, indicators, buckets, colors, config)
        groups = [c for c in m._children.values() if isinstance(c, folium.FeatureGroup)]
        assert [g.layer_name for g in groups] == [i.name for i in indicators]
        assert not any(g.overlay for g in groups)

    def test_rendered_page(self, joined, indicators, buckets, colors, config):
        m = build_map(joined, indicators, buckets, colors, config)
        html = m.get_root().render()
        assert "baselayerchange" in html
        assert "Census Data" in html
        assert "7.5 - 15.8%" in html
        for indicator in indicators:
            assert indicator.name in html

    def test_save(self, tmp_path, joined, indicators, buckets, colors, config):
        out = tmp_path / "map.html"
        build_map(joined, indicators, buckets, colors, config).save(str(out))
        assert out.stat().st_size > 0
