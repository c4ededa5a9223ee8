import folium
from labels import build_labels
from join_areas import joined_frame
from legend import LegendController, LegendSwitcher, MapSession, legend_specs


def build_layer_features(joined, indicator, buckets, labels):
    """FeatureCollection for one indicator layer.

    Each feature keeps its polygon and gains fill_color, label and group.
    """
    features = []
    for feature in joined:
        area_id = feature['properties']['area_id']
        features.append({
            'type': 'Feature',
            'geometry': feature['geometry'],
            'properties': {
                'area_id': area_id,
                'area_name': feature['properties']['area_name'],
                'fill_color': buckets.loc[area_id, 'color'],
                'bucket': int(buckets.loc[area_id, 'bucket']),
                'label': labels[area_id],
                'group': indicator.name,
            },
        })
    return {'type': 'FeatureCollection', 'features': features}


def build_map(joined, indicators, buckets, colors, config):
    print("Generating Interactive Map...")
    map_cfg = config['map']
    df_areas = joined_frame(joined)

    m = folium.Map(
        location=map_cfg['center'], zoom_start=map_cfg['zoom'],
        min_zoom=map_cfg['zoom'], max_zoom=map_cfg['zoom'],
        zoom_control=False, dragging=False, tiles=None,
    )
    folium.TileLayer(map_cfg['tiles'], name='Base Map', control=False).add_to(m)

    fill_opacity = map_cfg.get('fill_opacity', 0.5)

    def style(feature):
        return {
            'fillColor': feature['properties']['fill_color'],
            'fillOpacity': fill_opacity,
            'color': 'white',
            'weight': 1,
        }

    def highlight(feature):
        return {'color': 'black', 'weight': 6}

    for i, indicator in enumerate(indicators):
        layer = build_layer_features(joined, indicator, buckets[indicator.name], build_labels(df_areas, indicator))
        group = folium.FeatureGroup(name=indicator.name, overlay=False, show=(i == 0))
        folium.GeoJson(
            layer,
            style_function=style,
            highlight_function=highlight,
            smooth_factor=map_cfg.get('smooth_factor', 0.3),
            tooltip=folium.GeoJsonTooltip(fields=['label'], labels=False, style="font-size: 15px; font-weight: normal;"),
        ).add_to(group)
        group.add_to(m)

    folium.LayerControl(collapsed=False, position='topright').add_to(m)

    title_html = f"""
    <div id="map-title" style="
        position: absolute; top: 12px; left: 12px; z-index: 9999;
        background-color: rgba(255, 255, 255, 0.95); padding: 6px 12px;
        border-radius: 6px; font-family: sans-serif; font-size: 16px; font-weight: bold;
        box-shadow: 0 1px 6px rgba(0, 0, 0, 0.3);
    ">{map_cfg.get('title', 'Census Data')}</div>
    """
    m.get_root().html.add_child(folium.Element(title_html))

    # First base layer is visible on load, so its legend is the initial one
    controller = LegendController(legend_specs(indicators, colors))
    session = MapSession()
    controller.handle_layer_change(session, indicators[0].name)
    LegendSwitcher(controller, session).add_to(m)

    return m
