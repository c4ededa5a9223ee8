import json
from dataclasses import dataclass
from branca.element import MacroElement
from jinja2 import Template
from errors import UnknownIndicator

LEGEND_TITLE = "Legend"

LEGEND_TEMPLATE = Template("""
<div class="legend-title" style="font-weight: bold; margin-bottom: 6px;">{{ spec.title }}</div>
{% for color, label in spec.entries %}
<div class="legend-row" style="display: flex; align-items: center; margin: 3px 0;">
    <span style="display: inline-block; width: 18px; height: 12px; margin-right: 8px; background: {{ color }}; opacity: 1;"></span>
    <span>{{ label }}</span>
</div>
{% endfor %}
""")


@dataclass(frozen=True)
class LegendSpec:
    indicator: str
    entries: tuple
    title: str = LEGEND_TITLE


def legend_specs(indicators, colors):
    specs = {}
    for indicator in indicators:
        if len(indicator.legend_labels) != len(colors):
            raise ValueError(
                f"'{indicator.name}' needs {len(colors)} legend labels, got {len(indicator.legend_labels)}"
            )
        specs[indicator.name] = LegendSpec(
            indicator=indicator.name,
            entries=tuple(zip(colors, indicator.legend_labels)),
        )
    return specs


def render_legend(spec):
    return LEGEND_TEMPLATE.render(spec=spec).strip()


class MapSession:
    """Per-session legend state: nothing selected until the first layer change."""

    def __init__(self):
        self.active_indicator = None
        self.legend_spec = None
        self.legend_html = None


class LegendController:
    def __init__(self, specs):
        self.specs = dict(specs)

    @property
    def states(self):
        return [None] + list(self.specs)

    def handle_layer_change(self, session, name):
        """Replace the session's legend with the one for layer `name`."""
        if name not in self.specs:
            raise UnknownIndicator(name)

        spec = self.specs[name]
        session.active_indicator = name
        session.legend_spec = spec
        session.legend_html = render_legend(spec)
        return session.legend_html


class LegendSwitcher(MacroElement):
    """Bottom-right legend box that swaps content on Leaflet's baselayerchange."""

    _template = Template("""
        {% macro html(this, kwargs) %}
        <div id="{{ this.get_name() }}" style="
            position: absolute; bottom: 30px; right: 12px; z-index: 9999;
            background-color: rgba(255, 255, 255, 0.95); padding: 10px 12px;
            border-radius: 6px; box-shadow: 0 1px 6px rgba(0, 0, 0, 0.3);
            font-family: sans-serif; font-size: 13px;
        ">{{ this.initial_html }}</div>
        {% endmacro %}

        {% macro script(this, kwargs) %}
        var {{ this.get_name() }}_legends = {{ this.legends_json }};
        {{ this._parent.get_name() }}.on('baselayerchange', function(e) {
            var box = document.getElementById("{{ this.get_name() }}");
            box.innerHTML = {{ this.get_name() }}_legends[e.name] || "";
        });
        {% endmacro %}
    """)

    def __init__(self, controller, session):
        super().__init__()
        self._name = 'LegendSwitcher'
        self.initial_html = session.legend_html or ""
        self.legends_json = json.dumps({
            name: render_legend(spec) for name, spec in controller.specs.items()
        })
