from dataclasses import dataclass
import yaml

UNITS = ('percent', 'currency', 'index')


@dataclass(frozen=True)
class Indicator:
    name: str
    column: str
    unit: str
    legend_labels: tuple


def load_config(path='config.yaml'):
    with open(path, 'r') as f:
        return yaml.safe_load(f)


def load_indicators(config):
    indicators = []
    for entry in config['indicators']:
        unit = entry.get('unit', 'percent')
        if unit not in UNITS:
            raise ValueError(f"Indicator '{entry['name']}' has unknown unit '{unit}'")
        indicators.append(Indicator(
            name=entry['name'],
            column=entry['column'],
            unit=unit,
            legend_labels=tuple(entry.get('legend_labels', ())),
        ))

    names = [i.name for i in indicators]
    if len(set(names)) != len(names):
        raise ValueError("Indicator names must be unique")
    return indicators
