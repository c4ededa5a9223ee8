import pandas as pd
from indicators import UNITS

MISSING = 'N/A'


def format_value(value, unit):
    if unit not in UNITS:
        raise ValueError(f"Unknown unit '{unit}'")
    if value is None or pd.isna(value):
        return MISSING

    value = float(value)
    if value.is_integer():
        value = int(value)
    if unit == 'currency':
        return f"${value:,}"
    if unit == 'percent':
        return f"{value} percent"
    return str(value)


def format_label(area_name, value, unit):
    # e.g. "Rogers Park: 7.5 percent"
    return f"{area_name}: {format_value(value, unit)}"


def build_labels(df_areas, indicator):
    return {
        area_id: format_label(row['area_name'], row[indicator.column], indicator.unit)
        for area_id, row in df_areas.iterrows()
    }
