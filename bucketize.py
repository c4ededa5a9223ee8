import pandas as pd
from errors import MalformedNumeric

N_BUCKETS = 5


def _hex_to_rgb(color):
    color = color.lstrip('#')
    return tuple(int(color[i:i + 2], 16) for i in (0, 2, 4))


def gradient(start='#CCCCCC', end='#660066', n=N_BUCKETS):
    """n colors linearly interpolated in RGB, lightest first.

    Channels round half up, so #CCCCCC -> #660066 gives
    #CCCCCC #B399B3 #996699 #803380 #660066.
    """
    if n < 2:
        raise ValueError("A gradient needs at least 2 colors")
    a, b = _hex_to_rgb(start), _hex_to_rgb(end)
    colors = []
    for step in range(n):
        t = step / (n - 1)
        channels = [int(x + (y - x) * t + 0.5) for x, y in zip(a, b)]
        colors.append('#{:02X}{:02X}{:02X}'.format(*channels))
    return colors


def rank_buckets(values, n_buckets=N_BUCKETS):
    """Bucket index per value: average ranks cut into equal-width intervals.

    Intervals are right-closed over [min rank, max rank] with the lowest
    edge pushed down by 0.1% of the range, so a rank sitting exactly on an
    interior edge falls into the lower bucket.
    """
    values = pd.Series(values)
    if values.empty:
        raise ValueError("Cannot bucketize an empty column")
    if values.isna().any():
        raise MalformedNumeric(values.name or 'values', values.index[values.isna()].tolist())

    ranks = values.rank(method='average')
    return pd.cut(ranks, bins=n_buckets, labels=False).astype(int)


def bucketize(values, indicator_name, colors):
    """BucketAssignment frame (indicator, bucket, color) indexed like values."""
    buckets = rank_buckets(values, n_buckets=len(colors))
    return pd.DataFrame({
        'indicator': indicator_name,
        'bucket': buckets,
        'color': [colors[b] for b in buckets],
    }, index=values.index)


def bucketize_all(df_areas, indicators, colors):
    print("Assigning color buckets...")
    return {i.name: bucketize(df_areas[i.column], i.name, colors) for i in indicators}


def bucket_ranges(values, buckets):
    """Min and max value per bucket, ordered by bucket index."""
    grouped = pd.DataFrame({'value': values, 'bucket': buckets['bucket']}).groupby('bucket')['value']
    return pd.DataFrame({'min': grouped.min(), 'max': grouped.max(), 'count': grouped.size()})
