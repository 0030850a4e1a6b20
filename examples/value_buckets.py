"""Example: raw values bucketed linearly and logarithmically."""

import logging
import math

import numpy as np

import timberline_heatmaps as th

logging.basicConfig(level=logging.INFO, format="%(message)s")

# NaN marks a missing sample and lands in the lowest bucket
response_ms = np.array([12, 18, 25, 40, 90, 150, 600, 2400, np.nan, 31])
ramp = {"from": "#fff7ec", "to": "#7f0000", "steps": 5}

th.render_linear(values=response_ms, colors=ramp, filename="response-times-linear.svg")


def log_buckets(value, bucket_count, **context):
    lo, hi = context["min"], context["max"]
    if value <= lo or lo <= 0:
        return 0
    ratio = math.log(value / lo) / math.log(hi / lo)
    return min(int(ratio * (bucket_count - 1)), bucket_count - 1)


th.render_linear(
    values=response_ms,
    colors=ramp,
    value_to_score=log_buckets,
    filename="response-times-log.svg",
)
