from __future__ import annotations

from typing import Any

from axischart.chart import Chart
from axischart.config import validate_chart_config


DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 400


def chart(
    data: Any = None,
    *,
    chart_type: str = "bar",
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    **overrides: Any,
) -> Chart:
    config = validate_chart_config({"chart_type": chart_type, **overrides})
    out = Chart(width=width, height=height, config=config)
    if data is not None:
        out.set_data(data)
    return out
