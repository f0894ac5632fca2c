from axischart.api import chart
from axischart.bounds import EMPTY_BOUNDS, Bounds, compute_bounds, raw_extent
from axischart.chart import Chart
from axischart.config import ChartConfig, validate_chart_config
from axischart.errors import ChartConfigError, ChartDataError
from axischart.grid import GridLayout, axis_tick_values, horizontal_gridline_count, layout_grid, vertical_gridline_count
from axischart.nice import nice_round_up
from axischart.series import DataSeries

__all__ = [
    "Bounds",
    "Chart",
    "ChartConfig",
    "ChartConfigError",
    "ChartDataError",
    "DataSeries",
    "EMPTY_BOUNDS",
    "GridLayout",
    "axis_tick_values",
    "chart",
    "compute_bounds",
    "horizontal_gridline_count",
    "layout_grid",
    "nice_round_up",
    "raw_extent",
    "validate_chart_config",
    "vertical_gridline_count",
]
