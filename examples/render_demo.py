from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from axischart import chart


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    out_dir = Path(__file__).resolve().parent / "out"
    out_dir.mkdir(parents=True, exist_ok=True)

    months = ["jan", "feb", "mar", "apr", "may", "jun"]
    delta = [12.0, -4.5, 7.2, -9.8, 15.1, 3.3]
    chart(
        list(zip(months, delta)),
        chart_type="bar",
        width=720,
        height=420,
        chart_title="Monthly delta",
        y_axis_title="units",
        x_axis_title="month",
        y_axis_width=48,
        corner_radius=3,
    ).save_png(out_dir / "bar.png")

    x = np.arange(24)
    chart(
        np.column_stack([x, 40 + 25 * np.sin(x / 3.0)]),
        chart_type="line",
        width=720,
        height=420,
        vertical_grid_step=5,
        chart_title="Signal",
        show_x_axis_labels=False,
    ).save_png(out_dir / "line.png")

    chart(
        [("rent", 1200), ("food", 450), ("travel", 300), ("other", 180)],
        chart_type="pie",
        width=420,
        height=420,
        pie_center_ratio=0.45,
    ).save_png(out_dir / "pie.png")


if __name__ == "__main__":
    main()
