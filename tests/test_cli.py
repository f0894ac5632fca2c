from __future__ import annotations

import contextlib
import io
import json
from pathlib import Path
import tempfile
import unittest

from PIL import Image

from axischart.cli import main


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, name: str, payload: object) -> str:
        path = self.tmp / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return str(path)

    def _run(self, argv: list[str]) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_bounds_command_prints_json(self) -> None:
        data = self._write("mixed.json", [[0, -4], [1, 3]])
        code, out, _ = self._run(["bounds", data])
        self.assertEqual(code, 0)
        self.assertEqual(
            json.loads(out),
            {"empty": False, "horizontal_gridlines": 2, "max": 9.0, "min": -4.5, "vertical_gridlines": 2},
        )

    def test_bounds_command_flags(self) -> None:
        data = self._write("points.json", [{"x": "a", "y": 2}, {"x": "b", "y": 9}])
        _, out, _ = self._run(["bounds", data, "--tight"])
        self.assertEqual((json.loads(out)["min"], json.loads(out)["max"]), (2.0, 9.0))
        _, out, _ = self._run(["bounds", data, "--no-anchor-zero", "--grid-step", "4"])
        self.assertEqual((json.loads(out)["min"], json.loads(out)["max"]), (2.0, 9.0))

    def test_bounds_command_reports_empty_data(self) -> None:
        data = self._write("empty.json", [])
        _, out, _ = self._run(["bounds", data])
        payload = json.loads(out)
        self.assertTrue(payload["empty"])
        self.assertIsNone(payload["min"])
        self.assertEqual(payload["horizontal_gridlines"], 0)

    def test_render_command_writes_png(self) -> None:
        data = self._write("bars.json", [[0, 3], [1, -2], [2, 5]])
        out_path = self.tmp / "bars.png"
        code, _, _ = self._run(["render", data, "--out", str(out_path), "--width", "160", "--height", "100", "--title", "demo"])
        self.assertEqual(code, 0)
        with Image.open(out_path) as image:
            self.assertEqual(image.size, (160, 100))

    def test_errors_exit_with_code_two(self) -> None:
        code, _, err = self._run(["bounds", str(self.tmp / "missing.json")])
        self.assertEqual(code, 2)
        self.assertIn("axischart: error:", err)

        data = self._write("points.json", [[0, 1]])
        code, _, err = self._run(["bounds", data, "--grid-step", "0"])
        self.assertEqual(code, 2)


if __name__ == "__main__":
    unittest.main()
