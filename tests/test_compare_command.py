import io
import json
import logging
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from name_match.cli import main
from name_match.commands.compare import run
from name_match.config import OutputSettings, Settings


class TestCompareCommand(unittest.TestCase):
    def test_text_output(self) -> None:
        lines = run(Settings(), "Vikash Yadav Luniwal", "Vikash Yadav")
        self.assertEqual(lines, ["94% High Similarity"])

    def test_text_output_with_strategy(self) -> None:
        lines = run(Settings(), "Vikash Yadav", "V Y", show_strategy=True)
        self.assertEqual(lines, ["65% Low Match [alignment, capped]"])

    def test_json_output_from_settings(self) -> None:
        settings = Settings(output=OutputSettings(format="json"))
        lines = run(settings, "Vikash Yadav Luniwal", "Vikash Luniwal Yadav")
        payload = json.loads(lines[0])
        self.assertEqual(payload["percentage"], 99)
        self.assertEqual(payload["remark"], "High Similarity")
        self.assertEqual(payload["inputName"], "Vikash Yadav Luniwal")

    def test_flag_overrides_settings(self) -> None:
        settings = Settings(output=OutputSettings(format="json", show_strategy=True))
        lines = run(settings, "Vikash", "Vikash", json_output=False, show_strategy=False)
        self.assertEqual(lines, ["100% Exact Match"])


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self._handlers = list(logging.getLogger().handlers)
        self._level = logging.getLogger().level

    def tearDown(self) -> None:
        root_logger = logging.getLogger()
        root_logger.handlers[:] = self._handlers
        root_logger.setLevel(self._level)

    def test_compare_prints_result(self) -> None:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            main(["compare", "Dr Vikash Yadav", "Vikash Yadav"])
        self.assertEqual(buffer.getvalue().strip(), "100% Exact Match")

    def test_compare_json_flag(self) -> None:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            main(["compare", "", "Vikash", "--json"])
        payload = json.loads(buffer.getvalue())
        self.assertEqual(payload["percentage"], 0)
        self.assertEqual(payload["strategy"], "empty")

    def test_log_level_flag(self) -> None:
        with redirect_stdout(io.StringIO()):
            main(["--log-level", "debug", "compare", "a", "b"])
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    def test_invalid_config_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "bad.yaml"
            path.write_text("output:\n  format: xml\n", encoding="utf-8")
            with self.assertRaises(SystemExit) as ctx:
                main(["--config", str(path), "compare", "a", "b"])
        self.assertEqual(ctx.exception.code, 2)

    def test_missing_config_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            main(["--config", "/nonexistent/name-match.yaml", "compare", "a", "b"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
