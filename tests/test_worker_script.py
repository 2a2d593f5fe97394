from __future__ import annotations

import importlib.util
import io
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "run_content_card_worker.py"


def load_worker_script():
    spec = importlib.util.spec_from_file_location("run_content_card_worker", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class WorkerScriptHelpTests(unittest.TestCase):
    def test_help_names_class_types_and_output_topic(self) -> None:
        script = load_worker_script()
        stdout = io.StringIO()
        with mock.patch("sys.argv", ["run_content_card_worker.py", "--help"]):
            with redirect_stdout(stdout), self.assertRaises(SystemExit):
                script.parse_args()

        help_text = stdout.getvalue()
        self.assertIn("CONTENT_CARDS_CLASS_TYPES", help_text)
        self.assertIn("KAFKA_TOPIC_CONTENT_CARD_MESSAGES", help_text)
        self.assertIn("CONTENT_CARDS_CLASS_TYPES", script.__doc__)
        self.assertIn("KAFKA_TOPIC_CONTENT_CARD_MESSAGES", script.__doc__)


if __name__ == "__main__":
    unittest.main()
