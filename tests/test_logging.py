from __future__ import annotations

import os
import unittest
from pathlib import Path
from unittest import mock

from taqvim.bootstrap import logging as bootstrap_logging


class DefaultLogDirTests(unittest.TestCase):
    def test_uses_environment_override(self) -> None:
        with mock.patch.dict(os.environ, {"TAQVIM_LOG_DIR": "/tmp/taqvim-logs"}):
            self.assertEqual(bootstrap_logging.default_log_dir(), Path("/tmp/taqvim-logs"))

    def test_falls_back_to_user_log_dir(self) -> None:
        env = {key: value for key, value in os.environ.items() if key != "TAQVIM_LOG_DIR"}
        with mock.patch.dict(os.environ, env, clear=True), mock.patch.object(
            bootstrap_logging, "user_log_dir", return_value="/var/user/logs/Taqvim"
        ) as user_log_dir:
            self.assertEqual(bootstrap_logging.default_log_dir(), Path("/var/user/logs/Taqvim"))
        user_log_dir.assert_called_once_with("Taqvim", "Taqvim")


if __name__ == "__main__":
    unittest.main()
