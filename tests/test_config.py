import unittest
from unittest.mock import patch

from hanoi_solver import config


class TestConfig(unittest.TestCase):
    @patch.dict("os.environ", {}, clear=True)
    def test_defaults(self):
        self.assertEqual(config.get_max_disks(), 8)
        self.assertEqual(config.get_stream_max_disks(), 30)

    @patch.dict("os.environ", {"HANOI_MAX_DISKS": "12", "HANOI_STREAM_MAX_DISKS": "20"})
    def test_environment_overrides(self):
        self.assertEqual(config.get_max_disks(), 12)
        self.assertEqual(config.get_stream_max_disks(), 20)

    def test_invalid_values_fall_back(self):
        for raw in ("eight", "0", "-4", "  "):
            with self.subTest(raw=raw):
                with patch.dict("os.environ", {"HANOI_MAX_DISKS": raw}):
                    self.assertEqual(config.get_max_disks(), config.DEFAULT_MAX_DISKS)


if __name__ == "__main__":
    unittest.main()
