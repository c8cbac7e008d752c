"""
Smoke tests to verify basic application integrity.
Ensures that all modules can be imported without errors.
"""
import unittest
from unittest.mock import patch


class TestSmoke(unittest.TestCase):
    def test_import_app(self):
        """Test that dockdash.app can be imported successfully."""
        try:
            import dockdash.app
        except ImportError as e:
            self.fail(f"Failed to import dockdash.app: {e}")

    def test_import_main_module(self):
        """Test that dockdash.__main__ can be imported successfully."""
        try:
            import dockdash.__main__
        except ImportError as e:
            self.fail(f"Failed to import dockdash.__main__: {e}")

    def test_import_backend(self):
        """Test that dockdash.backend can be imported successfully."""
        try:
            import dockdash.backend
        except ImportError as e:
            self.fail(f"Failed to import dockdash.backend: {e}")

    def test_startup_error_prints_message_and_fails(self):
        """Unrecoverable startup errors print 'Error: ...' and return 1."""
        import dockdash.main as app_main

        with patch.object(app_main, "ConfigManager"), \
                patch.object(app_main, "setup_logging"), \
                patch.object(app_main, "DashboardApp", side_effect=RuntimeError("no terminal")), \
                patch("builtins.print") as mock_print:
            assert app_main.main() == 1
        mock_print.assert_called_once_with("Error: no terminal")

    def test_log_path_respects_xdg(self):
        import tempfile
        from dockdash import get_log_path

        with tempfile.TemporaryDirectory() as tmp, patch.dict("os.environ", {"XDG_DATA_HOME": tmp}):
            self.assertEqual(get_log_path(), f"{tmp}/dockdash/logs/dockdash.log")


if __name__ == '__main__':
    unittest.main()
