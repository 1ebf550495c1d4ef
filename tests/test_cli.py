import logging
import sys
import unittest
from unittest.mock import patch

from click.testing import CliRunner

from teachify_admin.cli import main
from teachify_admin.config import Settings
from teachify_admin.dtos import AccountResponse, AccountStatus, AccountSummary, SeedResult
from teachify_admin.exceptions import StoreOperationFailed, StoreUnavailable

ADMIN = AccountResponse(email="admin@teachify.com", name="Admin User", role="admin")


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.settings = Settings(
            _env_file=None,
            MONGODB_URI="mongodb://localhost:27017/teachify",
            ADMIN_PASSWORD="admin123",
        )
        patcher = patch("teachify_admin.cli.get_settings", return_value=self.settings)
        patcher.start()
        self.addCleanup(patcher.stop)
        root = logging.getLogger()
        self.addCleanup(setattr, root, "handlers", root.handlers[:])
        self.addCleanup(root.setLevel, root.level)

    @patch("teachify_admin.cli.seed_account")
    def test_seed_created(self, mock_seed):
        mock_seed.return_value = SeedResult(created=True, account=ADMIN)

        result = self.runner.invoke(main, ["seed"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Created admin account admin@teachify.com", result.output)
        self.assertNotIn("admin123", result.output)
        mock_seed.assert_called_once()
        self.assertIs(mock_seed.call_args[0][0], self.settings)

    @patch("teachify_admin.cli.seed_account")
    def test_seed_already_exists_exits_zero(self, mock_seed):
        mock_seed.return_value = SeedResult(created=False, account=ADMIN)

        result = self.runner.invoke(main, ["seed"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("already exists", result.output)

    @patch("teachify_admin.cli.seed_account")
    def test_seed_store_unavailable_exits_non_zero(self, mock_seed):
        mock_seed.side_effect = StoreUnavailable("MongoDB is unreachable")

        result = self.runner.invoke(main, ["seed"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("MongoDB is unreachable", result.output)
        self.assertEqual(result.output.count("MongoDB is unreachable"), 1)

    @patch("teachify_admin.cli.seed_account")
    def test_logs_go_to_stderr(self, mock_seed):
        mock_seed.return_value = SeedResult(created=True, account=ADMIN)
        streams = []

        def record_stream(level, stream):
            streams.append(stream is sys.stderr)

        with patch("teachify_admin.cli.setup_logging", side_effect=record_stream):
            result = self.runner.invoke(main, ["seed"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(streams, [True])

    def test_seed_without_uri_exits_non_zero(self):
        self.settings.MONGODB_URI = None

        result = self.runner.invoke(main, ["seed"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("MONGODB_URI is not set", result.output)

    @patch("teachify_admin.cli.verify_account")
    def test_verify_lists_accounts(self, mock_verify):
        mock_verify.return_value = AccountStatus(
            exists=True,
            account=ADMIN,
            all_accounts=[
                AccountSummary(email="admin@teachify.com", role="admin"),
                AccountSummary(email="b@x.com", role="student"),
            ],
        )

        result = self.runner.invoke(main, ["verify"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Account EXISTS: admin@teachify.com", result.output)
        self.assertIn("Total accounts in database: 2", result.output)
        self.assertIn("- b@x.com (student)", result.output)

    @patch("teachify_admin.cli.verify_account")
    def test_verify_not_found_exits_zero(self, mock_verify):
        mock_verify.return_value = AccountStatus(exists=False)

        result = self.runner.invoke(main, ["verify", "--email", "ghost@x.com"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("ghost@x.com NOT FOUND", result.output)
        mock_verify.assert_called_once_with(self.settings, "ghost@x.com")

    @patch("teachify_admin.cli.verify_account")
    def test_verify_query_failure_exits_non_zero(self, mock_verify):
        mock_verify.side_effect = StoreOperationFailed("query failed")

        result = self.runner.invoke(main, ["verify"])

        self.assertEqual(result.exit_code, 1)

    @patch("teachify_admin.cli.check_health")
    def test_check_health_uses_backend_url(self, mock_check):
        mock_check.return_value = {"status": "OK", "message": "Teachify Server is running"}

        result = self.runner.invoke(main, ["check-health"])

        self.assertEqual(result.exit_code, 0, result.output)
        mock_check.assert_called_once_with("http://localhost:5000", timeout=10.0)

    def test_init_env(self):
        with self.runner.isolated_filesystem():
            first = self.runner.invoke(main, ["init-env"])
            second = self.runner.invoke(main, ["init-env"])

        self.assertEqual(first.exit_code, 0, first.output)
        self.assertIn("Created .env", first.output)
        self.assertIn("already exists", second.output)


if __name__ == "__main__":
    unittest.main()
