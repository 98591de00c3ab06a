"""Tests for the command line entry point."""

import sys
from unittest.mock import AsyncMock, patch

import pytest
import structlog

from arch_stats import main as main_module
from arch_stats.config import Config
from arch_stats.core.exceptions import ApiError, InputError


@pytest.fixture
def config():
    return Config(api_base="https://api.arch.test/v1", api_key="key")


@pytest.fixture(autouse=True)
def patched_startup(config):
    """Skip environment loading and global logging setup."""
    with patch.object(main_module.Config, "from_env", return_value=config), patch.object(
        main_module, "configure_logging"
    ):
        structlog.configure(logger_factory=structlog.PrintLoggerFactory(sys.stderr))
        try:
            yield
        finally:
            structlog.reset_defaults()


class TestParser:
    """Test cases for the argument parser."""

    def test_stats_command(self):
        """Test the stats subcommand arguments."""
        args = main_module.build_parser().parse_args(["stats", "Notch", "-o", "card.png"])

        assert args.command == "stats"
        assert args.player == "Notch"
        assert args.output == "card.png"

    def test_leaderboard_command(self):
        """Test the leaderboard subcommand defaults."""
        args = main_module.build_parser().parse_args(["leaderboard", "sumo"])

        assert args.game == "sumo"
        assert args.page == 0
        assert args.size is None

    def test_unknown_game_rejected(self):
        """Test the game argument is limited to known games."""
        with pytest.raises(SystemExit):
            main_module.build_parser().parse_args(["leaderboard", "minigolf"])


class TestMain:
    """Test cases for main."""

    def test_success_prints_output_path(self, capsys):
        """Test a successful run prints the written file."""
        with patch.object(main_module, "run", AsyncMock(return_value="Notch_stats.png")):
            assert main_module.main(["stats", "Notch"]) == 0

        assert capsys.readouterr().out.strip() == "Notch_stats.png"

    def test_input_error_shown_verbatim(self, capsys):
        """Test validation failures are shown as-is with a failing exit code."""
        error = InputError("Username must be 3-16 characters.")
        with patch.object(main_module, "run", AsyncMock(side_effect=error)):
            assert main_module.main(["stats", "ab"]) == 1

        assert capsys.readouterr().err.strip() == "Username must be 3-16 characters."

    def test_api_error_prefixed(self, capsys):
        """Test upstream failures are prefixed with Error."""
        with patch.object(main_module, "run", AsyncMock(side_effect=ApiError("API 503: down"))):
            assert main_module.main(["leaderboard", "sumo"]) == 1

        assert capsys.readouterr().err.strip() == "Error: API 503: down"

    @pytest.mark.asyncio
    async def test_run_writes_png(self, tmp_path, config):
        """Test run writes the rendered bytes to the output file."""
        service = AsyncMock()
        service.__aenter__.return_value = service
        service.generate_leaderboard_report.return_value = b"png-bytes"
        output = tmp_path / "board.png"
        args = main_module.build_parser().parse_args(
            ["leaderboard", "sumo", "--page", "1", "--size", "5", "-o", str(output)]
        )

        with patch.object(main_module, "create_report_service", return_value=service):
            assert await main_module.run(args, config) == str(output)

        assert output.read_bytes() == b"png-bytes"
        service.generate_leaderboard_report.assert_awaited_once_with("sumo", 1, 5)
