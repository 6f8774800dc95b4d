"""Tests for the command-line entry point."""

from unittest.mock import patch

import pytest

from utr.cli import main, parse_args
from utr.config import clear_config_cache


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    monkeypatch.delenv('UTR_CONFIG', raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.name is None
        assert not args.debug
        assert not args.no_log_file

    def test_positional_name(self):
        args = parse_args(['Roger Federer', '--debug', '--no-log-file'])
        assert args.name == 'Roger Federer'
        assert args.debug
        assert args.no_log_file


class TestMain:
    """Tests for startup wiring and failures."""

    @patch('utr.cli.UTRApp')
    def test_runs_app_with_initial_query(self, mock_app_class, tmp_path):
        """Test the positional name is handed to the app."""
        mock_app_class.return_value.return_code = 0

        code = main([
            'Roger Federer',
            '--config', str(tmp_path / 'absent.json'),
            '--no-log-file',
        ])

        assert code == 0
        kwargs = mock_app_class.call_args.kwargs
        assert kwargs['initial_query'] == 'Roger Federer'
        assert kwargs['client'].base_url == 'https://app.universaltennis.com/api'
        mock_app_class.return_value.run.assert_called_once()

    @patch('utr.cli.UTRApp')
    def test_invalid_config_exits_nonzero(self, mock_app_class, tmp_path, capsys):
        """Test a bad config file is reported on stderr with status 1."""
        path = tmp_path / 'config.json'
        path.write_text('{"log_level": "LOUD"}')

        code = main(['--config', str(path), '--no-log-file'])

        assert code == 1
        assert 'Could not start' in capsys.readouterr().err
        mock_app_class.assert_not_called()
