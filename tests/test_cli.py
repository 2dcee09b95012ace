"""Tests for the command line interface."""

import logging
import sys

import pytest

import sweepstake_cli


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger('sweepstake')
    logger.handlers = []
    logger.setLevel(logging.NOTSET)


def run_cli(monkeypatch, data_dir, *args):
    monkeypatch.setattr(sys, 'argv', ['sweepstake_cli.py', '--data-dir', str(data_dir), *args])
    sweepstake_cli.main()


class TestCli:
    """End-to-end runs against a temporary data directory."""

    def test_import_draw_score_standings(self, monkeypatch, capsys, tmp_path):
        sheet = tmp_path / 'sheet.txt'
        sheet.write_text('England Team\n' + '\n'.join(f'{n}. Athlete {chr(64 + n)}' for n in range(1, 24)))

        run_cli(monkeypatch, tmp_path, 'import-roster', str(sheet))
        assert 'filled 23 roster slots' in capsys.readouterr().out

        run_cli(monkeypatch, tmp_path, 'draw', '--seed', '4')
        out = capsys.readouterr().out
        assert 'Draw complete: 15 members over 3 rounds' in out

        run_cli(monkeypatch, tmp_path, 'score', 'athlete a', 'try')
        assert 'Athlete A: 5 pts' in capsys.readouterr().out

        run_cli(monkeypatch, tmp_path, 'standings')
        out = capsys.readouterr().out
        assert out.startswith('Winner:')
        assert '(5 points)' in out

    def test_second_draw_fails_without_redraw(self, monkeypatch, capsys, tmp_path):
        run_cli(monkeypatch, tmp_path, 'draw')
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch, tmp_path, 'draw')
        assert exc.value.code == 1

        run_cli(monkeypatch, tmp_path, 'draw', '--redraw')
        assert 'Draw complete' in capsys.readouterr().out

    def test_log_file_records_session_activity(self, monkeypatch, capsys, tmp_path):
        """Test --log-file keeps a full log while stdout holds only the result."""
        log_file = tmp_path / 'match.log'
        run_cli(monkeypatch, tmp_path, '--log-file', str(log_file), 'draw', '--seed', '1')
        logging.getLogger('sweepstake').handlers[-1].close()

        assert 'Draw complete' in capsys.readouterr().out
        assert 'sweepstake.' in log_file.read_text()

    def test_unknown_member(self, monkeypatch, tmp_path):
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch, tmp_path, 'score', 'Nobody', 'try')
        assert exc.value.code == 1

    def test_status_lists_blockers(self, monkeypatch, capsys, tmp_path):
        run_cli(monkeypatch, tmp_path, 'select', 'Player 1')
        assert 'Player 1 removed' in capsys.readouterr().out

        run_cli(monkeypatch, tmp_path, 'status')
        out = capsys.readouterr().out
        assert 'Not ready to draw:' in out
        assert 'Game has 5 players (needs 6)' in out
