from __future__ import annotations

from unittest.mock import MagicMock, patch

from exceptions_maker.services.progress import ProgressTracker, is_tty_enabled


def test_is_tty_enabled_follows_stdout():
    with patch("sys.stdout.isatty", return_value=True):
        assert is_tty_enabled() is True
    with patch("sys.stdout.isatty", return_value=False):
        assert is_tty_enabled() is False


def test_progress_disabled_without_tty():
    with patch("exceptions_maker.services.progress.is_tty_enabled", return_value=False):
        with ProgressTracker(3) as progress:
            assert progress.enabled is False
            assert progress.pbar is None
            progress.advance(2)
            progress.set_postfix(packages=1)
            assert progress.current_row == 1


def test_progress_with_tty_updates_bar():
    mock_bar = MagicMock()
    with patch("exceptions_maker.services.progress.is_tty_enabled", return_value=True):
        with patch("exceptions_maker.services.progress.tqdm", return_value=mock_bar) as mock_tqdm:
            with ProgressTracker(2, description="Converting rows") as progress:
                progress.advance(2)
                progress.advance(3)
                progress.set_postfix(packages=2, skipped=0)
    mock_tqdm.assert_called_once()
    assert mock_tqdm.call_args.kwargs["total"] == 2
    assert mock_tqdm.call_args.kwargs["unit"] == "row"
    assert mock_bar.update.call_count == 2
    mock_bar.set_description.assert_called_with("Converting rows (row 3)")
    mock_bar.set_postfix.assert_called_once_with(packages=2, skipped=0)
    mock_bar.close.assert_called_once()
