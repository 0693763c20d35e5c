"""
Unit tests for progress indicator utilities.
"""
import sys
import threading
from unittest.mock import patch, MagicMock

from danglescan.utils.progress import ProgressIndicator, progress_bar


class TestProgressIndicator:
    """Test progress indicator functionality."""

    def test_init(self):
        """Test initialization."""
        progress = ProgressIndicator(total=100, desc="Probing", disable=False, unit="host")

        assert progress.total == 100
        assert progress.desc == "Probing"
        assert progress.disable is False
        assert progress.unit == "host"
        assert progress.current == 0
        assert progress.start_time is None
        assert progress.tqdm_instance is None

    @patch('time.time')
    def test_start(self, mock_time):
        """Test start creates a tqdm bar on stderr."""
        mock_time.return_value = 100.0

        with patch('danglescan.utils.progress.tqdm') as mock_tqdm:
            mock_tqdm_instance = MagicMock()
            mock_tqdm.return_value = mock_tqdm_instance

            progress = ProgressIndicator(total=10, desc="Probing")
            progress.start()

            assert progress.start_time == 100.0
            assert progress.tqdm_instance == mock_tqdm_instance
            mock_tqdm.assert_called_once_with(
                total=10,
                desc="Probing",
                unit="it",
                file=sys.stderr
            )

    def test_disabled(self):
        """Test a disabled indicator never touches tqdm."""
        with patch('danglescan.utils.progress.tqdm') as mock_tqdm:
            progress = ProgressIndicator(total=10, disable=True)
            progress.start()
            progress.update(3)
            progress.close()

            mock_tqdm.assert_not_called()
            assert progress.current == 0

    def test_concurrent_updates(self):
        """Test updates from many threads are all counted."""
        with patch('danglescan.utils.progress.tqdm') as mock_tqdm:
            mock_tqdm_instance = MagicMock()
            mock_tqdm.return_value = mock_tqdm_instance

            progress = ProgressIndicator(total=50)
            progress.start()
            threads = [threading.Thread(target=progress.update) for _ in range(50)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

            assert progress.current == 50
            assert mock_tqdm_instance.update.call_count == 50


class TestProgressBar:
    """Test the progress_bar context manager."""

    def test_closes_on_exit(self):
        """Test the bar is closed when the block exits."""
        with patch('danglescan.utils.progress.tqdm') as mock_tqdm:
            mock_tqdm_instance = MagicMock()
            mock_tqdm.return_value = mock_tqdm_instance

            with progress_bar(total=2, desc="Probing") as progress:
                progress.update(2)

            mock_tqdm_instance.update.assert_called_once_with(2)
            mock_tqdm_instance.close.assert_called_once()

    def test_closes_on_error(self):
        """Test the bar is closed even if the block raises."""
        with patch('danglescan.utils.progress.tqdm') as mock_tqdm:
            mock_tqdm_instance = MagicMock()
            mock_tqdm.return_value = mock_tqdm_instance

            try:
                with progress_bar(total=2):
                    raise RuntimeError("interrupted")
            except RuntimeError:
                pass

            mock_tqdm_instance.close.assert_called_once()
