import pytest

from pickle_launcher.launcher import Launcher


@pytest.fixture
def video_dir(tmp_path):
    path = tmp_path / "Video"
    path.mkdir()
    return path


@pytest.fixture
def write_config(tmp_path):
    """Write a pickle.conf and return its path."""
    def _write(text):
        path = tmp_path / "pickle.conf"
        path.write_text(text)
        return path
    return _write


@pytest.fixture
def make_launcher(tmp_path, video_dir):
    def _make(config_file):
        return Launcher(config_file, video_dir, tmp_path / "pickle")
    return _make
