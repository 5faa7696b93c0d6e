import matplotlib
matplotlib.use("Agg")

import pytest

from powersplit.config import config

@pytest.fixture
def log_to(tmp_path, monkeypatch):
	path = tmp_path / "logs.txt"
	monkeypatch.setattr(config, "logging", True)
	monkeypatch.setattr(config, "log_filepath", str(path))
	return path
