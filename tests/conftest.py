import pytest

import browse.config


@pytest.fixture(autouse=True)
def _debug_log(tmp_path, monkeypatch):
    """Testit kirjoittavat debug-lokin tmp-hakemistoon, ei projektin juureen."""
    log_file = tmp_path / "debug.log"
    monkeypatch.setattr(browse.config, "_LOG_FILE", str(log_file))
    return log_file
