from collections.abc import Iterator
from pathlib import Path

import pytest

from imgfit.settings import CONFIG_ENV_VAR, FitSettings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep tests away from real config files on the machine."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(FitSettings, "DEFAULT_CONFIG_PATHS", [tmp_path / "absent.yaml"])
    yield


@pytest.fixture
def write_config(tmp_path: Path):
    def _write(content: str, name: str = "imgfit.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
