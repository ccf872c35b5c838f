from typing import Iterator

import pytest

import read_primitives.conf.get_settings as settings_loader
from read_primitives.conf import CONFIG_YAML_ENV_VAR


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(CONFIG_YAML_ENV_VAR, raising=False)
    monkeypatch.setattr(settings_loader, '_settings_singleton', None)
    yield
