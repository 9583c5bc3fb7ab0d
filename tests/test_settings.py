import pytest
from pydantic import ValidationError

from dinorun.config.settings import GameSettings, Settings


def test_defaults(monkeypatch):
    for name in ("DINORUN_DEBUG", "DINORUN_SEED"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.debug is False
    assert settings.seed is None
    assert settings.game.spawn_threshold == 0.9
    assert settings.game.retire_margin == 5
    assert settings.simulator.fps == 60


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DINORUN_DEBUG", "true")
    monkeypatch.setenv("DINORUN_SEED", "31")
    monkeypatch.setenv("DINORUN_GAME__SPAWN_THRESHOLD", "0.5")

    settings = Settings(_env_file=None)

    assert settings.debug is True
    assert settings.seed == 31
    assert settings.game.spawn_threshold == 0.5


@pytest.mark.parametrize("threshold", [0.0, -0.2, 1.5])
def test_spawn_threshold_is_bounded(threshold):
    with pytest.raises(ValidationError):
        GameSettings(spawn_threshold=threshold)


@pytest.mark.parametrize(
    "threshold, margin",
    [(0.01, 1), (0.15, 5), (0.9, 65)],
)
def test_spawn_lead_must_outrun_retirement(threshold, margin):
    with pytest.raises(ValidationError, match="spawn distance"):
        GameSettings(spawn_threshold=threshold, retire_margin=margin)


def test_tight_but_safe_layout_is_accepted():
    settings = GameSettings(spawn_threshold=0.25, retire_margin=5)

    assert settings.spawn_threshold == 0.25
