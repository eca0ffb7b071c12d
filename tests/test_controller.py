import logging

from lorenz.core.controller import LorenzController
from lorenz.utils.config import Config


def test_controller_from_defaults_has_player():
    controller = LorenzController(Config("unused.json").get_all())
    assert controller.player is not None
    assert controller.player.path.name == "zimmer.wav"
    assert controller.state.history.capacity == 5000


def test_missing_audio_does_not_block_initialize(tmp_path, caplog):
    controller = LorenzController({"audio": {"file": str(tmp_path / "missing.wav")}})
    with caplog.at_level(logging.WARNING):
        assert controller.initialize() is True
    assert "missing.wav" in caplog.text
    for _ in range(5):
        controller.tick()
    assert len(controller.state.history) == 5
    controller.shutdown()


def test_audio_disabled(no_audio_config):
    controller = LorenzController(no_audio_config)
    assert controller.player is None
    assert controller.initialize() is True
    controller.shutdown()


def test_tick_returns_appended_point(no_audio_config):
    controller = LorenzController(no_audio_config)
    point = controller.tick()
    assert controller.state.history[-1] is point
    assert controller.state.steps == 1


def test_reset_restarts_from_configured_start():
    controller = LorenzController({
        "audio": {"enabled": False},
        "simulation": {"initial_state": [1.0, 2.0, 3.0]},
    })
    for _ in range(3):
        controller.tick()
    controller.reset()
    assert controller.state.position == (1.0, 2.0, 3.0)
    assert len(controller.state.history) == 0
