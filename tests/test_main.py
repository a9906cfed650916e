"""
Tests for the application entry point
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from framebot import main as app
from framebot.errors.internal import DataLoadError

ENV = {"TWITCH_TOKEN": "tok", "TWITCH_NAME": "framebot", "TWITCH_CHANNEL": "bar"}


@pytest.fixture
def env(monkeypatch):
    for key, value in ENV.items():
        monkeypatch.setenv(key, value)


@pytest.mark.asyncio
async def test_main_wires_components(env):
    index = MagicMock()
    with patch.object(app, "DustloopClient") as mock_client, patch.object(
        app, "ConnectionManager"
    ) as mock_manager:
        mock_client.return_value.load_index = AsyncMock(return_value=index)
        mock_manager.return_value.run_forever = AsyncMock()
        await app.main()

    config, dispatcher = mock_manager.call_args[0]
    assert config.join_target == "#bar"
    assert dispatcher.lookup is index
    mock_manager.return_value.run_forever.assert_awaited_once()


@pytest.mark.asyncio
async def test_main_exits_when_frame_data_unavailable(env):
    with patch.object(app, "DustloopClient") as mock_client, patch.object(
        app, "ConnectionManager"
    ) as mock_manager:
        mock_client.return_value.load_index = AsyncMock(
            side_effect=DataLoadError("down")
        )
        with pytest.raises(SystemExit) as exc_info:
            await app.main()

    assert exc_info.value.code == 1
    mock_manager.assert_not_called()


@pytest.mark.asyncio
async def test_main_exits_before_connecting_without_config(monkeypatch):
    for key in ENV:
        monkeypatch.delenv(key, raising=False)
    with patch.object(app, "DustloopClient") as mock_client:
        with pytest.raises(SystemExit):
            await app.main()
    mock_client.assert_not_called()


def test_health_check(env):
    with patch.object(app, "LoggerConfigurator"):
        with pytest.raises(SystemExit) as exc_info:
            app.run(["--health-check"])
    assert exc_info.value.code == 0


def test_run_maps_keyboard_interrupt_to_clean_exit():
    def interrupt(coro):
        coro.close()
        raise KeyboardInterrupt

    with patch.object(app, "LoggerConfigurator"), patch.object(
        app.asyncio, "run", side_effect=interrupt
    ):
        with pytest.raises(SystemExit) as exc_info:
            app.run([])
    assert exc_info.value.code == 0


def test_run_exits_with_error_on_unexpected_failure():
    def fail(coro):
        coro.close()
        raise RuntimeError("boom")

    with patch.object(app, "LoggerConfigurator"), patch.object(
        app.asyncio, "run", side_effect=fail
    ), patch.object(app, "log_error") as mock_log_error:
        with pytest.raises(SystemExit) as exc_info:
            app.run([])
    assert exc_info.value.code == 1
    mock_log_error.assert_called_once()
