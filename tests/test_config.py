"""
Tests for configuration model and environment loading
"""

import logging

import pytest
from pydantic import ValidationError

from framebot.config.loader import get_configuration, load_config
from framebot.config.model import BotConfig, normalize_channels
from framebot.errors.internal import ConfigError

ENV = {
    "TWITCH_TOKEN": "oauth:abcdef",
    "TWITCH_NAME": "FrameBot",
    "TWITCH_CHANNEL": "bar, #Baz ,,bar",
}


class TestNormalizeChannels:
    def test_comma_string(self):
        assert normalize_channels("bar,#baz") == ["#bar", "#baz"]

    def test_strips_lowercases_and_dedupes(self):
        assert normalize_channels([" Bar", "#bar", "", "  ", "Qux"]) == ["#bar", "#qux"]

    def test_keeps_first_seen_order(self):
        assert normalize_channels("zeta,alpha") == ["#zeta", "#alpha"]

    def test_rejects_other_types(self):
        with pytest.raises(ValueError):
            normalize_channels(42)


class TestBotConfig:
    def test_token_gets_oauth_prefix(self):
        config = BotConfig(token="abcdef", nick="bot", channels="bar")
        assert config.token == "oauth:abcdef"

    def test_token_prefix_not_doubled(self):
        config = BotConfig(token="oauth:abcdef", nick="bot", channels="bar")
        assert config.token == "oauth:abcdef"

    def test_nick_lowercased(self):
        assert BotConfig(token="t", nick=" FrameBot ", channels="bar").nick == "framebot"

    def test_join_target(self, bot_config):
        assert bot_config.join_target == "#bar,#baz"

    def test_empty_channel_list_rejected(self):
        with pytest.raises(ValidationError):
            BotConfig(token="t", nick="bot", channels=" , ,")

    def test_bare_oauth_prefix_rejected(self):
        with pytest.raises(ValidationError):
            BotConfig(token="oauth:", nick="bot", channels="bar")

    def test_redacted_hides_token(self, bot_config):
        redacted = bot_config.redacted()
        assert redacted["token"] == "***"
        assert "abc123" not in str(redacted)

    def test_frozen(self, bot_config):
        with pytest.raises(ValidationError):
            bot_config.nick = "other"


class TestLoadConfig:
    def test_loads_from_mapping(self):
        config = load_config(ENV)
        assert config.token == "oauth:abcdef"
        assert config.nick == "framebot"
        assert config.channels == ["#bar", "#baz"]

    def test_reads_os_environ_by_default(self, monkeypatch):
        for key, value in ENV.items():
            monkeypatch.setenv(key, value)
        assert load_config().join_target == "#bar,#baz"

    @pytest.mark.parametrize("missing", ["TWITCH_TOKEN", "TWITCH_NAME", "TWITCH_CHANNEL"])
    def test_missing_variable(self, missing):
        env = {k: v for k, v in ENV.items() if k != missing}
        with pytest.raises(ConfigError, match=missing) as exc_info:
            load_config(env)
        assert exc_info.value.data["missing"] == [missing]

    def test_blank_variable_counts_as_missing(self):
        with pytest.raises(ConfigError, match="TWITCH_NAME"):
            load_config({**ENV, "TWITCH_NAME": "   "})

    def test_invalid_value(self):
        with pytest.raises(ConfigError, match="channels"):
            load_config({**ENV, "TWITCH_CHANNEL": ",,"})


class TestGetConfiguration:
    def test_exits_when_missing(self, monkeypatch, caplog):
        for key in ENV:
            monkeypatch.delenv(key, raising=False)
        with caplog.at_level(logging.ERROR):
            with pytest.raises(SystemExit) as exc_info:
                get_configuration()
        assert exc_info.value.code == 1
        assert "TWITCH_TOKEN" in caplog.text

    def test_returns_config(self, monkeypatch):
        for key, value in ENV.items():
            monkeypatch.setenv(key, value)
        assert get_configuration().nick == "framebot"
