
import pytest

from framebot.config.model import BotConfig
from framebot.errors.handling import error_tally
from framebot.frames.models import CharacterData, MoveRecord

SOL_5K = MoveRecord(
    input="5K",
    name="",
    damage="8",
    guard="mid",
    startup="7",
    active="3",
    recovery="14",
    on_block="-2",
    on_hit="+3",
    level="1",
)


@pytest.fixture
def sol_5k() -> MoveRecord:
    return SOL_5K


@pytest.fixture
def bot_config() -> BotConfig:
    return BotConfig(token="abc123", nick="FrameBot", channels="bar,#Baz")


@pytest.fixture
def roster() -> list[CharacterData]:
    return [
        CharacterData(
            name="Sol Badguy",
            moves=[
                SOL_5K,
                MoveRecord(input="c.S", damage="17", guard="all", startup="7"),
                MoveRecord(input="236P", name="Gun Flame", damage="40", startup="18"),
                MoveRecord(input="623S", name="Volcanic Viper", damage="48", startup="9"),
            ],
        ),
        CharacterData(
            name="Giovanna",
            aliases=("gio",),
            moves=[MoveRecord(input="5K", damage="20", startup="6")],
        ),
        CharacterData(
            name="Goldlewis Dickinson",
            aliases=("gl", "gold"),
            moves=[MoveRecord(input="5P", damage="24", startup="7")],
        ),
    ]


@pytest.fixture(autouse=True)
def _reset_error_tally():
    yield
    error_tally.reset()
