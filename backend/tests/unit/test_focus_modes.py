import pytest

from campuslife.routers.advisor.focus_modes import (
    FOCUS_MODE_CONFIGS,
    FocusMode,
    get_mode_config,
    resolve_conflict,
)


def test_every_mode_is_configured():
    assert set(FOCUS_MODE_CONFIGS) == set(FocusMode)
    for mode, config in FOCUS_MODE_CONFIGS.items():
        assert config.mode is mode
        assert config.system_prompt.startswith(f"Modus: {mode.value}")


def test_mode_lookup_accepts_plain_strings():
    assert get_mode_config("Exam").priorities.urgency == 10
    assert get_mode_config("Health").to_dict()["priorities"]["health"] == 10


@pytest.mark.parametrize(
    "mode, health_cost, efficiency_gain, decision",
    [
        (FocusMode.HEALTH, 8, 10, "reject"),
        (FocusMode.STUDY, 9, 8, "proceed"),
        (FocusMode.EXAM, 9, 7, "proceed"),
        # Balanced: 7 * (10 - 2) = 56 > 7 * 5 = 35
        (FocusMode.BALANCED, 2, 5, "modify"),
        # Balanced: 7 * (10 - 6) = 28 < 7 * 6 = 42
        (FocusMode.BALANCED, 6, 6, "proceed"),
        # Health: 10 * (10 - 7) = 30 > 4 * 5 = 20, cost not above 7
        (FocusMode.HEALTH, 7, 5, "modify"),
    ],
)
def test_resolve_conflict(mode, health_cost, efficiency_gain, decision):
    result, reasoning = resolve_conflict(mode, health_cost, efficiency_gain)
    assert result == decision
    assert reasoning.startswith(f"{mode.value} Mode")
