import pytest

from falling_blocks.game import GameConfig, ScoringRules


def test_score_per_line():
    rules = ScoringRules()
    assert rules.score_for_lines(0) == 0
    assert rules.score_for_lines(1) == 100
    assert rules.score_for_lines(4) == 400


def test_level_boundaries():
    rules = ScoringRules()
    assert rules.level_for_score(0) == 1
    assert rules.level_for_score(999) == 1
    assert rules.level_for_score(1000) == 2
    assert rules.level_for_score(2500) == 3


def test_drop_ticks_shrink_with_level():
    rules = ScoringRules()
    assert rules.initial_drop_tick == 50
    assert rules.drop_tick_for_level(1) == 50
    assert rules.drop_tick_for_level(2) == 43
    assert rules.drop_tick_for_level(3) == 36


def test_drop_ticks_round_half_up():
    rules = ScoringRules(initial_drop_ms=25, base_tick_ms=10)
    assert rules.drop_tick_for_level(1) == 3


def test_invalid_rules_rejected():
    with pytest.raises(ValueError):
        ScoringRules(score_per_level=0)
    with pytest.raises(ValueError):
        ScoringRules(base_tick_ms=0)


def test_invalid_config_rejected():
    with pytest.raises(ValueError):
        GameConfig(width=0)


def test_drop_ticks_never_reach_zero():
    rules = ScoringRules()
    assert rules.drop_tick_for_level(29) == 1
    assert rules.drop_tick_for_level(30) == 1
    assert rules.drop_tick_for_level(100) == 1
