import pytest

pygame = pytest.importorskip("pygame")

from falling_blocks.game import Action  # noqa: E402
from falling_blocks.visualization.human_play import KEY_TO_ACTION, build_parser  # noqa: E402
from falling_blocks.visualization.renderer import RenderConfig  # noqa: E402


def test_keys_cover_every_player_action():
    assert set(KEY_TO_ACTION.values()) == set(Action) - {Action.TICK}
    assert KEY_TO_ACTION[pygame.K_SPACE] == Action.HARD_DROP
    assert KEY_TO_ACTION[pygame.K_r] == Action.RESET


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.seed is None
    args = build_parser().parse_args(["--seed", "7", "--log-level", "debug"])
    assert args.seed == 7


def test_render_config_blocks():
    cfg = RenderConfig()
    assert (cfg.block_width, cfg.block_height) == (20, 20)
    assert cfg.window_size == (20 * 3 + 200 + 160, 20 * 2 + 400)
