import numpy as np
import pytest

gym = pytest.importorskip("gymnasium")

import falling_blocks.env  # noqa: E402,F401
from falling_blocks.env.falling_block_env import FallingBlockEnv  # noqa: E402
from falling_blocks.game import Action  # noqa: E402


def test_registered_env_resets():
    env = gym.make("FallingBlocks-10x20-v0")
    obs, info = env.reset(seed=3)
    assert obs["grid"].shape == (20, 10)
    assert 0 <= obs["preview"] < 7
    assert info["score"] == 0
    env.close()


def test_seeded_resets_match():
    env = FallingBlockEnv()
    first, _ = env.reset(seed=11)
    preview = first["preview"]
    second, _ = env.reset(seed=11)
    assert second["preview"] == preview
    assert np.array_equal(first["grid"], second["grid"])


def test_step_reward_is_score_delta():
    env = FallingBlockEnv()
    env.reset(seed=0)
    total = 0.0
    for _ in range(60):
        _, reward, terminated, truncated, info = env.step(int(Action.TICK))
        total += reward
    assert total == float(info["score"])
    _, reward, terminated, truncated, info = env.step(int(Action.HARD_DROP))
    assert reward == 0.0
    assert not terminated
    assert info["max_height"] >= 1


def test_truncates_after_max_steps():
    env = FallingBlockEnv(max_steps=3)
    env.reset(seed=0)
    results = [env.step(int(Action.TICK)) for _ in range(3)]
    assert [r[3] for r in results] == [False, False, True]


def test_invalid_action_rejected():
    env = FallingBlockEnv()
    env.reset(seed=0)
    with pytest.raises(ValueError):
        env.step(42)


def test_rgb_render():
    env = FallingBlockEnv(render_mode="rgb_array")
    env.reset(seed=0)
    for _ in range(50):
        env.step(int(Action.TICK))
    env.step(int(Action.HARD_DROP))
    img = env.render()
    assert img.shape == (240, 120, 3)
    assert img.dtype == np.uint8
    assert FallingBlockEnv().render() is None
