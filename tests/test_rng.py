from falling_blocks.game.rng import MODULUS, hash_seed, random_seed, scale


def test_hash_is_gcc_lcg():
    assert hash_seed(0) == 12345
    assert hash_seed(1) == 1103527590
    assert hash_seed(12345) == (1103515245 * 12345 + 12345) % 2**31


def test_hash_stays_below_modulus():
    seed = 7
    for _ in range(1000):
        seed = hash_seed(seed)
        assert 0 <= seed < MODULUS


def test_sequence_is_reproducible():
    def walk(seed):
        out = []
        for _ in range(20):
            seed = hash_seed(seed)
            out.append(seed)
        return out

    assert walk(42) == walk(42)
    assert walk(42) != walk(43)


def test_scale_range():
    assert scale(12345) == 4
    assert {scale(s) for s in range(100)} == set(range(7))


def test_random_seed_uses_given_generator():
    import random

    assert random_seed(random.Random(5)) == random_seed(random.Random(5))
    assert 0 <= random_seed() < MODULUS
