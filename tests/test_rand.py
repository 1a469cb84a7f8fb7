import pytest

from tinyunix.rand import Random, do_rand


def test_pinned_values():
    assert do_rand(1) == 33613
    assert do_rand(0) == 16806


@pytest.mark.parametrize("seed", [0, 1, 2, 31, 7177, 0x7FFFFFFD, 0x7FFFFFFE, 2**63])
def test_result_in_range(seed):
    assert 0 <= do_rand(seed) <= 0x7FFFFFFD


def test_state_is_taken_modulo():
    assert do_rand(5 + 0x7FFFFFFE) == do_rand(5)
    assert do_rand(2**64 + 5) == do_rand(5)


def test_random_follows_do_rand():
    gen = Random(1)
    first = gen.rand()
    second = gen.rand()
    assert first == do_rand(1)
    assert second == do_rand(first)
    assert gen.state == second


def test_same_seed_same_sequence():
    a, b = Random(42), Random(42)
    assert [a.rand() for _ in range(50)] == [b.rand() for _ in range(50)]


def test_state_can_be_perturbed():
    gen = Random()
    gen.state ^= 31
    assert gen.rand() == do_rand(1 ^ 31)