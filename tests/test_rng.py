import pytest
from nuts.rng import Rng


class TestRng:
    def test_first_step(self):
        r = Rng(12345)
        value = r.next()
        assert r.state == 87628868
        assert value == 87628868 / 2**32

    def test_same_seed_same_sequence(self):
        r1, r2 = Rng(12345), Rng(12345)
        assert [r1.next() for _ in range(10)] == [r2.next() for _ in range(10)]
        assert [r1.rand_int(52) for _ in range(10)] == [r2.rand_int(52) for _ in range(10)]

    def test_next_in_unit_interval(self):
        r = Rng(1)
        for _ in range(1000):
            assert 0 <= r.next() < 1

    def test_rand_int_bounds(self):
        r = Rng(99)
        values = [r.rand_int(7) for _ in range(1000)]
        assert min(values) >= 0
        assert max(values) <= 6

    def test_rand_int_invalid_bound(self):
        with pytest.raises(ValueError):
            Rng(1).rand_int(0)

    def test_reseed(self):
        r = Rng(5)
        first = [r.next() for _ in range(3)]
        r.seed(5)
        assert [r.next() for _ in range(3)] == first

    def test_independent_instances(self):
        r1, r2 = Rng(3), Rng(3)
        r1.next()
        assert r2.state == 3

    def test_clock_seed(self):
        r = Rng()
        assert 0 <= r.state < 2**32
