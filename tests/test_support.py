import pytest

from daubechies_filters.support import SupportInterval


class TestSupportInterval:
    def test_bounds(self):
        s = SupportInterval(-3, 4)
        assert s.left == -3
        assert s.right == 4
        assert s == (-3, 4)

    @pytest.mark.parametrize(
        "left,right,length",
        [(0, 0, 1), (0, 3, 4), (-3, 4, 8), (-7, 0, 8), (-5, -1, 5)],
    )
    def test_length(self, left, right, length):
        assert SupportInterval(left, right).length == length
        assert len(SupportInterval(left, right).indices()) == length

    def test_left_greater_than_right(self):
        with pytest.raises(ValueError):
            SupportInterval(1, 0)

    def test_contains(self):
        s = SupportInterval(-1, 2)
        assert -2 not in s
        assert -1 in s
        assert 0 in s
        assert 2 in s
        assert 3 not in s

    def test_indices(self):
        assert list(SupportInterval(-2, 1).indices()) == [-2, -1, 0, 1]

    def test_issubset(self):
        outer = SupportInterval(0, 7)
        assert SupportInterval(0, 4).issubset(outer)
        assert SupportInterval(0, 7).issubset(outer)
        assert not SupportInterval(-1, 4).issubset(outer)
        assert not SupportInterval(3, 8).issubset(outer)

    def test_immutable(self):
        s = SupportInterval(0, 1)
        with pytest.raises(AttributeError):
            s.left = 5

    def test_hashable(self):
        assert {SupportInterval(0, 1): "a"}[SupportInterval(0, 1)] == "a"

    def test_str_and_repr(self):
        s = SupportInterval(-3, 4)
        assert str(s) == "[-3, 4]"
        assert repr(s) == "SupportInterval(left=-3, right=4)"
