"""Tests for colour_kit.core.palette — named colours and distance functions."""

from colour_kit.core.palette import NAMED, nearest_colour, resolve_name, rgb_distance


class TestRgbDistance:
    def test_same_colour(self) -> None:
        assert rgb_distance((255, 255, 255), (255, 255, 255)) == 0.0

    def test_black_white(self) -> None:
        d = rgb_distance((0, 0, 0), (255, 255, 255))
        assert d > 400  # sqrt(3 * 255^2) ≈ 441.7

    def test_symmetry(self) -> None:
        a = (100, 50, 200)
        b = (120, 60, 180)
        assert rgb_distance(a, b) == rgb_distance(b, a)


class TestNearestColour:
    def test_exact_white(self) -> None:
        name, dist = nearest_colour((255, 255, 255))
        assert name == 'white'
        assert dist == 0.0

    def test_near_orange(self) -> None:
        name, dist = nearest_colour((250, 160, 5))
        assert name == 'orange'
        assert dist < 10

    def test_alias_prefers_first_listed(self) -> None:
        name, _dist = nearest_colour((0, 255, 255))
        assert name == 'cyan'

    def test_beyond_threshold_returns_none(self) -> None:
        name, dist = nearest_colour((40, 200, 90), threshold=10)
        assert name is None
        assert dist > 10


class TestResolveName:
    def test_known(self) -> None:
        assert resolve_name('darkblue') == '#0000a0'

    def test_case_and_whitespace(self) -> None:
        assert resolve_name('  Orange ') == '#ffa500'

    def test_green_is_html_green(self) -> None:
        assert resolve_name('green') == '#008000'
        assert resolve_name('lime') == '#00ff00'

    def test_unknown(self) -> None:
        assert resolve_name('chartreuse') is None


class TestNamedPalette:
    def test_values_are_hex(self) -> None:
        for name, hex_val in NAMED.items():
            assert hex_val.startswith('#'), f'{name} value {hex_val} missing #'
            assert len(hex_val) == 7, f'{name} value {hex_val} not 7 chars'

    def test_names_are_lowercase(self) -> None:
        assert all(name == name.lower() for name in NAMED)
