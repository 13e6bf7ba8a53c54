"""Tests for colour_kit.core.types and colour_kit.core.layout."""

import dataclasses
import math

import pytest
from colour_kit.core.layout import ARGB, LAYOUTS, RGB, RGBA, get_layout
from colour_kit.core.types import BLACK, CLEAR, GREY, WHITE, Color, ColourParseError, Command, Report


class TestColorArithmetic:
    def test_add(self) -> None:
        c = Color(0.25, 0.5, 0.0, 0.5) + Color(0.25, 0.25, 1.0, 0.5)
        assert c == Color(0.5, 0.75, 1.0, 1.0)

    def test_sub_not_clamped(self) -> None:
        c = BLACK - WHITE
        assert c == Color(-1.0, -1.0, -1.0, 0.0)

    def test_scalar_mul_both_sides(self) -> None:
        assert WHITE * 0.5 == Color(0.5, 0.5, 0.5, 0.5)
        assert 0.5 * WHITE == WHITE * 0.5

    def test_componentwise_mul(self) -> None:
        assert Color(0.5, 1.0, 0.0, 1.0) * Color(0.5, 0.5, 0.5, 0.5) == Color(0.25, 0.5, 0.0, 0.5)

    def test_div(self) -> None:
        assert WHITE / 2 == Color(0.5, 0.5, 0.5, 0.5)

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            WHITE + 1  # type: ignore[operator]

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            WHITE.r = 0.0  # type: ignore[misc]


class TestColorHelpers:
    def test_default_alpha(self) -> None:
        assert Color(0.1, 0.2, 0.3).a == 1.0

    def test_iter_and_tuple(self) -> None:
        assert tuple(GREY) == (0.5, 0.5, 0.5, 1.0)
        assert GREY.as_tuple() == (0.5, 0.5, 0.5, 1.0)

    def test_as_bytes(self) -> None:
        assert WHITE.as_bytes() == (255, 255, 255, 255)
        assert CLEAR.as_bytes() == (0, 0, 0, 0)

    @pytest.mark.parametrize('channels', [(math.nan, 0.0, 0.0, 1.0), (0.0, 0.0, 0.0, math.inf), (0.0, -math.inf, 0.0, 1.0)])
    def test_as_bytes_rejects_non_finite(self, channels: tuple[float, float, float, float]) -> None:
        with pytest.raises(ValueError, match='non-finite'):
            Color(*channels).as_bytes()

    def test_with_alpha(self) -> None:
        assert WHITE.with_alpha(0.0) == Color(1.0, 1.0, 1.0, 0.0)

    def test_approx_equal(self) -> None:
        assert Color(0.1 + 0.2, 0.0, 0.0).approx_equal(Color(0.3, 0.0, 0.0))
        assert not Color(0.3, 0.0, 0.0).approx_equal(Color(0.31, 0.0, 0.0))


class TestColourParseError:
    def test_carries_text(self) -> None:
        err = ColourParseError('#zz')
        assert err.text == '#zz'
        assert '#zz' in str(err)
        assert isinstance(err, ValueError)


class TestLayout:
    def test_shifts(self) -> None:
        assert RGB.shifts == {'r': 16, 'g': 8, 'b': 0}
        assert RGBA.shifts == {'r': 24, 'g': 16, 'b': 8, 'a': 0}
        assert ARGB.shifts == {'a': 24, 'r': 16, 'g': 8, 'b': 0}

    def test_digits(self) -> None:
        assert (RGB.digits, RGBA.digits, ARGB.digits) == (6, 8, 8)

    def test_has_alpha(self) -> None:
        assert not RGB.has_alpha
        assert RGBA.has_alpha

    def test_get_layout(self) -> None:
        assert get_layout('ARGB') is ARGB
        assert get_layout(RGBA) is RGBA
        assert set(LAYOUTS) == {'rgb', 'rgba', 'argb'}

    def test_unknown_layout_lists_available(self) -> None:
        with pytest.raises(KeyError, match='argb, rgb, rgba'):
            get_layout('bgra')


class TestCommand:
    def test_execute_calls_run(self) -> None:
        cmd = Command(name='demo')
        seen = []

        @cmd.run
        def run(args, report, settings):
            seen.append((args, settings))
            report.note('ran', True)

        report = Report()
        cmd.execute('args', report, 'settings')
        assert seen == [('args', 'settings')]
        assert report.notes == {'ran': True}

    def test_execute_without_run_raises(self) -> None:
        with pytest.raises(RuntimeError):
            Command(name='empty').execute(None, Report(), None)

    def test_summary_prefers_doc(self) -> None:
        cmd = Command(name='x', help='short help')
        cmd.doc = 'First line.\n\nMore detail.'
        assert cmd.summary == 'First line.'

    def test_add_arguments_optional(self) -> None:
        Command(name='bare').add_arguments(object())


class TestReport:
    def test_add_entry(self) -> None:
        report = Report(command='parse')
        report.add('red', {'bytes': [255, 0, 0, 255]})
        assert report.entries == [{'label': 'red', 'bytes': [255, 0, 0, 255]}]
