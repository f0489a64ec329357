"""Tests for contrast_checker.core.contrast — ratio formula and AA thresholds."""

import pytest
from contrast_checker.core.contrast import AA_LARGE_TEXT, AA_NORMAL_TEXT, contrast_ratio, meets_contrast_standard

SAMPLES = ['#000000', '#FFFFFF', '#0B0B0F', '#FF7A00', '#9CA3AF', '#34C759', '#FF3B30', '#2563EB', '#777777']


class TestContrastRatio:
    def test_white_on_black(self) -> None:
        assert contrast_ratio('#FFFFFF', '#000000') == pytest.approx(21.0)

    def test_black_on_white(self) -> None:
        assert contrast_ratio('#000000', '#FFFFFF') == pytest.approx(21.0)

    @pytest.mark.parametrize('fg', SAMPLES)
    @pytest.mark.parametrize('bg', SAMPLES)
    def test_symmetric(self, fg: str, bg: str) -> None:
        assert contrast_ratio(fg, bg) == contrast_ratio(bg, fg)

    @pytest.mark.parametrize('fg', SAMPLES)
    @pytest.mark.parametrize('bg', SAMPLES)
    def test_bounded(self, fg: str, bg: str) -> None:
        ratio = contrast_ratio(fg, bg)
        assert 1.0 <= ratio <= 21.0 + 1e-9

    @pytest.mark.parametrize('colour', SAMPLES)
    def test_self_is_one(self, colour: str) -> None:
        assert contrast_ratio(colour, colour) == pytest.approx(1.0)

    def test_both_invalid_is_one(self) -> None:
        assert contrast_ratio('invalid', 'invalid') == 1.0

    def test_invalid_does_not_raise(self) -> None:
        for bad in ['invalid', '#GGG', '', '#12', '#1234567', None]:
            contrast_ratio(bad, '#000000')

    def test_invalid_against_white_behaves_as_black(self) -> None:
        assert contrast_ratio('notacolor', '#FFFFFF') == pytest.approx(21.0)

    def test_white_on_brand_orange_below_aa(self) -> None:
        assert contrast_ratio('#FFFFFF', '#FF7A00') < AA_NORMAL_TEXT


class TestMeetsContrastStandard:
    def test_white_on_black_normal(self) -> None:
        assert meets_contrast_standard('#FFFFFF', '#000000') is True

    def test_white_on_black_large(self) -> None:
        assert meets_contrast_standard('#FFFFFF', '#000000', large_text=True) is True

    def test_low_contrast_fails(self) -> None:
        assert meets_contrast_standard('#777777', '#888888') is False

    def test_large_text_has_lower_threshold(self) -> None:
        assert meets_contrast_standard('#666666', '#CCCCCC', large_text=False) is False
        assert meets_contrast_standard('#666666', '#CCCCCC', large_text=True) is True

    def test_thresholds(self) -> None:
        assert AA_NORMAL_TEXT == 4.5
        assert AA_LARGE_TEXT == 3.0
