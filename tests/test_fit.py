import logging
import math
from types import SimpleNamespace

import pytest
from PIL import Image

from imgfit import BoundingBox, Dimensions, InvalidDimensionsError, fit, fit_img, fit_within


@pytest.mark.parametrize(
    "source, box, expected",
    [
        ((800, 600), (400, 400), (400, 300)),  # width-bound
        ((600, 800), (400, 400), (300, 400)),  # height-bound
        ((200, 150), (400, 400), (200, 150)),  # already fits
        ((1000, 1000), (500, 300), (300, 300)),  # both exceeded, second pass
        ((100, 100), (100, 100), (100, 100)),  # exact boundary
    ],
)
def test_fit_scenarios(source, box, expected) -> None:
    result = fit(*source, *box)
    assert result.width == pytest.approx(expected[0])
    assert result.height == pytest.approx(expected[1])


SOURCES = [(800, 600), (600, 800), (1920, 1080), (1, 1000), (1000, 1), (333.3, 777.7), (50, 50)]
BOXES = [(400, 400), (100, 300), (300, 100), (1000, 1000), (2.5, 7.5)]


@pytest.mark.parametrize("source", SOURCES)
@pytest.mark.parametrize("box", BOXES)
def test_fit_properties(source, box) -> None:
    w, h = source
    max_w, max_h = box
    result = fit(w, h, max_w, max_h)

    assert result.width <= max_w
    assert result.height <= max_h
    assert result.aspect_ratio == pytest.approx(w / h, rel=1e-9)

    if w <= max_w and h <= max_h:
        assert result.as_tuple() == (w, h)
    else:
        assert result.width == max_w or result.height == max_h
        assert result.width < w and result.height < h

    again = fit(result.width, result.height, max_w, max_h)
    assert again == result


def test_fit_never_enlarges() -> None:
    result = fit(10, 20, 1000, 1000)
    assert result == Dimensions(width=10, height=20)


def test_fit_uses_original_aspect_ratio_on_second_pass() -> None:
    # 16:9 source that overflows both bounds
    result = fit(3200, 1800, 1600, 400)
    assert result.height == 400
    assert result.width == pytest.approx(400 * 16 / 9)


def test_fit_returns_new_value_each_call() -> None:
    first = fit(800, 600, 400, 400)
    second = fit(800, 600, 400, 400)
    assert first == second
    assert first is not second


def test_fit_zero_height_is_permissive() -> None:
    result = fit(800, 0, 400, 400)
    assert result.width == 400
    assert result.height == 0


def test_fit_zero_source_fits_unchanged() -> None:
    result = fit(0, 0, 400, 400)
    assert result.as_tuple() == (0, 0)


def test_fit_nan_propagates() -> None:
    result = fit(math.nan, 100, 400, 400)
    assert math.isnan(result.width)
    assert result.height == 100


def test_fit_infinite_width() -> None:
    result = fit(math.inf, 100, 400, 400)
    assert result.width == 400
    assert result.height == 0


@pytest.mark.parametrize(
    "args, field",
    [
        ((800, 0, 400, 400), "source_height"),
        ((-1, 600, 400, 400), "source_width"),
        ((800, 600, math.nan, 400), "max_width"),
        ((800, 600, 400, math.inf), "max_height"),
        ((True, 600, 400, 400), "source_width"),
        (("800", 600, 400, 400), "source_width"),
    ],
)
def test_fit_strict_rejects_invalid(args, field) -> None:
    with pytest.raises(InvalidDimensionsError) as exc_info:
        fit(*args, strict=True)
    assert exc_info.value.field == field


def test_fit_strict_accepts_valid() -> None:
    assert fit(800, 600, 400, 400, strict=True).as_tuple() == pytest.approx((400, 300))


def test_fit_logs_shrink(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="imgfit.fit"):
        fit(800, 600, 400, 400)
    assert "Shrunk 800x600" in caplog.text


def test_fit_logs_already_fits(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="imgfit.fit"):
        fit(200, 150, 400, 400)
    assert "already fits" in caplog.text


def test_fit_within_models() -> None:
    result = fit_within(Dimensions(width=600, height=800), BoundingBox(max_width=400, max_height=400))
    assert result.as_tuple() == pytest.approx((300, 400))


def test_fit_img_with_pil_image() -> None:
    img = Image.new("RGB", (800, 600))
    result = fit_img(img, 400, 400)
    assert result.to_pixels() == (400, 300)
    assert img.resize(result.to_pixels()).size == (400, 300)


def test_fit_img_with_plain_object() -> None:
    result = fit_img(SimpleNamespace(width=600, height=800), 400, 400)
    assert result.as_tuple() == pytest.approx((300, 400))


def test_fit_img_strict() -> None:
    with pytest.raises(InvalidDimensionsError):
        fit_img(SimpleNamespace(width=0, height=800), 400, 400, strict=True)
