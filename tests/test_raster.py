import numpy as np
import pytest
from PIL import Image

from txtimg.model import RenderOptions
from txtimg.palette import luminance
from txtimg.raster import load_image, rasterize


def test_output_shape_matches_options():
    img = Image.new("RGB", (50, 60), (10, 20, 30))
    samples = rasterize(img, RenderOptions(width=7, height=3))
    assert samples.shape == (3, 7, 3)
    assert samples.dtype == np.uint8


@pytest.mark.parametrize("width,height", [(1, 1), (5, 2), (40, 30), (3, 17)])
def test_any_target_size_is_exact(width, height):
    img = Image.new("RGB", (16, 9), (200, 100, 50))
    samples = rasterize(img, RenderOptions(width=width, height=height))
    assert samples.shape == (height, width, 3)


def test_upsampling_small_source():
    img = Image.new("RGB", (2, 2), (90, 90, 90))
    samples = rasterize(img, RenderOptions(width=8, height=8))
    assert samples.shape == (8, 8, 3)
    np.testing.assert_allclose(samples, 90, atol=1)


def test_same_size_is_untouched():
    img = Image.new("RGB", (2, 1))
    img.putpixel((0, 0), (255, 0, 0))
    img.putpixel((1, 0), (0, 0, 255))
    samples = rasterize(img, RenderOptions(width=2, height=1))
    assert tuple(samples[0, 0]) == (255, 0, 0)
    assert tuple(samples[0, 1]) == (0, 0, 255)


def test_solid_colour_survives_downsampling():
    img = Image.new("RGB", (40, 20), (12, 200, 99))
    samples = rasterize(img, RenderOptions(width=4, height=2))
    np.testing.assert_allclose(samples.reshape(-1, 3), [[12, 200, 99]] * 8, atol=1)


def test_dark_and_bright_halves_stay_ordered():
    img = Image.new("RGB", (40, 10), (0, 0, 0))
    for y in range(10):
        for x in range(20, 40):
            img.putpixel((x, y), (255, 255, 255))
    samples = rasterize(img, RenderOptions(width=2, height=1))
    left = luminance(tuple(int(v) for v in samples[0, 0]))
    right = luminance(tuple(int(v) for v in samples[0, 1]))
    assert left < right


def test_greyscale_and_alpha_are_flattened_to_rgb():
    grey = Image.new("L", (4, 4), 128)
    rgba = Image.new("RGBA", (4, 4), (10, 20, 30, 0))
    assert rasterize(grey, RenderOptions(width=4, height=4)).shape == (4, 4, 3)
    assert tuple(rasterize(rgba, RenderOptions(width=4, height=4))[0, 0]) == (10, 20, 30)


def test_accepts_file_path(tmp_path):
    path = tmp_path / "test.png"
    Image.new("RGB", (6, 6), (1, 2, 3)).save(path)
    samples = rasterize(path, RenderOptions(width=6, height=6))
    assert tuple(samples[3, 3]) == (1, 2, 3)
    assert load_image(str(path)).mode == "RGB"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image(tmp_path / "nope.png")


def test_path_source_is_closed(tmp_path, monkeypatch):
    path = tmp_path / "anim.gif"
    frames = [Image.new("RGB", (4, 4), c) for c in [(255, 0, 0), (0, 0, 255)]]
    frames[0].save(path, save_all=True, append_images=frames[1:])

    opened = []
    real_open = Image.open

    def tracking_open(*args, **kwargs):
        image = real_open(*args, **kwargs)
        opened.append(image)
        return image

    monkeypatch.setattr(Image, "open", tracking_open)
    assert load_image(path).mode == "RGB"
    assert len(opened) == 1
    assert opened[0].fp is None
