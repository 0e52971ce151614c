from touchsynth.core.curves import linear_path
from touchsynth.core.types import Bounds, Position
from touchsynth.dispatcher.input_dispatcher import sample_path
from touchsynth.tools.path_preview import render_samples


def test_render_marks_down_and_up():
    samples = sample_path(linear_path(Position(0, 0), Position(100, 0), 50), 50, 10)
    img = render_samples(samples, size=(256, 256), margin=8)
    assert img.size == (256, 256)
    # scale = 240 / 100, so the line runs from x=8 to x=248 along y=8
    assert img.getpixel((8, 8)) == (40, 200, 90, 255)
    assert img.getpixel((248, 8)) == (230, 60, 60, 255)
    assert img.getpixel((128, 128)) == (0, 0, 0, 255)


def test_render_in_given_frame():
    samples = sample_path(linear_path(Position(50, 50), Position(50, 100), 30), 30, 10)
    img = render_samples(samples, size=(100, 100), frame=Bounds(0, 0, 100, 100), margin=0)
    assert img.getpixel((50, 50)) == (40, 200, 90, 255)
    assert img.getpixel((50, 99)) == (230, 60, 60, 255)


def test_render_empty():
    img = render_samples([], size=(16, 16))
    assert img.getpixel((0, 0)) == (0, 0, 0, 255)
