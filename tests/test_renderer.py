import numpy as np
import pytest

from extruded_text_gif.config import BACKGROUND_COLOR, AnimationConfig
from extruded_text_gif.renderer import ExtrudedTextRenderer
from extruded_text_gif.sizing import compute_canvas_size
from extruded_text_gif.timing import compute_frame_params


def make_renderer(font, text="Hi", frame_count=4, depth=4):
    config = AnimationConfig(text=text, output_path="unused.gif", frame_count=frame_count, depth=depth)
    size = compute_canvas_size(text, depth, font)
    return ExtrudedTextRenderer(config, size, font)


def test_frame_matches_canvas_size(font):
    renderer = make_renderer(font)
    frame = renderer.render_frame(0)

    size = renderer.canvas_size
    assert frame.shape == (size.height, size.width, 3)
    assert frame.dtype == np.uint8
    assert not frame.flags.writeable


def test_frame_is_opaque_ghost_white_around_text(font):
    frame = make_renderer(font).render_frame(1)
    for y, x in [(0, 0), (0, -1), (-1, 0), (-1, -1)]:
        assert tuple(frame[y, x]) == BACKGROUND_COLOR


def test_rendering_is_deterministic(font):
    renderer = make_renderer(font)
    assert np.array_equal(renderer.render_frame(2), renderer.render_frame(2))


def test_flat_text_has_only_face_colour(font):
    frame = make_renderer(font, depth=0).render_frame(0).astype(np.int32)
    r, g, b = frame[..., 0], frame[..., 1], frame[..., 2]

    # Frame 0 face is pure red; every pixel blends ghost white with red,
    # so green and blue shrink together.
    assert np.all(np.abs(g * 255 - b * 248) <= 6 * 255)
    assert np.any((r > 240) & (g < 20) & (b < 20))


def test_extrusion_draws_darkened_side_colour(font):
    flat = make_renderer(font, depth=0).render_frame(0).astype(np.int32)
    deep = make_renderer(font, depth=4).render_frame(0).astype(np.int32)

    def side_pixels(frame):
        # Side colour for hue 0 is a dark magenta: blue without green
        return np.any((frame[..., 2] > 80) & (frame[..., 1] < 30))

    assert not side_pixels(flat)
    assert side_pixels(deep)


def test_layer_origin_lands_on_nudged_canvas_centre(font):
    renderer = make_renderer(font)
    size = renderer.canvas_size
    for index in range(4):
        M = renderer.transform_matrix(compute_frame_params(index, 4))
        ox, oy = renderer.layer_origin
        x, y = M @ np.array([ox, oy, 1.0])
        assert x == pytest.approx(size.width / 2)
        assert y == pytest.approx(size.height / 2 + 10)


def test_positive_rotation_turns_clockwise(font):
    renderer = make_renderer(font, frame_count=5)
    params = compute_frame_params(2, 5)
    assert params.rotation == pytest.approx(10.0)

    M = renderer.transform_matrix(params)
    ox, oy = renderer.layer_origin
    _, y_right = M @ np.array([ox + 100, oy, 1.0])
    # A point right of centre moves down on screen
    assert y_right > renderer.canvas_size.height / 2 + 10


def test_scale_applies_to_layer_distances(font):
    renderer = make_renderer(font, frame_count=5)
    params = compute_frame_params(2, 5)
    M = renderer.transform_matrix(params)
    ox, oy = renderer.layer_origin
    a = M @ np.array([ox, oy, 1.0])
    b = M @ np.array([ox + 100, oy, 1.0])
    assert np.hypot(*(b - a)) == pytest.approx(100 * params.scale)
