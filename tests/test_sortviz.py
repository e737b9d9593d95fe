import struct

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from eposlib.graphics import GraphicDevice, rgb
from eposlib.sortviz import (
    MAX_SECTIONS,
    BubbleSortAnimation,
    draw_array,
    generate_arrays,
    main,
)


def _device(width=10, height=12):
    return GraphicDevice(x_resolution=width, y_resolution=height, bits_per_pixel=32)


def _pixel(device, x, y):
    offset = y * device.bytes_per_scan_line + x * 4
    return struct.unpack_from("<I", device.frame_buffer, offset)[0]


def _as_stored(cr):
    # 32-bit pixels are stored as 0xAARRGGBB.
    r, g, b = cr & 0xFF, (cr >> 8) & 0xFF, (cr >> 16) & 0xFF
    return (r << 16) | (g << 8) | b


def _inversions(values):
    return sum(
        1
        for i, a in enumerate(values)
        for b in values[i + 1 :]
        if a > b
    )


def test_generate_arrays_shape_and_range():
    arrays = generate_arrays(3, 20, 123456)
    assert len(arrays) == 3
    assert all(len(a) == 20 for a in arrays)
    assert all(1 <= v <= 20 for a in arrays for v in a)


def test_generate_arrays_is_deterministic_and_continuous():
    assert generate_arrays(2, 8, 42) == generate_arrays(2, 8, 42)
    assert generate_arrays(2, 8, 42)[0] == generate_arrays(1, 8, 42)[0]


def test_generate_arrays_clamps_sections():
    assert len(generate_arrays(25, 4, 1)) == MAX_SECTIONS


def test_generate_arrays_rejects_zero_size():
    with pytest.raises(ValueError):
        generate_arrays(1, 0, 1)


def test_draw_array_bars_and_separator():
    device = _device()
    draw_array(device, [5, 1, 3, 2, 4], 0, 1)
    red = _as_stored(rgb(255, 0, 0))
    grey = _as_stored(rgb(128, 128, 128))
    assert all(_pixel(device, x, 0) == grey for x in range(10))
    # Full-height bar for the maximum value, from the bottom row up.
    assert all(_pixel(device, 0, y) == red for y in range(2, 12))
    assert _pixel(device, 0, 1) == 0
    # Bar for value 1 is two pixels tall.
    assert _pixel(device, 2, 11) == red
    assert _pixel(device, 2, 10) == red
    assert _pixel(device, 2, 9) == 0


def test_draw_array_uses_section_colour():
    device = _device(height=24)
    draw_array(device, [2, 2], 1, 2)
    green = _as_stored(rgb(0, 255, 0))
    assert _pixel(device, 0, 23) == green
    assert _pixel(device, 0, 11) == 0


def test_draw_array_rejects_empty():
    with pytest.raises(ValueError):
        draw_array(_device(), [], 0, 1)


def test_animation_rejects_no_arrays():
    with pytest.raises(ValueError):
        BubbleSortAnimation(_device(), [])


def test_animation_sorts_and_counts_swaps():
    arrays = [[4, 3, 2, 1], [1, 2, 3, 4], [2, 4, 1, 3]]
    expected_swaps = sum(_inversions(a) for a in arrays)
    animation = BubbleSortAnimation(_device(height=30), arrays)
    result = animation.run()
    assert result == [sorted(a) for a in arrays]
    assert animation.swaps == expected_swaps
    assert animation.done
    assert animation.step() is False


def test_animation_does_not_modify_input():
    original = [3, 1, 2]
    BubbleSortAnimation(_device(), [original]).run()
    assert original == [3, 1, 2]


def test_bars_are_ordered_after_run():
    arrays = generate_arrays(1, 5, 7)
    device = _device()
    BubbleSortAnimation(device, arrays).run()
    red = _as_stored(rgb(255, 0, 0))
    heights = [
        sum(1 for y in range(12) if _pixel(device, x, y) == red)
        for x in range(0, 10, 2)
    ]
    assert heights == sorted(heights)


@settings(max_examples=25, deadline=None)
@given(st.lists(st.lists(st.integers(1, 6), min_size=1, max_size=6), min_size=1, max_size=3))
def test_animation_sorts_any_input(arrays):
    animation = BubbleSortAnimation(_device(width=6, height=12), arrays)
    assert animation.run() == [sorted(a) for a in arrays]


def test_main_reports_sorted_sections(capsys):
    code = main(["--width", "8", "--height", "8", "--sections", "2", "--size", "4"])
    out = capsys.readouterr().out
    assert code == 0
    lines = out.splitlines()
    assert lines[0].startswith("section 0:")
    values = [int(v) for v in lines[0].split(":")[1].split()]
    assert values == sorted(values)
    assert lines[-1].endswith("rounds")