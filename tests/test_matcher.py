"""
Unit tests for nearest-colour matching.

Covers:
- Euclidean RGB distance
- first-entry tie-break in both the scalar and vectorised paths
- whole-image remapping
"""

import numpy as np
import pytest

from median_cut import matcher
from median_cut.core_types import palette_to_u8_array
from median_cut.errors import EmptyPaletteError
from median_cut.matcher import (
    color_distance,
    match,
    match_index,
    nearest_palette_indices,
    remap_image,
)


class TestColorDistance:
    """Euclidean distance in RGB"""

    def test_pythagorean(self):
        assert color_distance((0, 0, 0), (3, 4, 0)) == 5.0

    def test_uint8_inputs_do_not_wrap(self):
        a = np.array([0, 0, 0], dtype=np.uint8)
        b = np.array([255, 0, 0], dtype=np.uint8)
        assert color_distance(a, b) == 255.0


class TestMatch:
    """match(pixel, palette)"""

    def test_first_duplicate_wins(self):
        palette = [(5, 5, 5), (0, 0, 0), (0, 0, 0)]
        assert match((0, 0, 0), palette) == (0, 0, 0)
        assert match_index((0, 0, 0), palette) == 1

    def test_equidistant_entries_keep_first(self):
        assert match((5, 5, 5), [(0, 5, 5), (10, 5, 5)]) == (0, 5, 5)
        assert match((5, 5, 5), [(10, 5, 5), (0, 5, 5)]) == (10, 5, 5)

    def test_exact_match_has_zero_distance(self):
        palette = [(10, 20, 30), (40, 50, 60), (70, 80, 90)]
        for entry in palette:
            found = match(entry, palette)
            assert found == entry
            assert color_distance(entry, found) == 0.0

    def test_nearest(self):
        palette = [(0, 0, 0), (128, 128, 128), (255, 255, 255)]
        assert match((100, 110, 140), palette) == (128, 128, 128)
        assert match((250, 200, 255), palette) == (255, 255, 255)

    def test_single_entry(self):
        assert match((1, 2, 3), [(200, 100, 0)]) == (200, 100, 0)

    def test_empty_palette_rejected(self):
        with pytest.raises(EmptyPaletteError):
            match((0, 0, 0), [])


class TestNearestPaletteIndices:
    """Vectorised lookup"""

    def test_agrees_with_match_index(self):
        rng = np.random.default_rng(11)
        palette = [tuple(row) for row in rng.integers(0, 256, size=(12, 3)).tolist()]
        palette += [palette[3], palette[0]]  # duplicates must never be picked
        colours = rng.integers(0, 256, size=(400, 3)).astype(np.uint8)
        colours[:14] = palette_to_u8_array(palette)

        got = nearest_palette_indices(colours, palette_to_u8_array(palette))
        expected = [match_index(tuple(c), palette) for c in colours.tolist()]
        assert got.tolist() == expected
        assert 12 not in got and 13 not in got

    def test_many_chunks_agree_with_match_index(self, monkeypatch):
        monkeypatch.setattr(matcher, "REMAP_CHUNK_ELEMENTS", 40)
        rng = np.random.default_rng(19)
        palette = [tuple(row) for row in rng.integers(0, 256, size=(16, 3)).tolist()]
        palette.append(palette[5])
        colours = rng.integers(0, 256, size=(37, 3)).astype(np.uint8)
        colours[0] = palette[5]

        # 40 // 17 = 2 rows per chunk, so the last chunk is partial
        got = nearest_palette_indices(colours, palette_to_u8_array(palette))
        for row, index in zip(colours.tolist(), got.tolist()):
            assert index == match_index(tuple(row), palette)

    def test_palette_larger_than_budget(self, monkeypatch):
        monkeypatch.setattr(matcher, "REMAP_CHUNK_ELEMENTS", 3)
        palette = [(i, i, i) for i in range(0, 250, 10)]
        colours = np.array([[12, 12, 12], [248, 248, 248], [0, 0, 0]], dtype=np.uint8)
        got = nearest_palette_indices(colours, palette_to_u8_array(palette))
        assert got.tolist() == [1, 24, 0]

    def test_ties_keep_first(self):
        pal = np.array([[0, 5, 5], [10, 5, 5]], dtype=np.uint8)
        colours = np.array([[5, 5, 5]], dtype=np.uint8)
        assert nearest_palette_indices(colours, pal).tolist() == [0]

    def test_empty_palette_rejected(self):
        with pytest.raises(EmptyPaletteError):
            nearest_palette_indices(
                np.zeros((1, 3), dtype=np.uint8), np.zeros((0, 3), dtype=np.uint8)
            )


class TestRemapImage:
    """remap_image(rgb, palette)"""

    def test_shape_and_values(self):
        rng = np.random.default_rng(5)
        img = rng.integers(0, 256, size=(9, 7, 3)).astype(np.uint8)
        palette = [(0, 0, 0), (255, 0, 0), (0, 255, 0), (255, 255, 255)]
        out = remap_image(img, palette)
        assert out.shape == img.shape
        assert out.dtype == np.uint8
        allowed = set(palette)
        assert {tuple(p) for p in out.reshape(-1, 3).tolist()} <= allowed
        assert tuple(out[4, 3].tolist()) == match(tuple(img[4, 3].tolist()), palette)

    def test_palette_colours_map_to_themselves(self):
        palette = [(10, 20, 30), (200, 100, 50)]
        img = np.array([[palette[0], palette[1]]], dtype=np.uint8)
        np.testing.assert_array_equal(remap_image(img, palette), img)

    def test_rgba_input_drops_alpha(self):
        img = np.zeros((2, 3, 4), dtype=np.uint8)
        img[..., 3] = 255
        out = remap_image(img, [(1, 1, 1)])
        assert out.shape == (2, 3, 3)
        assert (out == 1).all()

    def test_large_palette_in_small_chunks(self, monkeypatch):
        monkeypatch.setattr(matcher, "REMAP_CHUNK_ELEMENTS", 256 * 7)
        rng = np.random.default_rng(23)
        img = rng.integers(0, 256, size=(20, 15, 3)).astype(np.uint8)
        palette = [tuple(row) for row in rng.integers(0, 256, size=(256, 3)).tolist()]
        out = remap_image(img, palette)
        for y in (0, 7, 19):
            for x in (0, 9, 14):
                assert tuple(out[y, x].tolist()) == match(tuple(img[y, x].tolist()), palette)

    def test_empty_palette_rejected(self):
        with pytest.raises(EmptyPaletteError):
            remap_image(np.zeros((2, 2, 3), dtype=np.uint8), [])

    def test_wrong_shape_rejected(self):
        with pytest.raises(TypeError):
            remap_image(np.zeros((4, 3), dtype=np.uint8), [(0, 0, 0)])
