"""Tests for the page layout engine."""

import cv2
import numpy as np
import pytest

from targets.layout import (
    PageLayoutEngine,
    PatternMode,
    SheetLayout,
    TargetWriteError,
    TiledLayout,
    grid_positions,
    output_filename,
    save_canvas,
)
from targets.markers import MarkerGenerator
from targets.units import mm_to_px


PAGE_W = mm_to_px(280)  # 3307
PAGE_H = mm_to_px(200)  # 2362
TILE_PX = mm_to_px(50)  # 591


def test_five_tiles_per_row():
    positions = list(grid_positions(3307, 118 + 591 + 1, 177, 118, 591, 24))
    assert [x for x, _ in positions] == [177, 792, 1407, 2022, 2637]
    assert all(y == 118 for _, y in positions)


def test_grid_never_exceeds_bounds():
    for x, y in grid_positions(PAGE_W, PAGE_H, 177, 118, 591, 24):
        assert x + 591 < PAGE_W
        assert y + 591 < PAGE_H


def test_grid_exact_fit_is_dropped():
    # A tile ending exactly on the bound does not fit
    assert list(grid_positions(100, 100, 0, 0, 100, 0)) == []
    assert list(grid_positions(101, 101, 0, 0, 100, 0)) == [(0, 0)]


def test_grid_degenerate_canvas():
    assert list(grid_positions(0, 0, 0, 0, 10, 2)) == []


def test_output_filenames():
    assert output_filename(PatternMode.CHESSBOARD_SHEET) == "Chessboard_A4_print.png"
    assert output_filename(PatternMode.ARUCO_MARKER) == "ArUco_A4_print.png"
    assert output_filename(PatternMode.CHESSBOARD_TILE) == "ArUco_A4_print.png"


def test_mode_parsed_from_value():
    assert PatternMode("aruco") == PatternMode.ARUCO_MARKER
    assert PatternMode("chessboard_tile") == PatternMode.CHESSBOARD_TILE
    assert PatternMode("chessboard") == PatternMode.CHESSBOARD_SHEET


def test_engine_selects_strategy():
    assert isinstance(PageLayoutEngine(PatternMode.CHESSBOARD_SHEET).layout, SheetLayout)
    assert isinstance(PageLayoutEngine(PatternMode.CHESSBOARD_TILE).layout, TiledLayout)


def test_tiled_layout_rejects_sheet_mode():
    with pytest.raises(ValueError):
        TiledLayout(PatternMode.CHESSBOARD_SHEET)


class TestSheet:

    @pytest.fixture(scope="class")
    def canvas(self):
        return PageLayoutEngine(PatternMode.CHESSBOARD_SHEET).render()

    def test_canvas_size(self, canvas):
        assert canvas.shape == (PAGE_H, PAGE_W)
        assert canvas.dtype == np.uint8

    def test_board_is_centered(self, canvas):
        square_px = mm_to_px(20)
        # (3307 - 2832) / 2 and (2362 - 1888) / 2, truncated
        off_x, off_y = 237, 237
        half = square_px // 2
        assert canvas[off_y + half, off_x + half] == 255
        assert canvas[off_y + half, off_x + square_px + half] == 0
        assert canvas[off_y + square_px + half, off_x + half] == 0
        assert canvas[off_y + square_px + half, off_x + square_px + half] == 255
        # Last cell (7, 11) is even parity, white
        assert canvas[off_y + 7 * square_px + half, off_x + 11 * square_px + half] == 255

    def test_board_offset_is_exact(self, canvas):
        square_px = mm_to_px(20)
        half = square_px // 2
        # Cell (0, 1) starts exactly one square after the 237 px offset
        assert canvas[237 + half, 237 + square_px - 1] == 255
        assert canvas[237 + half, 237 + square_px] == 0
        # Cell (1, 0) starts exactly one square below the offset
        assert canvas[237 + square_px - 1, 237 + half] == 255
        assert canvas[237 + square_px, 237 + half] == 0
        # Cell (1, 0) is the first black column of the board
        assert canvas[237 + square_px + half, 236] == 255
        assert canvas[237 + square_px + half, 237] == 0

    def test_caption_at_bottom(self, canvas):
        board_bottom = 237 + 1888
        assert np.any(canvas[board_bottom + 10:, :] < 128)

    def test_ruler_near_top_left(self, canvas):
        y = mm_to_px(10)
        x = mm_to_px(20) + mm_to_px(50)
        assert canvas[y, x] == 0

    def test_caption_text(self):
        assert SheetLayout().caption == (
            "Chessboard | 7x11 | square size : 20.0mm | HBUT L-Create | RoboMaster"
        )


class TestTiled:

    def test_chessboard_tiles_fill_grid(self):
        engine = PageLayoutEngine(PatternMode.CHESSBOARD_TILE)
        canvas = engine.render()
        placed = engine.layout.placed

        assert canvas.shape == (PAGE_H, PAGE_W)
        assert len(placed) == 15
        assert {p.x for p in placed} == {177, 792, 1407, 2022, 2637}
        assert {p.y for p in placed} == {118, 733, 1348}
        assert all(p.marker_id is None for p in placed)
        assert all(
            p.caption == "Chessboard | size:4.0mm | 8x11 | HBUT L-Create"
            for p in placed
        )
        for p in placed:
            assert p.x + p.size < PAGE_W
            assert p.y + p.size < PAGE_H

    def test_tile_border_on_canvas(self):
        engine = PageLayoutEngine(PatternMode.CHESSBOARD_TILE)
        canvas = engine.render()
        assert canvas[118, 177 + 300] == 0
        assert canvas[118 + 300, 177] == 0
        # Spacing between tiles stays blank
        assert canvas[118 + 300, 177 + TILE_PX + 5] == 255

    def test_marker_ids_sequential(self):
        engine = PageLayoutEngine(PatternMode.ARUCO_MARKER)
        engine.render()
        placed = engine.layout.placed
        assert [p.marker_id for p in placed] == list(range(1, 16))
        assert placed[0].caption == "6X6 | 40.0mm | ID:1 | HBUT L-Create"
        assert placed[-1].caption == "6X6 | 40.0mm | ID:15 | HBUT L-Create"

    def test_render_twice_gives_same_page(self):
        engine = PageLayoutEngine(PatternMode.ARUCO_MARKER)
        first = engine.render()
        second = engine.render()

        assert np.array_equal(first, second)
        assert len(engine.layout.placed) == 15
        assert [p.marker_id for p in engine.layout.placed] == list(range(1, 16))

    def test_marker_mode_stops_at_dictionary_size(self):
        layout = TiledLayout(
            PatternMode.ARUCO_MARKER,
            marker_generator=MarkerGenerator(dictionary_size=5),
        )
        engine = PageLayoutEngine(PatternMode.ARUCO_MARKER, layout=layout)
        canvas = engine.render()

        assert [p.marker_id for p in layout.placed] == [1, 2, 3, 4]
        # Fifth cell of the first row stays blank
        assert canvas[118 + 300, 2637 + 300] == 255

    def test_full_dictionary_halts_before_250(self):
        layout = TiledLayout(
            PatternMode.ARUCO_MARKER,
            tile_mm=5.0,
            spacing_mm=0.0,
            init_mm=(0.0, 0.0),
            marker_mm=4.0,
        )
        engine = PageLayoutEngine(
            PatternMode.ARUCO_MARKER, page_mm=(100.0, 100.0), layout=layout
        )
        engine.render()
        ids = [p.marker_id for p in layout.placed]
        assert ids == list(range(1, 250))

    def test_ruler_near_bottom_left(self):
        engine = PageLayoutEngine(PatternMode.CHESSBOARD_TILE)
        canvas = engine.render()
        y = PAGE_H - mm_to_px(20)
        assert canvas[y, mm_to_px(20) + mm_to_px(50)] == 0


def test_save_canvas(tmp_path):
    canvas = np.full((40, 60), 255, dtype=np.uint8)
    canvas[10:20, 10:20] = 0
    path = save_canvas(canvas, tmp_path / "nested" / "page.png")
    assert path.exists()
    loaded = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)
    assert np.array_equal(loaded, canvas)


def test_save_canvas_failure(tmp_path, monkeypatch):
    monkeypatch.setattr(cv2, "imwrite", lambda *args, **kwargs: False)
    with pytest.raises(TargetWriteError):
        save_canvas(np.zeros((10, 10), dtype=np.uint8), tmp_path / "page.png")
