import pytest

from spritecounter.render.palette import PALETTE, RED, WHITE, nearest_index, rgb

def test_rgb_lookup():
    assert len(PALETTE) == 16
    assert rgb(WHITE) == (255, 255, 255)
    with pytest.raises(IndexError):
        rgb(16)

def test_nearest_index_never_transparent():
    assert nearest_index((0, 0, 0)) == 15
    assert nearest_index((250, 30, 30)) == RED
    assert nearest_index((255, 255, 250)) == WHITE
