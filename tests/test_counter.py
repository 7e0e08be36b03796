import pygame

from spritecounter import config
from spritecounter.config import CounterDefaults
from spritecounter.engine.sprites import Scene, SpriteFlag
from spritecounter.render.font import FONT8
from spritecounter.render.image import create_bitmap, fill, image_from_rows
from spritecounter.ui import layout
from spritecounter.ui.counter import UI_SPRITE_KIND, Counter
from spritecounter.ui.layout import LayoutOptions

def pixels(img):
    w, h = img.get_size()
    return [[img.get_at_mapped((x, y)) for x in range(w)] for y in range(h)]

def test_construction_registers_ghost_sprite_and_default_position(scene):
    c = Counter("Score:", 0)
    spr = c.sprite
    assert scene.sprites_of_kind(UI_SPRITE_KIND) == [spr]
    assert spr.has_flag(SpriteFlag.GHOST)
    assert spr.z == 100
    assert (spr.x, spr.y) == (80, 10)
    assert spr.image.get_size() == (48, 9)
    assert c.render_count == 1

def test_explicit_position_including_zero(scene):
    c = Counter("A", 1, LayoutOptions(x=0, y=0))
    assert (c.sprite.x, c.sprite.y) == (0, 0)

def test_uses_passed_scene():
    other = Scene(200, 100)
    c = Counter("A", 1, scene=other)
    assert c.sprite.x == 100
    assert other.sprites_of_kind(UI_SPRITE_KIND) == [c.sprite]

def test_set_value_redraws_only_on_change():
    c = Counter("Score:", 3)
    img = c.sprite.image
    c.set_value(3)
    assert c.render_count == 1 and c.sprite.image is img
    c.set_value(10)
    assert c.render_count == 2 and c.value == 10
    assert c.sprite.image.get_width() == 48 + 6
    c.set_value(10)
    assert c.render_count == 2

def test_change_value_by_and_negative_values():
    c = Counter("Lives", 1)
    c.change_value_by(-3)
    assert c.value == -2
    assert c.render_count == 2
    # "-2" is two glyphs wide
    assert c.sprite.image.get_width() == 30 + 2 + 12 + 4
    c.change_value_by(0)
    assert c.render_count == 2

def test_redraw_keeps_position():
    c = Counter("S", 5, LayoutOptions(x=30, y=40))
    c.set_value(12345)
    assert (c.sprite.x, c.sprite.y) == (30, 40)
    assert c.sprite.rect.center == (30, 40)

def test_background_image_fixes_size():
    bg = create_bitmap(40, 20)
    fill(bg, 8)
    c = Counter("Score:", 123456, LayoutOptions(background_image=bg))
    assert c.sprite.image.get_size() == (40, 20)
    c.set_value(1)
    assert c.sprite.image.get_size() == (40, 20)
    assert c.sprite.image.get_at_mapped((0, 0)) == 8

def test_background_colour_fill_and_transparent_default():
    c = Counter("A", 1, LayoutOptions(background_color=6))
    assert c.sprite.image.get_at_mapped((0, 0)) == 6
    c2 = Counter("A", 1)
    assert c2.sprite.image.get_at_mapped((0, 0)) == 0

def test_text_colour_reaches_pixels():
    c = Counter("8", 8, LayoutOptions(text_color=5))
    colours = {p for row in pixels(c.sprite.image) for p in row}
    assert colours == {0, 5}

def test_image_label_drawn_with_key_transparency():
    icon = image_from_rows("""
        2 .
        . 2
    """)
    c = Counter(icon, 0, LayoutOptions(background_color=9))
    img = c.sprite.image
    # content: 2 + 2 + 6 wide, 5 high -> canvas 14x9, content at (2, 2)
    assert img.get_size() == (14, 9)
    assert img.get_at_mapped((2, 2)) == 2
    assert img.get_at_mapped((3, 2)) == 9
    assert img.get_at_mapped((3, 3)) == 2

def test_outline_stamps_precede_main_stamp(monkeypatch):
    calls = []
    real = layout.print_text

    def spy(img, text, x, y, color, font):
        calls.append((text, x, y, color))
        real(img, text, x, y, color, font)

    monkeypatch.setattr(layout, "print_text", spy)
    Counter("Hi", 7, LayoutOptions(text_color=1, outline_color=15))
    value_calls = [c for c in calls if c[0] == "7"]
    assert [c[3] for c in value_calls] == [15, 15, 15, 15, 1]
    x, y = value_calls[-1][1:3]
    offsets = {(cx - x, cy - y) for _, cx, cy, _ in value_calls[:4]}
    assert offsets == {(-1, -1), (1, -1), (-1, 1), (1, 1)}
    assert [c[3] for c in calls if c[0] == "Hi"] == [15, 15, 15, 15, 1]

def test_no_outline_means_single_stamp(monkeypatch):
    calls = []
    monkeypatch.setattr(layout, "print_text", lambda *a: calls.append(a[1]))
    Counter("Hi", 7)
    assert calls == ["Hi", "7"]

def test_main_colour_wins_over_outline():
    c = Counter("8", 8, LayoutOptions(text_color=1, outline_color=2, background_color=15))
    colours = {p for row in pixels(c.sprite.image) for p in row}
    assert {1, 2, 15} <= colours

def test_destroy_releases_sprite(scene):
    c = Counter("A", 1)
    c.destroy()
    c.destroy()
    assert c.destroyed
    assert scene.sprites_of_kind(UI_SPRITE_KIND) == []
    c.set_value(2)
    assert c.value == 2 and c.render_count == 1

def test_context_manager_destroys(scene):
    with Counter("A", 1) as c:
        assert not c.destroyed
    assert c.destroyed and scene.sprites_of_kind(UI_SPRITE_KIND) == []

def test_defaults_are_read_at_construction(monkeypatch):
    monkeypatch.setattr(config, "DEFAULTS", CounterDefaults(z=5, y=30, font=FONT8, padding=0))
    c = Counter("ab", 1)
    assert c.sprite.z == 5 and c.sprite.y == 30
    assert c.sprite.image.get_size() == (12 + 2 + 6, 8)

def test_true_colour_icon_keeps_its_black_pixels():
    icon = pygame.Surface((2, 2), pygame.SRCALPHA)
    icon.fill((0, 0, 0, 255))
    c = Counter(icon, 0, LayoutOptions(background_color=9))
    assert c.label.image.get_bitsize() == 8
    # content at (2, 2), see the key-transparency case above
    assert c.sprite.image.get_at_mapped((2, 2)) == 15
    assert c.sprite.image.get_at_mapped((3, 3)) == 15

def test_true_colour_background_is_quantized():
    bg = pygame.Surface((40, 20), pygame.SRCALPHA)
    bg.fill((0, 0, 0, 255))
    c = Counter("S", 1, LayoutOptions(background_image=bg))
    assert c.options.background_image.get_bitsize() == 8
    assert c.sprite.image.get_size() == (40, 20)
    assert c.sprite.image.get_at_mapped((0, 0)) == 15
