import pytest
import pygame

from spacewar.bullet import BULLET_SCALE, DEFAULT_BULLET_SIZE, Bullet, Rect


def test_rect_right_and_bottom():
    rect = Rect(3.0, 4.0, 10.0, 20.0)
    assert rect.right() == 13.0
    assert rect.bottom() == 24.0


def test_rect_overlapping_intersect_both_ways():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(5.0, 5.0, 10.0, 10.0)
    assert a.intersects(b) is True
    assert b.intersects(a) is True


def test_rect_touching_edges_do_not_intersect():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(10.0, 0.0, 10.0, 10.0)
    assert a.intersects(b) is False


def test_rect_disjoint_do_not_intersect():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(50.0, 50.0, 5.0, 5.0)
    assert a.intersects(b) is False


def test_rect_around_unrotated_is_centered():
    rect = Rect.around((50.0, 40.0), (10.0, 20.0))
    assert rect.left == pytest.approx(45.0)
    assert rect.top == pytest.approx(30.0)
    assert rect.width == pytest.approx(10.0)
    assert rect.height == pytest.approx(20.0)


def test_rect_around_quarter_turn_swaps_extent():
    rect = Rect.around((0.0, 0.0), (10.0, 20.0), 90.0)
    assert rect.width == pytest.approx(20.0)
    assert rect.height == pytest.approx(10.0)


def test_update_moves_by_speed_along_direction():
    bullet = Bullet(0.0, 0.0, 1.0, 0.0, 10.0, 1)
    bullet.update()
    assert bullet.x == pytest.approx(10.0)
    assert bullet.y == pytest.approx(0.0)


def test_update_faces_direction_of_travel():
    right = Bullet(0.0, 0.0, 1.0, 0.0, 10.0, 1)
    right.update()
    assert right.rotation == pytest.approx(90.0)

    up = Bullet(0.0, 0.0, 0.0, -1.0, 10.0, 2)
    up.update()
    assert up.rotation == pytest.approx(0.0)


def test_owner_is_kept():
    assert Bullet(0.0, 0.0, 0.0, 1.0, 5.0, 2).owner == 2


def test_default_size_without_image():
    bullet = Bullet(0.0, 0.0, 0.0, 1.0, 5.0, 1)
    assert bullet.size == DEFAULT_BULLET_SIZE


def test_bounds_are_centered_on_position():
    bullet = Bullet(30.0, 70.0, 0.6, 0.8, 10.0, 1)
    for _ in range(3):
        bullet.update()
        box = bullet.bounds()
        assert box.left + box.width / 2 == pytest.approx(bullet.x)
        assert box.top + box.height / 2 == pytest.approx(bullet.y)


def test_image_scales_size_and_bounds_follow_rotation():
    image = pygame.Surface((40, 80), pygame.SRCALPHA)
    bullet = Bullet(0.0, 0.0, 1.0, 0.0, 10.0, 1, image=image)
    assert bullet.size == pytest.approx((40 * BULLET_SCALE, 80 * BULLET_SCALE))
    bullet.update()
    box = bullet.bounds()
    assert box.width == pytest.approx(80 * BULLET_SCALE)
    assert box.height == pytest.approx(40 * BULLET_SCALE)


@pytest.mark.parametrize("with_image", [False, True])
def test_render_draws_at_position(with_image):
    image = None
    if with_image:
        image = pygame.Surface((400, 400), pygame.SRCALPHA)
        image.fill((255, 0, 0, 255))
    bullet = Bullet(50.0, 50.0, 0.0, -1.0, 0.0, 1, image=image)
    surface = pygame.Surface((100, 100), pygame.SRCALPHA)
    bullet.render(surface)
    drawn = surface.get_bounding_rect()
    assert drawn.collidepoint(50, 50)
    assert drawn.width < 100