import pytest

from zwmconf.geometry import (
    P_ASPECT,
    P_BASE_SIZE,
    P_MAX_SIZE,
    P_MIN_SIZE,
    P_RESIZE_INC,
    BorderGap,
    Coordinates,
    Direction,
    Geometry,
    Position,
    SizeHints,
    Viewport,
)


def test_position_move_each_direction():
    p = Position(100, 200)
    p.move(Direction.WEST | Direction.NORTH, 7)
    assert p == Position(100 - 7, 200 - 7)
    p.move(Direction.EAST | Direction.SOUTH, 7)
    assert p == Position(100, 200)


def test_position_move_inside_clamps():
    geom = Geometry(0, 0, 50, 40)
    p = Position(-5, 999)
    p.move_inside(geom)
    assert p == Position(0, geom.h - 1)


def test_position_inside_unchanged():
    geom = Geometry(0, 0, 50, 40)
    p = Position(10, 20)
    p.move_inside(geom)
    assert p == Position(10, 20)


def test_size_hints_defaults_without_flags():
    hints = SizeHints.from_hints(0, (5, 5), (6, 6), (7, 7), (8, 8))
    assert (hints.basew, hints.minw, hints.maxw, hints.incw) == (0, 1, 0, 1)
    assert (hints.mina, hints.maxa) == (0.0, 0.0)


def test_size_hints_base_falls_back_to_min():
    hints = SizeHints.from_hints(P_MIN_SIZE, minimum=(30, 40))
    assert (hints.basew, hints.baseh) == (30, 40)
    assert (hints.minw, hints.minh) == (30, 40)


def test_size_hints_min_falls_back_to_base():
    hints = SizeHints.from_hints(P_BASE_SIZE, base=(12, 14))
    assert (hints.minw, hints.minh) == (12, 14)


def test_size_hints_max_inc_aspect():
    flags = P_MAX_SIZE | P_RESIZE_INC | P_ASPECT
    hints = SizeHints.from_hints(
        flags, maximum=(800, 600), increment=(6, 13), min_aspect=(4, 3), max_aspect=(16, 9)
    )
    assert (hints.maxw, hints.maxh) == (800, 600)
    assert (hints.incw, hints.inch) == (6, 13)
    assert hints.mina == pytest.approx(3 / 4)
    assert hints.maxa == pytest.approx(16 / 9)


def test_center_root_and_window_agree():
    g = Geometry(10, 20, 100, 50)
    root = g.center(Coordinates.ROOT)
    local = g.center(Coordinates.WINDOW)
    assert root == Position(local.x + g.x, local.y + g.y)
    assert g.contains(root, Coordinates.ROOT)
    assert g.contains(local, Coordinates.WINDOW)


def test_contains_edges():
    g = Geometry(10, 20, 100, 50)
    assert g.contains(Position(g.x, g.y), Coordinates.ROOT)
    assert not g.contains(Position(g.x + g.w, g.y), Coordinates.ROOT)
    assert not g.contains(Position(g.x, g.y + g.h), Coordinates.ROOT)
    assert g.contains(Position(0, 0), Coordinates.WINDOW)
    assert not g.contains(Position(-1, 0), Coordinates.WINDOW)


def test_intersects():
    view = Geometry(0, 0, 100, 100)
    assert Geometry(50, 50, 100, 100).intersects(view, 1)
    assert not Geometry(200, 0, 10, 10).intersects(view, 1)
    assert not Geometry(-50, 0, 10, 10).intersects(view, 1)


def test_set_pos():
    g = Geometry(0, 0, 10, 10)
    g.set_pos(Position(33, 44))
    assert (g.x, g.y) == (33, 44)


def test_menu_placement_kept_inside_area():
    area = Geometry(0, 0, 1000, 800)
    g = Geometry(0, 0, 200, 100)
    g.set_menu_placement(Position(990, 790), area, 1)
    assert g.x + g.w + 2 == area.x + area.w
    assert g.y + g.h + 2 == area.y + area.h


def test_menu_placement_at_pointer_when_room():
    area = Geometry(0, 0, 1000, 800)
    g = Geometry(0, 0, 200, 100)
    g.set_menu_placement(Position(50, 60), area, 1)
    assert (g.x, g.y) == (50, 60)


def test_submenu_placement_right_of_parent():
    area = Geometry(0, 0, 1000, 800)
    parent = Geometry(100, 100, 200, 300)
    g = Geometry(0, 0, 150, 100)
    g.set_submenu_placement(parent, area, 40, 1)
    assert g.x == parent.x + parent.w - 2
    assert g.y == parent.y + 40


def test_submenu_placement_flips_left():
    area = Geometry(0, 0, 1000, 800)
    parent = Geometry(800, 100, 150, 300)
    g = Geometry(0, 0, 150, 100)
    g.set_submenu_placement(parent, area, 780, 1)
    assert g.x == parent.x - g.w + 2
    assert g.y + g.h == area.y + area.h


def test_placement_stays_inside_area():
    area = Geometry(100, 50, 1000, 800)
    for px, py in [(0, 0), (2000, 2000), (600, 400)]:
        g = Geometry(0, 0, 300, 200)
        g.set_placement(Position(px, py), area, 2)
        assert area.x <= g.x
        assert g.x + g.w + 4 <= area.x + area.w
        assert area.y <= g.y
        assert g.y + g.h + 4 <= area.y + area.h


def test_placement_too_large_uses_origin():
    area = Geometry(100, 50, 300, 200)
    g = Geometry(0, 0, 1000, 1000)
    g.set_placement(Position(250, 150), area, 2)
    assert (g.x, g.y) == (area.x, area.y)


def test_user_placement_pulls_back_on_screen():
    area = Geometry(0, 0, 1000, 800)
    g = Geometry(5000, 5000, 100, 100)
    g.set_user_placement(area, 2)
    assert (g.x, g.y) == (area.w - 3, area.h - 3)
    g = Geometry(-5000, -5000, 100, 100)
    g.set_user_placement(area, 2)
    assert (g.x, g.y) == (-(g.w - 3), -(g.h - 3))


def test_adjust_for_maximized():
    area = Geometry(0, 0, 1000, 800)
    g = Geometry(0, 0, 996, 796)
    g.adjust_for_maximized(area, 2)
    assert (g.w, g.h) == (area.w, area.h)


def test_move_clamped():
    area = Geometry(0, 0, 1000, 800)
    g = Geometry(area.w - 5, 10, 100, 100)
    g.move(Direction.EAST, area, 2, 50)
    assert g.x == area.w - 3
    g = Geometry(10, 10, 100, 100)
    g.move(Direction.SOUTH | Direction.WEST, area, 2, 10)
    assert (g.x, g.y) == (0, 20)


def test_resize_with_increment():
    hints = SizeHints.from_hints(P_RESIZE_INC, increment=(6, 13))
    g = Geometry(0, 0, 100, 100)
    g.resize(Direction.EAST | Direction.SOUTH, hints, 1, 10)
    assert (g.w, g.h) == (100 + hints.incw, 100 + hints.inch)


def test_resize_without_increment_uses_amount():
    hints = SizeHints()
    g = Geometry(0, 0, 100, 100)
    g.resize(Direction.WEST, hints, 1, 10)
    assert g.w == 100 - 10


def test_resize_respects_minimum():
    hints = SizeHints.from_hints(P_MIN_SIZE, minimum=(95, 95))
    g = Geometry(0, 0, 100, 100)
    g.resize(Direction.WEST | Direction.NORTH, hints, 1, 10)
    assert (g.w, g.h) == (hints.minw, hints.minh)


def test_warp_to_edge():
    area = Geometry(10, 20, 1000, 800)
    g = Geometry(300, 300, 100, 100)
    g.warp_to_edge(Direction.EAST | Direction.SOUTH, area, 2)
    assert g.x + g.w + 2 == area.x + area.w
    assert g.y + g.h + 2 == area.y + area.h
    g.warp_to_edge(Direction.WEST | Direction.NORTH, area, 2)
    assert (g.x, g.y) == (area.x, area.y)


def test_snap_to_edge_within_distance():
    area = Geometry(0, 0, 1000, 800)
    g = Geometry(5, 300, 100, 100)
    g.snap_to_edge(area, 9)
    assert g.x == area.x
    g = Geometry(300, area.h - 100 - 4, 100, 100)
    g.snap_to_edge(area, 9)
    assert g.y + g.h == area.h


def test_snap_to_edge_outside_distance_unchanged():
    area = Geometry(0, 0, 1000, 800)
    g = Geometry(50, 300, 100, 100)
    g.snap_to_edge(area, 9)
    assert g == Geometry(50, 300, 100, 100)


def test_apply_border_gap():
    g = Geometry(0, 0, 1000, 800)
    gap = BorderGap(top=1, bottom=2, left=3, right=4)
    g.apply_border_gap(gap)
    assert g == Geometry(gap.left, gap.top, 1000 - 7, 800 - 3)


def test_size_hints_increment_and_bounds():
    hints = SizeHints.from_hints(
        P_BASE_SIZE | P_RESIZE_INC | P_MAX_SIZE,
        base=(4, 4),
        increment=(6, 13),
        maximum=(500, 500),
    )
    g = Geometry(0, 0, 333, 222)
    g.apply_size_hints(hints)
    assert (g.w - hints.basew) % hints.incw == 0
    assert (g.h - hints.baseh) % hints.inch == 0
    assert g.w <= 333 and g.h <= 222
    big = Geometry(0, 0, 5000, 5000)
    big.apply_size_hints(hints)
    assert (big.w, big.h) == (hints.maxw, hints.maxh)


def test_size_hints_minimum():
    hints = SizeHints.from_hints(P_MIN_SIZE, minimum=(50, 60))
    g = Geometry(0, 0, 10, 10)
    g.apply_size_hints(hints)
    assert (g.w, g.h) == (hints.minw, hints.minh)


def test_size_hints_aspect_limits():
    hints = SizeHints.from_hints(P_ASPECT, min_aspect=(2, 1), max_aspect=(2, 1))
    g = Geometry(0, 0, 400, 100)
    g.apply_size_hints(hints)
    assert g.w / g.h <= hints.maxa + 1e-9
    assert g.h == 100


def test_viewport_work_area_and_contains():
    gap = BorderGap(10, 10, 10, 10)
    vp = Viewport(1, Geometry(0, 0, 1920, 1080), gap)
    assert vp.work == Geometry(gap.left, gap.top, 1920 - 20, 1080 - 20)
    assert vp.view == Geometry(0, 0, 1920, 1080)
    assert vp.contains(Position(0, 0))
    assert not vp.contains(Position(1920, 0))


def test_viewport_does_not_alias_geometry():
    view = Geometry(0, 0, 100, 100)
    vp = Viewport(0, view, BorderGap(1, 1, 1, 1))
    view.w = 5
    assert vp.view.w == 100