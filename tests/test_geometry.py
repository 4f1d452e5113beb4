import math

import pytest

from clock_time import Time
from geometry import (
    SEGMENT_PALETTE,
    DrawText,
    FillCircle,
    FillSegment,
    StrokeLine,
    draw_commands,
    hour_hand_angle,
    layout,
    minute_hand_angle,
    point_at,
)


def test_midnight_hands_point_up():
    clock = layout(Time(0, 0), 700)
    assert clock.minute_hand_angle == 0
    assert clock.hour_hand_angle == 0
    cx, cy = clock.center
    assert clock.minute_hand.tip[0] == pytest.approx(cx)
    assert clock.minute_hand.tip[1] < cy


def test_three_oclock_is_a_quarter_turn():
    assert hour_hand_angle(Time(3, 0)) == pytest.approx(math.pi / 2)


def test_hour_hand_moves_with_minutes():
    assert hour_hand_angle(Time(6, 30)) == pytest.approx(6.5 / 12 * 2 * math.pi)
    assert hour_hand_angle(Time(1, 30)) == pytest.approx(1.5 / 12 * 2 * math.pi)


def test_afternoon_hours_fold_onto_the_dial():
    assert hour_hand_angle(Time(15, 0)) == pytest.approx(hour_hand_angle(Time(3, 0)))


def test_minute_hand_angle():
    assert minute_hand_angle(Time(0, 15)) == pytest.approx(math.pi / 2)
    assert minute_hand_angle(Time(0, 45)) == pytest.approx(3 * math.pi / 2)


def test_point_at_uses_screen_coordinates():
    assert point_at((0, 0), 10, 0) == pytest.approx((0, -10))
    assert point_at((0, 0), 10, math.pi / 2) == pytest.approx((10, 0))
    assert point_at((0, 0), 10, math.pi) == pytest.approx((0, 10))


def test_tick_counts_and_angles():
    clock = layout(Time(), 700)
    major = [t for t in clock.ticks if t.major]
    minor = [t for t in clock.ticks if not t.major]
    assert len(major) == 12
    assert len(minor) == 60
    assert [t.angle for t in major] == pytest.approx([n / 12 * 2 * math.pi for n in range(12)])
    assert [t.angle for t in minor] == pytest.approx([n / 60 * 2 * math.pi for n in range(60)])
    assert major[0].width > minor[0].width


def test_segments_cover_the_dial_with_repeating_palette():
    clock = layout(Time(), 700)
    assert len(clock.segments) == 12
    assert sum(s.sweep for s in clock.segments) == pytest.approx(2 * math.pi)
    assert clock.segment_boundaries == pytest.approx([math.pi / 2 + n * 2 * math.pi / 12 for n in range(12)])
    for n in range(6):
        assert clock.segments[n].color == clock.segments[n + 6].color == SEGMENT_PALETTE[n]


def test_red_segment_starts_at_three_oclock():
    red = layout(Time(), 700).segments[0]
    assert red.color == (255, 0, 0)
    assert red.start_angle == pytest.approx(math.pi / 2)


def test_numerals_sit_at_their_hour():
    clock = layout(Time(), 700)
    assert [n.text for n in clock.numerals] == [str(i) for i in range(1, 13)]
    twelve = clock.numerals[-1]
    assert twelve.angle == pytest.approx(2 * math.pi)
    assert twelve.center[0] == pytest.approx(clock.center[0])
    three = clock.numerals[2]
    assert three.center[1] == pytest.approx(clock.center[1])
    assert three.center[0] > clock.center[0]


def test_layout_scales_linearly():
    small = layout(Time(4, 20), 100)
    large = layout(Time(4, 20), 300)
    assert large.face_radius == pytest.approx(3 * small.face_radius)
    assert large.minute_hand.tip == pytest.approx(tuple(3 * c for c in small.minute_hand.tip))
    assert large.numerals[0].font_size == pytest.approx(3 * small.numerals[0].font_size)
    for a, b in zip(small.ticks, large.ticks):
        assert b.outer == pytest.approx(tuple(3 * c for c in a.outer))


def test_minute_hand_is_longer_than_hour_hand():
    clock = layout(Time(0, 0), 700)
    cx, cy = clock.center
    assert cy - clock.minute_hand.tip[1] > cy - clock.hour_hand.tip[1]


def test_draw_commands_paint_order():
    commands = draw_commands(layout(Time(10, 10), 700))
    kinds = [type(c) for c in commands]
    assert kinds[0] is FillCircle
    assert kinds[1:13] == [FillSegment] * 12
    assert kinds[13:85] == [StrokeLine] * 72
    assert kinds[85:97] == [DrawText] * 12
    assert kinds[97:] == [StrokeLine, StrokeLine]
    assert commands[0].color == (255, 255, 255)


def test_hands_start_at_center():
    clock = layout(Time(10, 10), 700)
    minute, hour = draw_commands(clock)[-2:]
    assert minute.start == hour.start == clock.center
    assert minute.end == clock.minute_hand.tip
    assert hour.end == clock.hour_hand.tip
