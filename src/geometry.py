"""Clock face layout.

Everything here is a pure function of a ``Time`` and the side length of the
square canvas. Angles are radians measured clockwise from 12 o'clock; canvas
coordinates have their origin top-left with y growing downward, which is what
QPainter expects.
"""

import math
from dataclasses import dataclass
from typing import List, Tuple, Union

from clock_time import Time

TAU = 2 * math.pi

Point = Tuple[float, float]
RGB = Tuple[int, int, int]

WHITE: RGB = (255, 255, 255)
BLACK: RGB = (0, 0, 0)

# red, orange, yellow, green, blue, purple; repeats once around the dial
SEGMENT_PALETTE: List[RGB] = [
    (255, 0, 0),
    (240, 128, 0),
    (255, 255, 0),
    (0, 128, 0),
    (0, 0, 255),
    (128, 0, 128),
]

SEGMENT_COUNT = 12
# the first (red) segment starts at 3 o'clock
SEGMENT_ORIGIN = TAU / 4
MAJOR_TICK_COUNT = 12
MINOR_TICK_COUNT = 60

# fractions of the canvas side length
FACE_RADIUS_RATIO = 0.5
SEGMENT_INNER_RATIO = 0.4
SEGMENT_OUTER_RATIO = 0.48
MAJOR_TICK_INNER_RATIO = SEGMENT_INNER_RATIO
MINOR_TICK_INNER_RATIO = 0.45
TICK_OUTER_RATIO = SEGMENT_OUTER_RATIO
MAJOR_TICK_WIDTH_RATIO = 0.02
MINOR_TICK_WIDTH_RATIO = 0.01
NUMERAL_RING_RATIO = 0.3625
NUMERAL_FONT_RATIO = 0.06
MINUTE_HAND_RATIO = 0.325
HOUR_HAND_RATIO = 0.1625
HAND_WIDTH_RATIO = 0.02


@dataclass(frozen=True)
class Tick:
    angle: float
    inner: Point
    outer: Point
    width: float
    major: bool


@dataclass(frozen=True)
class Segment:
    start_angle: float
    sweep: float
    inner_radius: float
    outer_radius: float
    color: RGB


@dataclass(frozen=True)
class Numeral:
    text: str
    angle: float
    center: Point
    font_size: float


@dataclass(frozen=True)
class Hand:
    angle: float
    tip: Point
    width: float


@dataclass(frozen=True)
class ClockLayout:
    center: Point
    face_radius: float
    minute_hand: Hand
    hour_hand: Hand
    ticks: List[Tick]
    numerals: List[Numeral]
    segments: List[Segment]

    @property
    def minute_hand_angle(self):
        return self.minute_hand.angle

    @property
    def hour_hand_angle(self):
        return self.hour_hand.angle

    @property
    def segment_boundaries(self):
        return [s.start_angle for s in self.segments]


def point_at(center: Point, radius: float, angle: float) -> Point:
    """Canvas coordinates of the point ``radius`` away from ``center`` at a clock angle."""
    cx, cy = center
    return (cx + radius * math.sin(angle), cy - radius * math.cos(angle))


def minute_hand_angle(time: Time) -> float:
    return time.minutes / 60 * TAU


def hour_hand_angle(time: Time) -> float:
    # continuous: at 1:30 the hand sits halfway between 1 and 2
    return ((time.hours % 12) + time.minutes / 60) / 12 * TAU


def _ticks(center, size, count, inner_ratio, width_ratio, major):
    ticks = []
    for n in range(count):
        angle = n / count * TAU
        ticks.append(Tick(
            angle=angle,
            inner=point_at(center, size * inner_ratio, angle),
            outer=point_at(center, size * TICK_OUTER_RATIO, angle),
            width=size * width_ratio,
            major=major,
        ))
    return ticks


def layout(time: Time, canvas_size: float) -> ClockLayout:
    """Project ``time`` onto a square canvas of side ``canvas_size``."""
    center = (canvas_size / 2, canvas_size / 2)
    sweep = TAU / SEGMENT_COUNT

    segments = [
        Segment(
            start_angle=SEGMENT_ORIGIN + sweep * n,
            sweep=sweep,
            inner_radius=canvas_size * SEGMENT_INNER_RATIO,
            outer_radius=canvas_size * SEGMENT_OUTER_RATIO,
            color=SEGMENT_PALETTE[n % len(SEGMENT_PALETTE)],
        )
        for n in range(SEGMENT_COUNT)
    ]

    ticks = _ticks(center, canvas_size, MAJOR_TICK_COUNT,
                   MAJOR_TICK_INNER_RATIO, MAJOR_TICK_WIDTH_RATIO, True)
    ticks += _ticks(center, canvas_size, MINOR_TICK_COUNT,
                    MINOR_TICK_INNER_RATIO, MINOR_TICK_WIDTH_RATIO, False)

    numerals = []
    for n in range(12):
        angle = TAU / 12 * n + math.pi / 6
        numerals.append(Numeral(
            text=str(n + 1),
            angle=angle,
            center=point_at(center, canvas_size * NUMERAL_RING_RATIO, angle),
            font_size=canvas_size * NUMERAL_FONT_RATIO,
        ))

    m_angle = minute_hand_angle(time)
    h_angle = hour_hand_angle(time)
    hand_width = canvas_size * HAND_WIDTH_RATIO

    return ClockLayout(
        center=center,
        face_radius=canvas_size * FACE_RADIUS_RATIO,
        minute_hand=Hand(m_angle, point_at(center, canvas_size * MINUTE_HAND_RATIO, m_angle), hand_width),
        hour_hand=Hand(h_angle, point_at(center, canvas_size * HOUR_HAND_RATIO, h_angle), hand_width),
        ticks=ticks,
        numerals=numerals,
        segments=segments,
    )


# ---------------------------------------------------------------------
#  Draw commands
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class FillCircle:
    center: Point
    radius: float
    color: RGB


@dataclass(frozen=True)
class FillSegment:
    center: Point
    inner_radius: float
    outer_radius: float
    start_angle: float
    sweep: float
    color: RGB


@dataclass(frozen=True)
class StrokeLine:
    start: Point
    end: Point
    width: float
    color: RGB


@dataclass(frozen=True)
class DrawText:
    text: str
    center: Point
    font_size: float
    color: RGB


DrawCommand = Union[FillCircle, FillSegment, StrokeLine, DrawText]


def draw_commands(clock: ClockLayout) -> List[DrawCommand]:
    """Flatten a layout into commands in the order they must be painted."""
    commands: List[DrawCommand] = [FillCircle(clock.center, clock.face_radius, WHITE)]
    commands += [
        FillSegment(clock.center, s.inner_radius, s.outer_radius, s.start_angle, s.sweep, s.color)
        for s in clock.segments
    ]
    # major ticks come first in ``ticks`` so they sit under the minor ones
    commands += [StrokeLine(t.inner, t.outer, t.width, BLACK) for t in clock.ticks]
    commands += [DrawText(n.text, n.center, n.font_size, BLACK) for n in clock.numerals]
    for hand in (clock.minute_hand, clock.hour_hand):
        commands.append(StrokeLine(clock.center, hand.tip, hand.width, BLACK))
    return commands
