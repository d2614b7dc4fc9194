"""Tests for core/controllers.py – ArcController hit testing and gesture flow."""

import unittest

from arcpick.core.controllers import ArcController
from arcpick.core.models import (
    Arc,
    Channel,
    Circle,
    ColorState,
    GestureState,
    PointerAction,
    PointerEvent,
)
from arcpick.geometry import point_on_circle
from arcpick.services.arc import ArcChannelMapper

CENTER = (200.0, 200.0)
RADIUS = 100.0


def _at(angle, radius=RADIUS):
    """Point on (or off, with another radius) the arc circle."""
    return point_on_circle(CENTER, radius, angle)


def _event(action, point):
    return PointerEvent(action, point[0], point[1])


class _ControllerTestCase(unittest.TestCase):
    """Saturation arc from 30 to 150 degrees with recording callbacks."""

    def setUp(self):
        self.color = ColorState(hue=120, saturation=0.5, value=1.0, alpha=1.0)
        self.mapper = ArcChannelMapper(Arc(30, 120), Channel.SATURATION, self.color)
        self.ctrl = ArcController(self.mapper)
        self.ctrl.set_layout(Circle(CENTER[0], CENTER[1], RADIUS),
                             fill_width=12, indicator_radius=10)
        self.events = []
        self.ctrl.on_selection_start = lambda c: self.events.append(('start', c))
        self.ctrl.on_selection_changed = lambda c: self.events.append(('changed', c))
        self.ctrl.on_selection_end = lambda c: self.events.append(('end', c))

    def kinds(self):
        return [kind for kind, _ in self.events]


# =============================================================================
# Hit testing
# =============================================================================

class TestContains(_ControllerTestCase):

    def test_ring_at_arc_midpoint(self):
        self.assertTrue(self.ctrl.contains(*_at(90)))

    def test_ring_inside_sweep(self):
        self.assertTrue(self.ctrl.contains(*_at(45)))
        self.assertTrue(self.ctrl.contains(*_at(140)))

    def test_same_radius_outside_sweep(self):
        self.assertFalse(self.ctrl.contains(*_at(270)))
        self.assertFalse(self.ctrl.contains(*_at(0)))

    def test_ring_tolerance(self):
        # tolerance = max(indicator 10, fill 12) = 12
        self.assertTrue(self.ctrl.is_on_arc(*_at(45, RADIUS + 11)))
        self.assertFalse(self.ctrl.is_on_arc(*_at(45, RADIUS + 13)))

    def test_center_not_in_zone(self):
        self.assertFalse(self.ctrl.contains(*CENTER))

    def test_indicator_extends_past_arc_end(self):
        """At an endpoint, the indicator disc reaches just beyond the sweep."""
        self.assertFalse(self.ctrl.contains(*_at(25)))
        self.mapper.set_channel_value(0.0)  # indicator to 30 degrees
        self.assertTrue(self.ctrl.is_on_indicator(*_at(25)))
        self.assertTrue(self.ctrl.contains(*_at(25)))

    def test_indicator_position_follows_angle(self):
        x, y = self.ctrl.indicator_position()
        ex, ey = _at(90)
        self.assertAlmostEqual(x, ex)
        self.assertAlmostEqual(y, ey)

    def test_nothing_hit_before_layout(self):
        ctrl = ArcController(self.mapper)
        self.assertFalse(ctrl.contains(10, 10))
        self.assertFalse(ctrl.is_on_indicator(10, 10))
        self.assertFalse(ctrl.is_on_arc(10, 10))

    def test_indicator_position_needs_layout(self):
        with self.assertRaises(RuntimeError):
            ArcController(self.mapper).indicator_position()


# =============================================================================
# Gesture flow
# =============================================================================

class TestGesture(_ControllerTestCase):

    def test_down_inside_starts_selection(self):
        consumed = self.ctrl.on_touch(_event(PointerAction.DOWN, _at(45)))
        self.assertTrue(consumed)
        self.assertEqual(self.ctrl.state, GestureState.ACTIVE)
        self.assertEqual(self.kinds(), ['start', 'changed'])
        self.assertAlmostEqual(self.color.saturation, 15 / 120)
        self.assertAlmostEqual(self.ctrl.current_angle(), 45)

    def test_snapshots_are_independent(self):
        self.ctrl.on_touch(_event(PointerAction.DOWN, _at(45)))
        snap = self.events[-1][1]
        self.assertIsNot(snap, self.color)
        self.ctrl.on_touch(_event(PointerAction.MOVE, _at(90)))
        self.assertAlmostEqual(snap.saturation, 15 / 120)
        self.assertAlmostEqual(self.color.saturation, 0.5)

    def test_down_outside_is_ignored(self):
        consumed = self.ctrl.on_touch(_event(PointerAction.DOWN, _at(270)))
        self.assertFalse(consumed)
        self.assertEqual(self.ctrl.state, GestureState.IDLE)
        self.assertEqual(self.events, [])
        self.assertEqual(self.color.saturation, 0.5)

    def test_move_while_idle_is_ignored(self):
        self.assertFalse(self.ctrl.on_touch(_event(PointerAction.MOVE, _at(45))))
        self.assertEqual(self.events, [])

    def test_up_while_idle_is_ignored(self):
        self.assertFalse(self.ctrl.on_touch(_event(PointerAction.UP, _at(45))))
        self.assertEqual(self.events, [])

    def test_move_off_arc_keeps_tracking(self):
        self.ctrl.on_touch(_event(PointerAction.DOWN, _at(45)))
        # Far outside the ring, at angle 0 -> snaps to arc start (30)
        consumed = self.ctrl.on_touch(PointerEvent(PointerAction.MOVE, 500, 200))
        self.assertTrue(consumed)
        self.assertEqual(self.kinds(), ['start', 'changed', 'changed'])
        self.assertEqual(self.ctrl.current_angle(), 30)
        self.assertEqual(self.color.saturation, 0.0)

    def test_move_into_complement_snaps_to_nearer_end(self):
        self.ctrl.on_touch(_event(PointerAction.DOWN, _at(100)))
        self.ctrl.on_touch(_event(PointerAction.MOVE, _at(200)))
        self.assertEqual(self.ctrl.current_angle(), 150)
        self.assertAlmostEqual(self.color.saturation, 1.0)

    def test_full_gesture(self):
        self.assertTrue(self.ctrl.on_touch(_event(PointerAction.DOWN, _at(45))))
        self.assertTrue(self.ctrl.on_touch(_event(PointerAction.MOVE, _at(60))))
        self.assertTrue(self.ctrl.on_touch(_event(PointerAction.MOVE, _at(90))))
        self.assertTrue(self.ctrl.on_touch(_event(PointerAction.UP, _at(90))))
        self.assertEqual(self.kinds(), ['start', 'changed', 'changed', 'changed', 'end'])
        self.assertEqual(self.ctrl.state, GestureState.IDLE)
        self.assertAlmostEqual(self.events[-1][1].saturation, 0.5)

    def test_changed_values_in_event_order(self):
        self.ctrl.on_touch(_event(PointerAction.DOWN, _at(40)))
        for angle in (50, 60, 70):
            self.ctrl.on_touch(_event(PointerAction.MOVE, _at(angle)))
        values = [c.saturation for kind, c in self.events if kind == 'changed']
        expected = [(a - 30) / 120 for a in (40, 50, 60, 70)]
        for got, want in zip(values, expected):
            self.assertAlmostEqual(got, want)

    def test_up_does_not_recompute(self):
        self.ctrl.on_touch(_event(PointerAction.DOWN, _at(45)))
        self.ctrl.on_touch(_event(PointerAction.UP, _at(140)))
        self.assertAlmostEqual(self.color.saturation, 15 / 120)

    def test_cancel_ends_gesture(self):
        self.ctrl.on_touch(_event(PointerAction.DOWN, _at(45)))
        self.assertTrue(self.ctrl.on_touch(_event(PointerAction.CANCEL, _at(45))))
        self.assertEqual(self.kinds(), ['start', 'changed', 'end'])
        self.assertEqual(self.ctrl.state, GestureState.IDLE)

    def test_new_gesture_after_end(self):
        self.ctrl.on_touch(_event(PointerAction.DOWN, _at(45)))
        self.ctrl.on_touch(_event(PointerAction.UP, _at(45)))
        self.events.clear()
        self.assertFalse(self.ctrl.on_touch(_event(PointerAction.MOVE, _at(90))))
        self.assertTrue(self.ctrl.on_touch(_event(PointerAction.DOWN, _at(90))))
        self.assertEqual(self.kinds(), ['start', 'changed'])

    def test_events_before_layout_are_ignored(self):
        ctrl = ArcController(self.mapper)
        ctrl.on_selection_start = lambda c: self.events.append(('start', c))
        for action in PointerAction:
            self.assertFalse(ctrl.on_touch(PointerEvent(action, 10, 10)))
        self.assertEqual(ctrl.state, GestureState.IDLE)
        self.assertEqual(self.events, [])
        self.assertEqual(self.color.saturation, 0.5)

    def test_without_callbacks(self):
        ctrl = ArcController(self.mapper, Circle(CENTER[0], CENTER[1], RADIUS), 12, 10)
        self.assertTrue(ctrl.on_touch(_event(PointerAction.DOWN, _at(45))))
        self.assertTrue(ctrl.on_touch(_event(PointerAction.UP, _at(45))))


class TestCrossingZeroGesture(unittest.TestCase):
    """Value arc 285 -> 75 with channel max 255."""

    def setUp(self):
        self.color = ColorState()
        mapper = ArcChannelMapper(Arc(285, 150), Channel.VALUE, self.color, channel_max=255)
        self.ctrl = ArcController(mapper, Circle(CENTER[0], CENTER[1], RADIUS), 12, 10)

    def test_drag_across_zero(self):
        self.ctrl.on_touch(_event(PointerAction.DOWN, _at(300)))
        self.assertAlmostEqual(self.color.value, 15 / 150 * 255)
        self.ctrl.on_touch(_event(PointerAction.MOVE, _at(30)))
        self.assertAlmostEqual(self.color.value, 105 / 150 * 255)

    def test_drag_into_complement(self):
        self.ctrl.on_touch(_event(PointerAction.DOWN, _at(300)))
        self.ctrl.on_touch(_event(PointerAction.MOVE, _at(170)))
        self.assertEqual(self.ctrl.current_angle(), 75)
        self.assertAlmostEqual(self.color.value, 255)
        self.ctrl.on_touch(_event(PointerAction.MOVE, _at(200)))
        self.assertEqual(self.ctrl.current_angle(), 285)
        self.assertAlmostEqual(self.color.value, 0)
