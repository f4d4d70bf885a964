import unittest
from dataclasses import FrozenInstanceError, replace

from numberline import NumberLine, NumberLineOptions, ConfigurationError, NumberLineError


class TestNumberLine(unittest.TestCase):
    def setUp(self):
        self.options = NumberLineOptions(
            pattern=[10, 5, 5, 5],
            base_coverage=100,
            base_length=100,
            breakpoint_lower_bound=20,
            breakpoint_upper_bound=40,
            zoom_factor=10,
            zoom_step=1,
        )
        self.line = NumberLine(self.options)

    def test_initial_scale(self):
        self.assertEqual(self.line.unit_length, 20)
        self.assertEqual(self.line.unit_value, 1)
        self.assertEqual(self.line.base_unit_value, 1)
        self.assertEqual(self.line.magnification, 0)
        self.assertEqual(self.line.displacement, 0)

    def test_position_of_and_value_at(self):
        self.assertEqual(self.line.position_of(5), 100)
        self.assertEqual(self.line.value_at(100), 5)

    def test_zoom_to_wraps_unit_length_at_period(self):
        self.line.zoom_to(10)
        self.assertEqual(self.line.unit_length, 20)
        self.assertEqual(self.line.unit_value, 1)
        self.assertEqual(self.line.magnification, 10)

    def test_zoom_in_shrinks_unit_value(self):
        self.line.zoom_to(25)
        self.assertEqual(self.line.unit_length, 30)
        self.assertEqual(self.line.unit_value, 0.5)

    def test_zoom_out_grows_unit_value(self):
        self.line.zoom_to(-25)
        self.assertEqual(self.line.unit_length, 30)
        self.assertEqual(self.line.unit_value, 3)

    def test_zoom_to_is_idempotent(self):
        self.line.zoom_to(13.7)
        unit_length, unit_value = self.line.unit_length, self.line.unit_value
        self.line.zoom_to(13.7)
        self.assertEqual(self.line.unit_length, unit_length)
        self.assertEqual(self.line.unit_value, unit_value)

    def test_zoom_keeps_displacement(self):
        self.line.pan_to(120)
        self.line.zoom_to(4)
        self.assertEqual(self.line.displacement, 120)
        self.assertEqual(self.line.position_of(0), 120)

    def test_zoom_by(self):
        self.line.zoom_to(3)
        self.line.zoom_by(2.5)
        self.assertEqual(self.line.magnification, 5.5)
        self.assertAlmostEqual(self.line.unit_length, 31)

    def test_pan_to_has_no_bounds(self):
        self.line.pan_to(-1e9)
        self.assertEqual(self.line.displacement, -1e9)
        self.assertEqual(self.line.value_at(-1e9), 0)

    def test_pan_by(self):
        self.line.pan_to(10)
        self.line.pan_by(-25)
        self.assertEqual(self.line.displacement, -15)

    def test_zoom_at_keeps_anchor_value(self):
        self.line.pan_to(35)
        value = self.line.value_at(300)
        self.line.zoom_at(17, 300)
        self.assertEqual(self.line.magnification, 17)
        self.assertAlmostEqual(self.line.value_at(300), value)

    def test_round_trip(self):
        for magnification in [-33, -4.5, 0, 8, 19.9, 61]:
            self.line.zoom_to(magnification)
            self.line.pan_to(magnification * 3.1)
            for value in [-250, -1, 0, 0.5, 42]:
                self.assertAlmostEqual(self.line.value_at(self.line.position_of(value)), value)
            for position in [-80, 0, 12.5, 640]:
                self.assertAlmostEqual(self.line.position_of(self.line.value_at(position)), position)

    def test_visible_range(self):
        self.assertEqual(self.line.visible_range(45), (0, 2.25))
        self.line.pan_to(20)
        self.assertEqual(self.line.visible_range(40), (-1, 1))
        self.assertEqual(self.line.get_visible_range_str(40), "-1.0 - 1.0")

    def test_initial_magnification_and_displacement(self):
        line = NumberLine(replace(self.options, initial_magnification=5, initial_displacement=7))
        self.assertEqual(line.unit_length, 30)
        self.assertEqual(line.magnification, 5)
        self.assertEqual(line.displacement, 7)

    def test_state_snapshot(self):
        self.line.zoom_to(2)
        self.line.pan_to(9)
        state = self.line.state
        self.assertAlmostEqual(state.unit_length, 24)
        self.assertEqual(state.displacement, 9)
        self.line.pan_to(0)
        self.assertEqual(state.displacement, 9)

    def test_options_are_immutable(self):
        self.assertEqual(self.line.options.pattern, (10, 5, 5, 5))
        with self.assertRaises(FrozenInstanceError):
            self.line.options.zoom_factor = 2


class TestNumberLineConfiguration(unittest.TestCase):
    def make(self, **overrides):
        options = dict(pattern=[10, 5], base_coverage=100, base_length=100, breakpoint_lower_bound=20, breakpoint_upper_bound=40)
        options.update(overrides)
        return NumberLine(NumberLineOptions(**options))

    def test_breakpoint_order(self):
        with self.assertRaisesRegex(ConfigurationError, "Breakpoint lower bound"):
            self.make(breakpoint_lower_bound=50)

    def test_breakpoint_order_is_checked_first(self):
        with self.assertRaisesRegex(ConfigurationError, "Breakpoint lower bound"):
            self.make(breakpoint_lower_bound=50, zoom_factor=0, zoom_step=0)

    def test_equal_breakpoints_are_allowed(self):
        line = self.make(breakpoint_lower_bound=25, breakpoint_upper_bound=25)
        line.zoom_to(7)
        self.assertEqual(line.unit_length, 25)

    def test_zoom_factor_must_be_positive(self):
        with self.assertRaisesRegex(ConfigurationError, "Zoom factor"):
            self.make(zoom_factor=0)
        with self.assertRaisesRegex(ConfigurationError, "Zoom factor"):
            self.make(zoom_factor=-10)

    def test_zoom_factor_is_checked_before_zoom_step(self):
        with self.assertRaisesRegex(ConfigurationError, "Zoom factor"):
            self.make(zoom_factor=0, zoom_step=0)

    def test_zoom_step_must_be_positive(self):
        with self.assertRaisesRegex(ConfigurationError, "Zoom step"):
            self.make(zoom_step=0)

    def test_pattern_must_not_be_empty(self):
        with self.assertRaisesRegex(ConfigurationError, "at least one"):
            self.make(pattern=[])

    def test_pattern_heights_must_be_positive(self):
        with self.assertRaisesRegex(ConfigurationError, r"pattern\[1\]"):
            self.make(pattern=[10, 0, 5])
        with self.assertRaisesRegex(ConfigurationError, r"pattern\[0\]"):
            self.make(pattern=[-1])

    def test_base_values_must_be_positive(self):
        with self.assertRaisesRegex(ConfigurationError, "Base coverage"):
            self.make(base_length=0)
        with self.assertRaisesRegex(ConfigurationError, "Base coverage"):
            self.make(base_coverage=-5)

    def test_configuration_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            self.make(zoom_step=-1)
        self.assertTrue(issubclass(ConfigurationError, NumberLineError))

    def test_failure_is_logged(self):
        with self.assertLogs("numberline.scale.options", level="ERROR") as logs:
            with self.assertRaises(ConfigurationError):
                self.make(zoom_step=0)
        self.assertIn("Zoom step", logs.output[0])

    def test_defaults(self):
        line = self.make()
        self.assertEqual(line.options.zoom_factor, 10)
        self.assertEqual(line.options.zoom_step, 1)
        self.assertIsNone(line.options.label_strategy)


if __name__ == '__main__':
    unittest.main()
