import sys
import os
import unittest
from datetime import timedelta

# Add the parent directory to sys.path to import the toggler package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from toggler.reports.time_entry import TimeEntry
from toggler.reports.rounding import round_up, round_entries


def raw_entry(entry_id, start, stop, duration=None, description="Work"):
    """Build a time entry the way the Toggl API returns it."""
    return {
        "id": entry_id,
        "workspace_id": 42,
        "wid": 42,
        "billable": False,
        "start": start,
        "stop": stop,
        "duration": duration if duration is not None else 0,
        "description": description,
        "duronly": False,
        "at": "2024-03-01T18:00:00+00:00",
        "uid": 7,
    }


class TestRoundUp(unittest.TestCase):
    """Test the round_up computation."""

    def test_rounds_lower_half_up_to_next_boundary(self):
        self.assertEqual(round_up(timedelta(minutes=47), timedelta(minutes=5)), timedelta(minutes=50))
        self.assertEqual(round_up(timedelta(minutes=41), timedelta(minutes=5)), timedelta(minutes=45))

    def test_rounds_upper_half_to_nearest(self):
        self.assertEqual(round_up(timedelta(minutes=48), timedelta(minutes=5)), timedelta(minutes=50))
        self.assertEqual(round_up(timedelta(minutes=7, seconds=30), timedelta(minutes=5)), timedelta(minutes=10))

    def test_exact_multiples_unchanged(self):
        for minutes in (0, 5, 40, 60, 125):
            with self.subTest(minutes=minutes):
                d = timedelta(minutes=minutes)
                self.assertEqual(round_up(d, timedelta(minutes=5)), d)

    def test_sub_second_durations(self):
        self.assertEqual(round_up(timedelta(microseconds=1), timedelta(seconds=1)), timedelta(seconds=1))

    def test_non_positive_granularity_leaves_duration(self):
        d = timedelta(minutes=47)
        self.assertEqual(round_up(d, timedelta(0)), d)
        self.assertEqual(round_up(d, timedelta(minutes=-5)), d)

    def test_result_is_multiple_not_below_input_and_idempotent(self):
        for g_seconds in (1, 60, 300, 900):
            g = timedelta(seconds=g_seconds)
            for d_seconds in range(0, 2 * 3600, 37):
                d = timedelta(seconds=d_seconds)
                with self.subTest(d=d, g=g):
                    result = round_up(d, g)
                    self.assertGreaterEqual(result, d)
                    self.assertEqual(result % g, timedelta(0))
                    self.assertGreaterEqual(result, timedelta(0))
                    self.assertEqual(round_up(result, g), result)


class TestRoundEntries(unittest.TestCase):
    """Test which entries get selected for rounding."""

    def setUp(self):
        self.granularity = timedelta(minutes=5)

    def _round(self, raw_entries):
        return list(round_entries(TimeEntry.from_list(raw_entries), self.granularity))

    def test_entry_needing_change(self):
        rounded = self._round([raw_entry(1, "2024-03-01T09:00:00+00:00", "2024-03-01T09:47:00+00:00", 2820)])

        self.assertEqual(len(rounded), 1)
        self.assertEqual(rounded[0].entry.id, 1)
        self.assertEqual(rounded[0].old_duration, timedelta(minutes=47))
        self.assertEqual(rounded[0].new_duration, timedelta(minutes=50))
        self.assertEqual(rounded[0].new_seconds, 3000)

    def test_entry_on_boundary_excluded(self):
        rounded = self._round([raw_entry(1, "2024-03-01T09:00:00+00:00", "2024-03-01T09:40:00+00:00", 2400)])
        self.assertEqual(rounded, [])

    def test_zero_length_entry_excluded(self):
        rounded = self._round([raw_entry(1, "2024-03-01T09:00:00+00:00", "2024-03-01T09:00:00+00:00", 0)])
        self.assertEqual(rounded, [])

    def test_running_entry_excluded(self):
        running = raw_entry(1, "2024-03-01T09:00:00+00:00", None, -1709283600)
        stale_stop = raw_entry(2, "2024-03-01T09:00:00+00:00", "2024-03-01T09:47:00+00:00", -1)
        self.assertEqual(self._round([running, stale_stop]), [])

    def test_computed_duration_wins_over_reported(self):
        # reported duration says 40m, start/stop say 47m
        rounded = self._round([raw_entry(1, "2024-03-01T09:00:00+00:00", "2024-03-01T09:47:00+00:00", 2400)])
        self.assertEqual(rounded[0].old_duration, timedelta(minutes=47))

    def test_keeps_input_order(self):
        rounded = self._round([
            raw_entry(3, "2024-03-02T09:00:00+00:00", "2024-03-02T09:13:00+00:00", 780),
            raw_entry(1, "2024-03-01T09:00:00+00:00", "2024-03-01T09:40:00+00:00", 2400),
            raw_entry(2, "2024-03-01T10:00:00+00:00", "2024-03-01T10:01:00+00:00", 60),
        ])
        self.assertEqual([r.entry.id for r in rounded], [3, 2])
        self.assertEqual(rounded[1].new_duration, timedelta(minutes=5))


if __name__ == '__main__':
    unittest.main()
