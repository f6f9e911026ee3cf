"""Tests for date header and status token resolution."""

import datetime as dt
import unittest

from scorecrawl.models import Finished, Scheduled
from scorecrawl.resolvers import MONTHS, parse_clock, parse_date, resolve_status


class TestParseDate(unittest.TestCase):
    """Verify date headers resolve to calendar dates."""

    def test_header_without_year_uses_default_year(self):
        """'February 19' should land in the supplied default year."""
        self.assertEqual(parse_date("February 19", 2023), dt.date(2023, 2, 19))

    def test_explicit_year_wins_over_default(self):
        """An explicit year token should be used and the default ignored."""
        cases = {
            "October 11, 2022": dt.date(2022, 10, 11),
            "September 6, 2022": dt.date(2022, 9, 6),
            "July 12, 2022": dt.date(2022, 7, 12),
            "December 10, 2020": dt.date(2020, 12, 10),
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                self.assertEqual(parse_date(text, 2023), expected)

    def test_every_month_name_is_recognized(self):
        """All twelve full month names should map to their month number."""
        for number, name in enumerate(MONTHS, start=1):
            with self.subTest(month=name):
                self.assertEqual(parse_date(f"{name} 1, 2021", 1999), dt.date(2021, number, 1))

    def test_month_match_is_case_sensitive(self):
        """Lower-case or abbreviated month names leave the month unset."""
        self.assertIsNone(parse_date("february 19", 2023))
        self.assertIsNone(parse_date("Feb 19", 2023))

    def test_invalid_day_for_month_returns_none(self):
        """Day 31 in a 30-day month cannot be built into a date."""
        self.assertIsNone(parse_date("September 31, 2022", 2023))
        self.assertIsNone(parse_date("February 30", 2024))

    def test_unparsable_day_returns_none(self):
        """A non-numeric day falls back to 0, which is not a valid day."""
        self.assertIsNone(parse_date("March xx, 2022", 2023))

    def test_unparsable_year_falls_back_to_default(self):
        """A garbage year token should fall back to the default year."""
        self.assertEqual(parse_date("March 3, 20x2", 2023), dt.date(2023, 3, 3))

    def test_empty_text_returns_none(self):
        self.assertIsNone(parse_date("", 2023))


class TestParseClock(unittest.TestCase):
    """Verify kick-off time parsing."""

    def test_valid_time(self):
        self.assertEqual(parse_clock("19:45"), dt.time(19, 45))

    def test_invalid_time(self):
        self.assertIsNone(parse_clock("Postp."))
        self.assertIsNone(parse_clock("25:00"))
        self.assertIsNone(parse_clock(""))


class TestResolveStatus(unittest.TestCase):
    """Verify status token classification."""

    def test_finished_tokens_read_scores(self):
        """FT, AET and AAW should produce Finished with the read scores."""
        for token in ("FT", "AET", "AAW"):
            with self.subTest(token=token):
                self.assertEqual(resolve_status(token, lambda: (2, 1)), Finished(2, 1))

    def test_clock_token_is_scheduled_and_skips_scores(self):
        """A clock time should never ask for scores."""

        def fail():
            raise AssertionError("scores must not be read for scheduled games")

        self.assertEqual(resolve_status("14:00", fail), Scheduled(dt.time(14, 0)))

    def test_unknown_token_returns_none(self):
        self.assertIsNone(resolve_status("HT", lambda: (0, 0)))


if __name__ == "__main__":
    unittest.main()
