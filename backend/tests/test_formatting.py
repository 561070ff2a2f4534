import unittest
from datetime import date, datetime, timedelta, timezone

from beyond_ys.formatting import (
    UNKNOWN_RELEASE_DATE,
    UNKNOWN_RELEASE_YEAR,
    format_iso,
    format_release_date,
    format_release_year,
    format_seconds,
    parse_release_date,
    to_iso_string,
)


class FormatSecondsTests(unittest.TestCase):
    def test_zero_and_negative(self):
        self.assertEqual(format_seconds(0), "0:00")
        self.assertEqual(format_seconds(-12), "0:00")

    def test_minutes(self):
        self.assertEqual(format_seconds(5), "0:05")
        self.assertEqual(format_seconds(59), "0:59")
        self.assertEqual(format_seconds(61), "1:01")
        self.assertEqual(format_seconds(3599), "59:59")

    def test_hours(self):
        self.assertEqual(format_seconds(3600), "1:00:00")
        self.assertEqual(format_seconds(3725), "1:02:05")

    def test_fractions_are_floored(self):
        self.assertEqual(format_seconds(61.9), "1:01")


class FormatIsoTests(unittest.TestCase):
    def setUp(self):
        self.value = datetime(2024, 3, 5, 7, 8, 9, 123456, tzinfo=timezone.utc)

    def test_precisions(self):
        self.assertEqual(format_iso(self.value, "year"), "2024")
        self.assertEqual(format_iso(self.value, "month"), "2024-03")
        self.assertEqual(format_iso(self.value, "day"), "2024-03-05")
        self.assertEqual(format_iso(self.value, "minute"), "2024-03-05T07:08")
        self.assertEqual(format_iso(self.value, "second"), "2024-03-05T07:08:09")
        self.assertEqual(format_iso(self.value, "millisecond"), "2024-03-05T07:08:09.123")

    def test_result_is_prefix_of_iso_string(self):
        full = to_iso_string(self.value)
        self.assertEqual(full, "2024-03-05T07:08:09.123Z")
        for precision in ("year", "month", "day", "minute", "second", "millisecond"):
            self.assertTrue(full.startswith(format_iso(self.value, precision)))

    def test_converts_to_utc(self):
        value = datetime(2024, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=2)))
        self.assertEqual(format_iso(value, "day"), "2023-12-31")

    def test_naive_datetime_and_date(self):
        self.assertEqual(format_iso(datetime(1987, 6, 21), "day"), "1987-06-21")
        self.assertEqual(format_iso(date(1987, 6, 21), "minute"), "1987-06-21T00:00")

    def test_unknown_precision(self):
        with self.assertRaises(ValueError):
            format_iso(self.value, "week")


class ReleaseDateTests(unittest.TestCase):
    def test_unknown(self):
        self.assertEqual(format_release_date(""), UNKNOWN_RELEASE_DATE)
        self.assertEqual(format_release_date(None), UNKNOWN_RELEASE_DATE)
        self.assertEqual(format_release_date("sometime"), UNKNOWN_RELEASE_DATE)
        self.assertEqual(format_release_year(""), UNKNOWN_RELEASE_YEAR)

    def test_partial_dates(self):
        self.assertEqual(format_release_date("2021"), "2021")
        self.assertEqual(format_release_date("2021-03"), "2021")
        self.assertEqual(format_release_date("2021-03-04"), "2021")
        self.assertEqual(format_release_year("1987-06-26"), "1987")

    def test_full_iso_datetime(self):
        self.assertEqual(format_release_date("2021-03-04T10:00:00Z"), "2021")
        self.assertEqual(parse_release_date("2021-03-04T10:00:00Z").month, 3)


if __name__ == "__main__":
    unittest.main()
