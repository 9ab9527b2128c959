import unittest

from overwatch_tracker.player.structures import Platform, Region
from overwatch_tracker.player.urls import build_profile_url, parse_profile_url

BASE = "https://playoverwatch.com"


class TestUrls(unittest.TestCase):

    def test_pc_url(self):
        url = build_profile_url(Platform.PC, Region.EU, "Name-1234", base_url=BASE, locale="en-gb")
        self.assertEqual(url, "https://playoverwatch.com/en-gb/career/pc/eu/Name-1234")

    def test_console_url_ignores_region(self):
        url = build_profile_url(Platform.PSN, Region.EU, "ConsoleGuy", base_url=BASE, locale="en-gb")
        self.assertEqual(url, "https://playoverwatch.com/en-gb/career/psn/ConsoleGuy")

    def test_missing_platform_or_region(self):
        with self.assertRaises(ValueError):
            build_profile_url(Platform.NONE, Region.EU, "Name-1234")
        with self.assertRaises(ValueError):
            build_profile_url(Platform.PC, Region.NONE, "Name-1234")

    def test_round_trip(self):
        cases = [
            (Platform.PC, Region.US, "Name-1234"),
            (Platform.PC, Region.KR, "Other-99999"),
            (Platform.XBL, Region.NONE, "ConsoleGuy"),
            (Platform.PSN, Region.NONE, "Some%20Guy"),
        ]
        for platform, region, handle in cases:
            url = build_profile_url(platform, region, handle)
            self.assertEqual(url, build_profile_url(platform, region, handle))
            self.assertEqual(parse_profile_url(url), (platform, region, handle))

    def test_parse_rejects_other_urls(self):
        for url in ("https://playoverwatch.com/en-gb/", "https://playoverwatch.com/en-gb/career/pc/Name-1234",
                    "https://playoverwatch.com/en-gb/career/none/Name-1234"):
            with self.assertRaises(ValueError):
                parse_profile_url(url)


if __name__ == '__main__':
    unittest.main()
