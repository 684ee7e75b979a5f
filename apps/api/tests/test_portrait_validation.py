#!/usr/bin/env python3

from __future__ import annotations

import unittest

from packages.portrait_core.catalog import SUPPORTED_CHARACTERS, get_character, list_characters
from packages.portrait_core.validation import (
    DEFAULT_LEVEL,
    PortraitRequest,
    PortraitRequestError,
    int_from_query,
    parse_portrait_request,
)


class IntFromQueryTests(unittest.TestCase):
    def test_missing_and_empty_are_zero(self) -> None:
        self.assertEqual(int_from_query({}, "zetas"), 0)
        self.assertEqual(int_from_query({"zetas": ""}, "zetas"), 0)

    def test_signed_integers_parse(self) -> None:
        self.assertEqual(int_from_query({"n": "12"}, "n"), 12)
        self.assertEqual(int_from_query({"n": "-3"}, "n"), -3)
        self.assertEqual(int_from_query({"n": "+4"}, "n"), 4)

    def test_non_integers_name_the_parameter(self) -> None:
        for raw in ("1.5", " 7", "7 ", "7\n", "1_000", "seven"):
            with self.assertRaises(ValueError) as ctx:
                int_from_query({"gear_level": raw}, "gear_level")
            self.assertIn("parameter 'gear_level' should be an integer", str(ctx.exception))

    def test_values_beyond_64_bits_are_parse_errors(self) -> None:
        self.assertEqual(int_from_query({"n": "9223372036854775807"}, "n"), 2**63 - 1)
        self.assertEqual(int_from_query({"n": "-9223372036854775808"}, "n"), -(2**63))
        for raw in ("9223372036854775808", "-9223372036854775809", "99999999999999999999"):
            with self.assertRaises(ValueError):
                int_from_query({"n": raw}, "n")


class CatalogTests(unittest.TestCase):
    def test_darth_vader_entry(self) -> None:
        vader = get_character("darth_vader")
        self.assertIsNotNone(vader)
        assert vader is not None
        self.assertEqual(vader.name, "Darth Vader")
        self.assertEqual(vader.affiliation, "dark_side")
        self.assertEqual(vader.image_file, "darth_vader.png")
        self.assertEqual((vader.max_zetas, vader.max_omicrons), (3, 1))

    def test_unknown_and_empty_ids(self) -> None:
        self.assertIsNone(get_character("luke_skywalker"))
        self.assertIsNone(get_character(""))

    def test_listing_matches_catalog(self) -> None:
        self.assertEqual(len(list_characters()), len(SUPPORTED_CHARACTERS))


class ParsePortraitRequestTests(unittest.TestCase):
    def test_full_relic_request(self) -> None:
        request, character = parse_portrait_request(
            {"char": "darth_vader", "gear_level": "13", "relic_level": "5", "zetas": "3", "omicrons": "1"}
        )
        self.assertEqual(character.character_id, "darth_vader")
        self.assertEqual(
            request,
            PortraitRequest(
                character_id="darth_vader",
                gear_level=13,
                relic_level=5,
                zetas=3,
                omicrons=1,
                level=DEFAULT_LEVEL,
            ),
        )
        self.assertTrue(request.has_relic)

    def test_character_is_checked_first(self) -> None:
        with self.assertRaises(PortraitRequestError) as ctx:
            parse_portrait_request({"char": "yoda", "gear_level": "99"})
        self.assertEqual(str(ctx.exception), "Character 'yoda' is not supported by this API")

    def test_gear_bounds(self) -> None:
        for raw in ("1", "13"):
            params = {"char": "darth_vader", "gear_level": raw, "relic_level": "1"}
            if raw != "13":
                params.pop("relic_level")
            request, _ = parse_portrait_request(params)
            self.assertEqual(request.gear_level, int(raw))
        for raw in ("0", "14", "", "x"):
            with self.assertRaises(PortraitRequestError):
                parse_portrait_request({"char": "darth_vader", "gear_level": raw})

    def test_unparsable_relic_below_max_gear_is_ignored(self) -> None:
        request, _ = parse_portrait_request({"char": "darth_vader", "gear_level": "4", "relic_level": "high"})
        self.assertEqual(request.relic_level, 0)

    def test_relic_level_rejected_below_max_gear(self) -> None:
        with self.assertRaises(PortraitRequestError) as ctx:
            parse_portrait_request({"char": "darth_vader", "gear_level": "4", "relic_level": "-2"})
        self.assertIn("should not be provided", str(ctx.exception))

    def test_lenient_upgrade_counts(self) -> None:
        request, _ = parse_portrait_request(
            {"char": "darth_vader", "gear_level": "2", "zetas": "two", "omicrons": ""}
        )
        self.assertEqual((request.zetas, request.omicrons), (0, 0))

    def test_oversized_upgrade_counts_fall_back_to_zero(self) -> None:
        request, _ = parse_portrait_request(
            {"char": "darth_vader", "gear_level": "2", "zetas": "99999999999999999999"}
        )
        self.assertEqual(request.zetas, 0)

    def test_upgrade_count_messages_name_the_maximum(self) -> None:
        with self.assertRaises(PortraitRequestError) as ctx:
            parse_portrait_request({"char": "darth_vader", "gear_level": "2", "omicrons": "2"})
        self.assertEqual(str(ctx.exception), "The omicron level must be between 0 and 1 for Darth Vader")

    def test_level_defaults_and_bounds(self) -> None:
        request, _ = parse_portrait_request({"char": "darth_vader", "gear_level": "2", "level": "1"})
        self.assertEqual(request.level, 1)
        with self.assertRaises(PortraitRequestError):
            parse_portrait_request({"char": "darth_vader", "gear_level": "2", "level": "86"})


if __name__ == "__main__":
    unittest.main()
