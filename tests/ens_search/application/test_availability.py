import unittest

from src.ens_search.application.availability import check_availability
from src.ens_search.domain.errors import OracleError
from tests.utils.fakes import CountingOracle


class CheckAvailabilityTests(unittest.IsolatedAsyncioTestCase):
    async def test_short_names_are_unavailable_without_query(self):
        oracle = CountingOracle(answers={"bo": True, "x": True})
        for raw in ["", "bo", " X ", "!!", "a-b", "名字"]:
            with self.subTest(raw=raw):
                result = await check_availability(oracle, raw)
                self.assertFalse(result.available)
                self.assertFalse(result.queried)
        self.assertEqual(oracle.calls, [])

    async def test_length_is_checked_after_normalization(self):
        oracle = CountingOracle(answers={"abc": True})
        result = await check_availability(oracle, "a.b.c")
        self.assertTrue(result.available)
        self.assertEqual(oracle.calls, ["abc"])

        result = await check_availability(oracle, "a!!b")
        self.assertFalse(result.queried)
        self.assertEqual(oracle.calls, ["abc"])

    async def test_queries_oracle_with_canonical_name(self):
        oracle = CountingOracle(answers={"alice": True})
        result = await check_availability(oracle, "  Alice\n")
        self.assertEqual(result.name, "alice")
        self.assertTrue(result.available)
        self.assertTrue(result.queried)
        self.assertEqual(oracle.calls, ["alice"])

    async def test_oracle_failure_propagates(self):
        oracle = CountingOracle(fail_on={"alice"})
        with self.assertRaises(OracleError) as ctx:
            await check_availability(oracle, "ALICE")
        self.assertEqual(ctx.exception.name, "alice")
