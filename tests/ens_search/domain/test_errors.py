import unittest

from src.ens_search.domain.errors import ConfigError, EnsSearchError, OracleError, SourceError


class ErrorTaxonomyTests(unittest.TestCase):
    def test_all_errors_share_base(self):
        for exc in (
            ConfigError("ETH_NODE_RPC", "missing"),
            SourceError("names.txt", "does not exist"),
            OracleError("alice", "reverted"),
        ):
            with self.subTest(exc=type(exc).__name__):
                self.assertIsInstance(exc, EnsSearchError)

    def test_errors_carry_context(self):
        self.assertEqual(ConfigError("ETH_NODE_RPC", "missing").variable, "ETH_NODE_RPC")
        self.assertEqual(SourceError("names.txt", "gone").source, "names.txt")
        err = OracleError("alice", "availability query failed")
        self.assertEqual(err.name, "alice")
        self.assertEqual(str(err), "availability query failed")
