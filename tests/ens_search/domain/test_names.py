import unittest

from src.ens_search.domain.names import MIN_NAME_LENGTH, format_eth_name, is_queryable, normalize_name


class NormalizeNameTests(unittest.TestCase):
    def test_trims_lowercases_and_strips_punctuation(self):
        self.assertEqual(normalize_name("  CHARLIE!!\n"), "charlie")
        self.assertEqual(normalize_name("Alice"), "alice")
        self.assertEqual(normalize_name("my-name.eth"), "mynameeth")
        self.assertEqual(normalize_name("a b\tc"), "abc")

    def test_keeps_digits(self):
        self.assertEqual(normalize_name("Web3 4 Life"), "web34life")

    def test_unicode_letters_are_alphanumeric(self):
        self.assertEqual(normalize_name("Ünïcødé"), "ünïcødé")
        self.assertEqual(normalize_name("名字!"), "名字")
        self.assertEqual(normalize_name("🦊fox"), "fox")

    def test_total_on_degenerate_inputs(self):
        self.assertEqual(normalize_name(""), "")
        self.assertEqual(normalize_name("   "), "")
        self.assertEqual(normalize_name("!?.,-_"), "")
        self.assertEqual(normalize_name("\x00\r\n"), "")

    def test_idempotent(self):
        samples = ["Alice", "  bo ", "CHARLIE!!", "", "名字!", "ÀÉÎ-õü", "x_y_z", "Ⅷ roman"]
        for raw in samples:
            with self.subTest(raw=raw):
                once = normalize_name(raw)
                self.assertEqual(normalize_name(once), once)

    def test_result_is_lowercase_alphanumeric_only(self):
        for raw in ["Mixed-Case_123!", "  ÉCOLE  ", "tab\tsep"]:
            with self.subTest(raw=raw):
                name = normalize_name(raw)
                self.assertTrue(all(ch.isalnum() for ch in name))
                self.assertEqual(name, name.lower())


class QueryableTests(unittest.TestCase):
    def test_minimum_length_is_three(self):
        self.assertEqual(MIN_NAME_LENGTH, 3)
        self.assertFalse(is_queryable(""))
        self.assertFalse(is_queryable("bo"))
        self.assertTrue(is_queryable("bob"))

    def test_length_counts_characters_not_bytes(self):
        self.assertFalse(is_queryable("名字"))
        self.assertTrue(is_queryable("名字们"))

    def test_format_eth_name(self):
        self.assertEqual(format_eth_name("vitalik"), "vitalik.eth")
