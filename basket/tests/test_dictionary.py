import unittest
from basket.logic.share.dictionary import DictionaryCompactor


class TestDictionaryCompactor(unittest.TestCase):

    def setUp(self):
        self.dictionary = DictionaryCompactor()

    def test_empty_string_is_preseeded(self):
        self.assertEqual(self.dictionary.entries, [""])
        self.assertEqual(self.dictionary.index_of(""), 0)
        self.assertEqual(len(self.dictionary), 1)

    def test_new_values_are_appended_in_order(self):
        self.assertEqual(self.dictionary.index_of("Milk"), 1)
        self.assertEqual(self.dictionary.index_of("Dairy"), 2)
        self.assertEqual(self.dictionary.entries, ["", "Milk", "Dairy"])

    def test_repeated_value_keeps_first_index(self):
        first = self.dictionary.index_of("Dairy")
        self.dictionary.index_of("Milk")
        self.assertEqual(self.dictionary.index_of("Dairy"), first)
        self.assertEqual(len(self.dictionary), 3)

    def test_values_are_case_sensitive(self):
        self.assertNotEqual(self.dictionary.index_of("milk"), self.dictionary.index_of("Milk"))
