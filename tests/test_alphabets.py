import unittest

from wordfind.data.alphabets import DEFAULT_LETTERS, LETTER_SETS, letters_for
from wordfind.data.normalization import clean_word, clean_words


class AlphabetTests(unittest.TestCase):
    def test_default_letters_skip_rare_latin_letters(self) -> None:
        self.assertEqual(len(DEFAULT_LETTERS), 23)
        for letter in "jkqxz":
            self.assertNotIn(letter, DEFAULT_LETTERS)

    def test_known_languages(self) -> None:
        self.assertEqual(letters_for("EN"), DEFAULT_LETTERS)
        self.assertIn("é", letters_for("FR"))
        self.assertIn("ß", letters_for("DE"))
        self.assertEqual(letters_for("RU"), LETTER_SETS["RU"])

    def test_codes_are_case_insensitive(self) -> None:
        self.assertEqual(letters_for("pl"), LETTER_SETS["PL"])

    def test_unknown_language_falls_back_with_warning(self) -> None:
        with self.assertLogs("wordfind.data.alphabets", level="WARNING") as logs:
            letters = letters_for("XX")
        self.assertEqual(letters, DEFAULT_LETTERS)
        self.assertIn("falling back to English", logs.output[0])


class NormalizationTests(unittest.TestCase):
    def test_clean_word(self) -> None:
        self.assertEqual(clean_word(" Ice Cream "), "icecream")
        self.assertEqual(clean_word(""), "")

    def test_clean_words_drops_blanks_and_repeats(self) -> None:
        self.assertEqual(clean_words(["Cat", "cat", " ", "Dog"]), ["cat", "dog"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
