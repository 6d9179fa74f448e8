import os
import tempfile
import unittest
from unittest import mock

from prefixtrie import find_wordlist, load, new, read_words


class TestWordList(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.path = os.path.join(self.tmp.name, "words.txt")
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("# sample list\n")
            f.write("apple\n")
            f.write("  apricot  \n")
            f.write("\n")
            f.write("banana\n")
            f.write("apple\n")
            f.write("crème\n")

    def test_read_words_skips_blanks_and_comments(self):
        self.assertEqual(
            read_words(self.path),
            ["apple", "apricot", "banana", "apple", "crème"],
        )

    def test_load_builds_trie(self):
        trie = load(self.path)
        self.assertEqual(trie.all(""), ["apple", "apricot", "banana", "crème"])
        self.assertEqual(trie.search("ap"), ["apple", "apricot"])

    def test_load_into_existing_trie(self):
        trie = new()
        trie.insert("cherry")
        self.assertIs(load(self.path, trie), trie)
        self.assertIn("cherry", trie)
        self.assertIn("banana", trie)

    def test_load_logs_count(self):
        with self.assertLogs("prefixtrie", level="INFO") as cm:
            load(self.path)
        self.assertIn("Loaded 4 words", cm.output[0])

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            load(os.path.join(self.tmp.name, "missing.txt"))

    def test_bad_encoding_raises(self):
        path = os.path.join(self.tmp.name, "latin1.txt")
        with open(path, "wb") as f:
            f.write("café\n".encode("latin-1"))
        with self.assertRaises(UnicodeDecodeError):
            read_words(path)
        self.assertEqual(read_words(path, encoding="latin-1"), ["café"])

    def test_find_wordlist_prefers_explicit_path(self):
        self.assertEqual(find_wordlist(self.path), self.path)

    def test_find_wordlist_default_locations(self):
        missing = os.path.join(self.tmp.name, "missing.txt")
        with mock.patch("prefixtrie.wordlist.WORDLIST_SEARCH_PATHS", [missing, self.path]):
            self.assertEqual(find_wordlist(), self.path)
        with mock.patch("prefixtrie.wordlist.WORDLIST_SEARCH_PATHS", [missing]):
            self.assertIsNone(find_wordlist(missing))


if __name__ == "__main__":
    unittest.main()
