from __future__ import annotations

import unittest

from lazyfm.browser.command_bar import KNOWN_VERBS, parse_command


class ParseCommandTests(unittest.TestCase):
    def test_grammar_table(self) -> None:
        cases = {
            "": ("", ""),
            "   ": ("", ""),
            "rm": ("rm", ""),
            "mv newname.txt": ("mv", "newname.txt"),
            "cp a b": ("cp", "a"),
            "  mkdir   docs  ": ("mkdir", "docs"),
            "cd\tsrc": ("cd", "src"),
            "touch a b c d": ("touch", "a"),
        }
        for line, expected in cases.items():
            with self.subTest(line=line):
                self.assertEqual(parse_command(line), expected)

    def test_quotes_are_not_special(self) -> None:
        self.assertEqual(parse_command('mv "my file.txt"'), ("mv", '"my'))

    def test_known_verbs(self) -> None:
        self.assertEqual(
            KNOWN_VERBS,
            {"mkdir", "touch", "mv", "cp", "rm", "cd", "find", "zip", "unzip"},
        )


if __name__ == "__main__":
    unittest.main()
