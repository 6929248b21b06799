import unittest

from sidediff.core.char_highlighter import highlight, whole_line_differ
from sidediff.core.diff_types import CharChange, CharSpan


def _join(spans):
    return "".join(s.text for s in spans)


class TestCharHighlighter(unittest.TestCase):
    def test_single_char_replacement(self):
        left, right = highlight("b", "x")
        self.assertEqual(left, [CharSpan("b", True)])
        self.assertEqual(right, [CharSpan("x", True)])

    def test_sides_reconstruct_their_lines(self):
        a = "total = price * qty"
        b = "total = price * quantity + tax"
        left, right = highlight(a, b)
        self.assertEqual(_join(left), a)
        self.assertEqual(_join(right), b)
        # both sides share the same unchanged runs, in order
        self.assertEqual([s.text for s in left if not s.changed],
                         [s.text for s in right if not s.changed])
        self.assertTrue(any(s.changed for s in right))

    def test_unchanged_prefix_not_flagged(self):
        left, right = highlight("hello world", "hello there")
        self.assertEqual(left[0], CharSpan("hello ", False))
        self.assertEqual(right[0], CharSpan("hello ", False))

    def test_custom_differ_and_filtering(self):
        calls = []

        def differ(a, b):
            calls.append((a, b))
            return [
                CharChange("ab"),
                CharChange("c", removed=True),
                CharChange("d", added=True),
                CharChange("?", added=True, removed=True),
            ]

        left, right = highlight("abc", "abd", differ)
        self.assertEqual(calls, [("abc", "abd")])
        self.assertEqual(left, [CharSpan("ab", False), CharSpan("c", True), CharSpan("?", False)])
        self.assertEqual(right, [CharSpan("ab", False), CharSpan("d", True), CharSpan("?", False)])

    def test_whole_line_differ(self):
        left, right = highlight("old", "new", whole_line_differ)
        self.assertEqual(left, [CharSpan("old", True)])
        self.assertEqual(right, [CharSpan("new", True)])

    def test_empty_lines(self):
        left, right = highlight("", "")
        self.assertEqual(left, [])
        self.assertEqual(right, [])


if __name__ == "__main__":
    unittest.main()
