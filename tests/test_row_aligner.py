import unittest

from sidediff.core.differs import line_diff
from sidediff.core.diff_types import CharSpan, DiffOp, OpKind, RenderModel, Row, RowStyle
from sidediff.core.row_aligner import align, iter_rows

SAMPLES = [
    ("", ""),
    ("", "hello"),
    ("hello", ""),
    ("a\nb\nc", "a\nx\nc"),
    ("a\nb\nc\n", "a\nb\nc\n"),
    ("a\nb", "a\nb\nc"),
    ("one\ntwo\nthree\n", "one\nTWO\nthree\nfour\n"),
    ("def f():\n    return 1\n\nprint(f())", "def f(x):\n    return x\n\n\nprint(f(2))\n# end"),
    ("x\ny\nz", "p\nq"),
    ("\n", "\n\n"),
]


def _contents(rows):
    return [r.content for r in rows if not r.is_placeholder]


class TestRowAligner(unittest.TestCase):
    def assertModelInvariants(self, model: RenderModel):
        self.assertEqual(len(model.original_rows), len(model.modified_rows))
        for rows in (model.original_rows, model.modified_rows):
            numbers = []
            for r in rows:
                self.assertEqual(r.line_number is None, r.is_placeholder)
                self.assertEqual(r.spans is not None, r.style is RowStyle.MODIFIED)
                if r.line_number is not None:
                    numbers.append(r.line_number)
            self.assertEqual(numbers, list(range(1, len(numbers) + 1)))

    def test_invariants_hold_for_samples(self):
        for a, b in SAMPLES:
            with self.subTest(original=a, modified=b):
                self.assertModelInvariants(align(line_diff(a, b)))

    def test_rows_stay_aligned_while_streaming(self):
        left, right = [], []
        for pair in iter_rows(line_diff("x\ny\nz\nw", "y\nq\nr\nw\nv")):
            self.assertEqual(len(pair), 2)
            left.append(pair[0])
            right.append(pair[1])
            self.assertEqual(len(left), len(right))
        self.assertTrue(left)

    def test_identity(self):
        text = "alpha\nbeta\ngamma\n"
        model = align(line_diff(text, text))
        self.assertEqual({r.style for r in model.original_rows + model.modified_rows},
                         {RowStyle.UNCHANGED})
        self.assertEqual([r.line_number for r in model.original_rows], [1, 2, 3])
        self.assertEqual([r.line_number for r in model.modified_rows], [1, 2, 3])
        self.assertEqual(_contents(model.original_rows), _contents(model.modified_rows))

    def test_pure_addition(self):
        model = align(line_diff("", "hello"))
        self.assertEqual(model.original_rows, (Row.placeholder(),))
        self.assertEqual(model.modified_rows, (Row(1, "hello", None, RowStyle.ADDED),))

    def test_pure_removal(self):
        model = align(line_diff("hello", ""))
        self.assertEqual(model.original_rows, (Row(1, "hello", None, RowStyle.REMOVED),))
        self.assertEqual(model.modified_rows, (Row.placeholder(),))

    def test_single_character_modification(self):
        model = align(line_diff("a\nb\nc", "a\nx\nc"))
        self.assertEqual([r.style for r in model.original_rows],
                         [RowStyle.UNCHANGED, RowStyle.MODIFIED, RowStyle.UNCHANGED])
        self.assertEqual([r.style for r in model.modified_rows],
                         [RowStyle.UNCHANGED, RowStyle.MODIFIED, RowStyle.UNCHANGED])
        self.assertEqual(model.original_rows[1], Row(2, "b", (CharSpan("b", True),), RowStyle.MODIFIED))
        self.assertEqual(model.modified_rows[1], Row(2, "x", (CharSpan("x", True),), RowStyle.MODIFIED))

    def test_trailing_newline_is_one_line(self):
        model = align([DiffOp("a\n", OpKind.COMMON, 1)])
        self.assertEqual(model.original_rows, (Row(1, "a", None, RowStyle.UNCHANGED),))
        self.assertEqual(model.modified_rows, (Row(1, "a", None, RowStyle.UNCHANGED),))

    def test_single_newline_is_one_blank_row(self):
        model = align([DiffOp("\n", OpKind.ADDED, 1)])
        self.assertEqual(model.modified_rows, (Row(1, "", None, RowStyle.ADDED),))

    def test_reconstruction_round_trip(self):
        for a, b in SAMPLES:
            with self.subTest(original=a, modified=b):
                model = align(line_diff(a, b))
                for text, rows in ((a, model.original_rows), (b, model.modified_rows)):
                    if text == "":
                        continue
                    rebuilt = "\n".join(_contents(rows))
                    if text.endswith("\n"):
                        rebuilt += "\n"
                    self.assertEqual(rebuilt, text)

    def test_no_spurious_pairing(self):
        ops = [DiffOp("a\nb\n", OpKind.REMOVED, 2), DiffOp("x\n", OpKind.ADDED, 1)]
        model = align(ops)
        self.assertEqual([r.style for r in model.original_rows],
                         [RowStyle.REMOVED, RowStyle.REMOVED, RowStyle.PLACEHOLDER])
        self.assertEqual([r.style for r in model.modified_rows],
                         [RowStyle.PLACEHOLDER, RowStyle.PLACEHOLDER, RowStyle.ADDED])
        self.assertEqual(model.modified_rows[2].line_number, 1)

    def test_wrong_line_count_falls_back_to_standalone(self):
        # declared counts match, actual payloads do not
        ops = [DiffOp("a\nb\n", OpKind.REMOVED, 1), DiffOp("x\n", OpKind.ADDED, 1)]
        model = align(ops)
        self.assertModelInvariants(model)
        self.assertEqual([(r.line_number, r.content, r.style) for r in model.original_rows],
                         [(1, "a", RowStyle.REMOVED), (2, "b", RowStyle.REMOVED), (None, "", RowStyle.PLACEHOLDER)])
        self.assertEqual([(r.line_number, r.content, r.style) for r in model.modified_rows],
                         [(None, "", RowStyle.PLACEHOLDER), (None, "", RowStyle.PLACEHOLDER), (1, "x", RowStyle.ADDED)])

    def test_counters_advance_independently(self):
        ops = [
            DiffOp("a\n", OpKind.COMMON, 1),
            DiffOp("gone\n", OpKind.REMOVED, 1),
            DiffOp("b\n", OpKind.COMMON, 1),
            DiffOp("new1\nnew2\n", OpKind.ADDED, 2),
            DiffOp("c", OpKind.COMMON, 1),
        ]
        model = align(ops)
        self.assertEqual([r.line_number for r in model.original_rows], [1, 2, 3, None, None, 4])
        self.assertEqual([r.line_number for r in model.modified_rows], [1, None, 2, 3, 4, 5])

    def test_counterpart_shows_each_side_text(self):
        model = align(line_diff("A  b\nc", "a b\nc", ignore_ws=True, ignore_case=True))
        self.assertEqual(_contents(model.original_rows), ["A  b", "c"])
        self.assertEqual(_contents(model.modified_rows), ["a b", "c"])
        self.assertEqual({r.style for r in model.modified_rows}, {RowStyle.UNCHANGED})

    def test_counterpart_with_wrong_line_count_uses_text(self):
        model = align([DiffOp("a\nb\n", OpKind.COMMON, 2, counterpart="a\n")])
        self.assertEqual(_contents(model.modified_rows), ["a", "b"])

    def test_malformed_change_treated_as_common(self):
        both = DiffOp.from_change("z\n", added=True, removed=True)
        neither = DiffOp.from_change("y\n")
        self.assertIs(both.kind, OpKind.COMMON)
        self.assertIs(neither.kind, OpKind.COMMON)
        self.assertEqual(both.line_count, 1)
        model = align([both])
        self.assertEqual(model.modified_rows, (Row(1, "z", None, RowStyle.UNCHANGED),))

    def test_empty_input_is_empty_model(self):
        model = align([])
        self.assertTrue(model.is_empty)
        self.assertEqual(len(model), 0)
        self.assertTrue(align(line_diff("", "")).is_empty)
        self.assertFalse(align(line_diff("", "x")).is_empty)

    def test_no_state_between_calls(self):
        ops = line_diff("a\nb\nc", "a\nx\nc")
        self.assertEqual(align(ops), align(ops))

    def test_custom_char_differ_is_used(self):
        calls = []

        def differ(a, b):
            calls.append((a, b))
            return []

        align([DiffOp("b\n", OpKind.REMOVED, 1), DiffOp("x\n", OpKind.ADDED, 1)], differ)
        self.assertEqual(calls, [("b", "x")])


if __name__ == "__main__":
    unittest.main()
