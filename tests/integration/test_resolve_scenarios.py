"""
End-to-end scenarios for resolving model responses.

Each scenario runs the whole pipeline through the public API and checks
both the outcome branch and the intermediate stages.
"""

import json
import unittest
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor

import jsonmend
from jsonmend import Failed, Parsed, RecoveryAction


class TestDocumentedScenarios(unittest.TestCase):
    """The six reference scenarios."""

    def test_prose_wrapped_object(self) -> None:
        raw = 'Here is your plan: {"a": 1, "b": [1,2,3]} Enjoy!'
        self.assertEqual(jsonmend.extract(raw), '{"a": 1, "b": [1,2,3]}')
        self.assertEqual(jsonmend.resolve(raw), Parsed({"a": 1, "b": [1, 2, 3]}))

    def test_trailing_comma(self) -> None:
        raw = '{"a": 1, "b": 2,}'
        with self.assertRaises(jsonmend.StrictParseError):
            jsonmend.parse_strict(jsonmend.extract(raw))
        self.assertEqual(jsonmend.repair(raw), '{"a": 1, "b": 2}')

        outcome = jsonmend.resolve(raw)
        self.assertIsInstance(outcome, Parsed)
        self.assertEqual(outcome.value, {"a": 1, "b": 2})

    def test_missing_closing_brace(self) -> None:
        raw = '{"a": [1, 2, 3]'
        self.assertEqual(jsonmend.repair(raw), '{"a": [1, 2, 3]}')
        self.assertEqual(jsonmend.resolve(raw).value, {"a": [1, 2, 3]})

    def test_interior_truncation_is_a_known_failure(self) -> None:
        """Closers are appended at the end, so the nesting comes out wrong."""
        raw = '{"a": 1, "b": [1, 2,}'
        repaired = jsonmend.repair(jsonmend.extract(raw))
        self.assertEqual(repaired, '{"a": 1, "b": [1, 2}]')

        outcome = jsonmend.resolve(raw)
        self.assertIsInstance(outcome, Failed)
        self.assertEqual(outcome.raw_text, raw)

    def test_plain_text(self) -> None:
        raw = "not json at all"
        self.assertEqual(jsonmend.extract(raw), raw)
        self.assertEqual(jsonmend.repair(raw), raw)
        self.assertEqual(jsonmend.resolve(raw).raw_text, "not json at all")

    def test_empty_string(self) -> None:
        outcome = jsonmend.resolve("")
        self.assertIsInstance(outcome, Failed)
        self.assertEqual(outcome.raw_text, "")

    def test_long_newline_run_after_truncation(self) -> None:
        """Output cut off while the model was emitting blank lines."""
        raw = '{"a": [1, 2],' + "\n" * 50000
        outcome = jsonmend.resolve(raw)
        self.assertIsInstance(outcome, Parsed)
        self.assertEqual(outcome.value, {"a": [1, 2]})
        self.assertEqual(outcome.actions, (RecoveryAction.CLOSED_BRACE,))

    def test_long_newline_run_before_closer(self) -> None:
        raw = 'Plan: {"a": [1, 2,' + "\n" * 50000 + "]}"
        self.assertEqual(jsonmend.resolve(raw).value, {"a": [1, 2]})

    def test_truncated_with_prose_prefix_passes_through(self) -> None:
        """No closing brace means no candidate span; the whole text is parsed."""
        raw = 'Plan 1: {"id": 1, "meals": [1, 2,]'
        self.assertEqual(jsonmend.extract(raw), raw)
        self.assertIsInstance(jsonmend.resolve(raw), Failed)


class TestNoExceptionsForMalformedInput(unittest.TestCase):
    """resolve() reports failure as a value for any malformed input."""

    SAMPLES = [
        "{",
        "}",
        "{{{{",
        "]]]]",
        '{"a": "unterminated',
        '{"a": NaN}',
        '{"a": Infinity,}',
        "{'single': 'quotes'}",
        "```json\n{oops}\n```",
        "\x00\x01\x02",
        "[" * 50000 + "{",
        '{"key": "value"}' * 3,
    ]

    def test_no_exception_escapes(self) -> None:
        for raw in self.SAMPLES:
            with self.subTest(raw=raw[:40]):
                outcome = jsonmend.resolve(raw)
                self.assertIn(type(outcome), (Parsed, Failed))
                if isinstance(outcome, Failed):
                    self.assertEqual(outcome.raw_text, raw)

    def test_non_standard_constants_not_accepted_after_repair(self) -> None:
        outcome = jsonmend.resolve('{"a": Infinity,}')
        self.assertIsInstance(outcome, Failed)


class TestConcurrentResolution(unittest.TestCase):
    """Calls share no state and can run in parallel."""

    def test_parallel_calls_match_sequential(self) -> None:
        inputs = [
            f'Plan {i}: {{"id": {i}, "meals": [{i}, {i + 1},]}} done' for i in range(200)
        ] + ["garbage"] * 20

        sequential = [jsonmend.resolve(raw) for raw in inputs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            parallel = list(pool.map(jsonmend.resolve, inputs))

        self.assertEqual(
            [o.value if o.ok else o.raw_text for o in sequential],
            [o.value if o.ok else o.raw_text for o in parallel],
        )

    def test_outcomes_cross_process_boundaries(self) -> None:
        inputs = ['{"a": [1, 2,]}', "not json at all", '{"a": 1,']
        with ProcessPoolExecutor(max_workers=2) as pool:
            outcomes = list(pool.map(jsonmend.resolve, inputs))

        self.assertEqual(outcomes[0].value, {"a": [1, 2]})
        self.assertIsInstance(outcomes[1], Failed)
        self.assertEqual(outcomes[1].raw_text, "not json at all")
        self.assertEqual(outcomes[1].error.raw_text, "not json at all")
        self.assertEqual(outcomes[2].value, {"a": 1})


class TestLoadsCompatibility(unittest.TestCase):
    """loads() agrees with json.loads on valid input."""

    def test_matches_json_loads(self) -> None:
        for text in ['{"a": [1, 2.5, "x", null, true]}', '{"nested": {"k": {}}}']:
            with self.subTest(text=text):
                self.assertEqual(jsonmend.loads(text), json.loads(text))


if __name__ == "__main__":
    unittest.main()
