"""
Candidate extraction from raw model responses.

Models tend to wrap the JSON payload in prose ("Here is your plan: {...}
Enjoy!"). The extractors narrow the response down to the span most likely
to hold a single JSON object.
"""

from dataclasses import dataclass
from typing import Optional

from ..utils.config import ExtractionMode


@dataclass(frozen=True)
class Extraction:
    """The span chosen by an extractor.

    ``miss`` is set when no candidate span was found and the raw text is
    passed through unchanged. A miss is informational only: the text still
    goes on to the parser.
    """

    text: str
    start: int
    end: int
    miss: bool = False

    @classmethod
    def pass_through(cls, raw: str) -> "Extraction":
        """Forward the whole raw text."""
        return cls(text=raw, start=0, end=len(raw), miss=True)


class GreedyExtractor:
    """Spans the first ``{`` to the last ``}``, inclusive.

    Handles one top-level object with any amount of nesting. It does not
    balance brackets: with several objects, or a stray ``}`` in trailing
    prose, the span covers everything in between.
    """

    def extract(self, raw: str) -> Extraction:
        start = raw.find("{")
        if start == -1:
            return Extraction.pass_through(raw)

        end = raw.rfind("}")
        if end < start:
            return Extraction.pass_through(raw)

        return Extraction(text=raw[start : end + 1], start=start, end=end + 1)


class BalancedExtractor:
    """Spans the first ``{`` to the brace that closes it.

    Tracks string literals so braces inside quoted values are ignored. If
    the object never closes (truncated output), the span runs to the end of
    the text so the repairer can close it.
    """

    def extract(self, raw: str) -> Extraction:
        start = raw.find("{")
        if start == -1:
            return Extraction.pass_through(raw)

        end = self._find_object_end(raw, start)
        if end is None:
            return Extraction(text=raw[start:], start=start, end=len(raw))
        return Extraction(text=raw[start : end + 1], start=start, end=end + 1)

    @staticmethod
    def _find_object_end(text: str, start: int) -> Optional[int]:
        """Return the index of the closer matching ``text[start]``."""
        stack = []
        in_string = False
        escape_next = False

        for i in range(start, len(text)):
            char = text[i]

            if escape_next:
                escape_next = False
                continue

            if char == "\\" and in_string:
                escape_next = True
                continue

            if char == '"':
                in_string = not in_string
                continue

            if in_string:
                continue

            if char in "{[":
                stack.append(char)
            elif char in "}]" and stack:
                expected = "{" if char == "}" else "["
                if stack[-1] == expected:
                    stack.pop()
                    if not stack:
                        return i

        return None


_EXTRACTORS = {
    ExtractionMode.GREEDY: GreedyExtractor(),
    ExtractionMode.BALANCED: BalancedExtractor(),
}


def extract_candidate(
    raw: str, mode: ExtractionMode = ExtractionMode.GREEDY
) -> Extraction:
    """Locate the JSON candidate in ``raw`` and describe the chosen span."""
    return _EXTRACTORS[mode].extract(raw)


def extract(raw: str, mode: ExtractionMode = ExtractionMode.GREEDY) -> str:
    """Return the JSON candidate in ``raw``, or ``raw`` itself if there is none."""
    return extract_candidate(raw, mode).text
