"""Tolerant JSON extraction and code-fence stripping for model output."""

from __future__ import annotations

import json
import re

from resubuild_ai.errors import MalformedResponse

_OPENING_FENCE = re.compile(r"^\s*```[\w-]*[ \t]*\n?")
_CLOSING_FENCE = re.compile(r"\n?[ \t]*```\s*$")


def strip_code_fences(text: str) -> str:
    """Remove a leading ```lang marker and a trailing ``` marker, if present."""
    text = text.strip()
    text = _OPENING_FENCE.sub("", text, count=1)
    text = _CLOSING_FENCE.sub("", text, count=1)
    return text.strip()


def extract_json(text: str) -> dict | list:
    """Parse JSON out of a model response.

    JSON mode normally returns a bare document, but models still wrap it
    in fences or prose now and then. Tries in order:
    1. The whole text
    2. The text with code fences removed
    3. The outermost {...} span, then the outermost [...] span
    4. A truncated object closed off with the missing brackets

    Raises MalformedResponse when nothing parses.
    """
    if text is None:
        raise MalformedResponse("Empty response")
    text = text.strip()
    if not text:
        raise MalformedResponse("Empty response")

    candidates = [text]
    unfenced = strip_code_fences(text)
    if unfenced != text:
        candidates.append(unfenced)

    for candidate in candidates:
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            pass

    for candidate in candidates:
        for opening, closing in (("{", "}"), ("[", "]")):
            result = _extract_span(candidate, opening, closing)
            if result is not None:
                return result

    result = _close_truncated(unfenced)
    if result is not None:
        return result

    raise MalformedResponse(f"Could not extract JSON from text: {text[:200]}...")


def _extract_span(text: str, opening: str, closing: str) -> dict | list | None:
    start = text.find(opening)
    end = text.rfind(closing)
    if start == -1 or end <= start:
        return None
    try:
        return json.loads(text[start : end + 1])
    except json.JSONDecodeError:
        return None


def _close_truncated(text: str) -> dict | None:
    """Close a cut-off object by appending the missing ] and } characters."""
    start = text.find("{")
    if start == -1:
        return None

    candidate = text[start:]
    for body in (candidate, candidate[: candidate.rfind('"') + 1]):
        open_braces = body.count("{") - body.count("}")
        open_brackets = body.count("[") - body.count("]")
        if open_braces <= 0 and open_brackets <= 0:
            continue
        repaired = body.rstrip().rstrip(",")
        repaired += "]" * max(0, open_brackets) + "}" * max(0, open_braces)
        try:
            result = json.loads(repaired)
        except json.JSONDecodeError:
            continue
        if isinstance(result, dict):
            return result
    return None
