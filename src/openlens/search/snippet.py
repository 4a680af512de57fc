"""
Snippet Generation for Search Results

Generates KWIC (Key Word In Context) snippets with term highlighting.
The window opens 100 characters before the earliest occurrence of any query
term and closes 200 characters after it.
"""

import html
import re
from dataclasses import dataclass

CONTEXT_BEFORE = 100
CONTEXT_AFTER = 200
FALLBACK_LENGTH = 200
ELLIPSIS = "..."
NO_PREVIEW = "No preview available"


@dataclass
class Snippet:
    """A text snippet with optional highlighting."""

    text: str  # The snippet text (may include HTML <b> tags)
    plain_text: str  # The snippet without HTML tags


def find_earliest_match(text: str, terms: list[str]) -> int:
    """Return the lowest index at which any term occurs in text, or -1."""
    lower_text = text.lower()
    best_pos = -1
    for term in terms:
        pos = lower_text.find(term)
        if pos != -1 and (best_pos == -1 or pos < best_pos):
            best_pos = pos
    return best_pos


def _split_marked(
    segments: list[tuple[str, bool]], term: str
) -> list[tuple[str, bool]]:
    """Split unmarked segments around case-insensitive occurrences of term."""
    pattern = re.compile(re.escape(term), re.IGNORECASE)
    result: list[tuple[str, bool]] = []

    for text, marked in segments:
        if marked:
            result.append((text, marked))
            continue

        pos = 0
        for match in pattern.finditer(text):
            if match.start() > pos:
                result.append((text[pos : match.start()], False))
            # Keep the matched text's original casing
            result.append((match.group(0), True))
            pos = match.end()
        if pos < len(text):
            result.append((text[pos:], False))

    return result


def highlight_terms(text: str, terms: list[str], escape: bool = True) -> str:
    """
    Wrap every occurrence of each term in <b> tags, one term at a time.

    Text already wrapped for an earlier term is left as it is. With
    ``escape`` set, the text is HTML-escaped so that only the <b> markers
    are markup.
    """
    segments = [(text, False)]
    for term in terms:
        # An empty term would match between every pair of characters
        if term:
            segments = _split_marked(segments, term)

    render = html.escape if escape else str
    return "".join(
        f"<b>{render(part)}</b>" if marked else render(part)
        for part, marked in segments
    )


def generate_snippet(
    text: str | None,
    terms: list[str],
    highlight: bool = True,
    escape: bool = True,
) -> Snippet:
    """
    Generate a snippet around the earliest query term occurrence.

    Args:
        text: The original text content.
        terms: Lowercase query terms, in query order.
        highlight: Whether to add <b> tags around term occurrences.
        escape: Whether to HTML-escape the text surrounding the <b> tags.

    Returns:
        Snippet object with text and plain_text
    """
    if not text:
        return Snippet(text=NO_PREVIEW, plain_text=NO_PREVIEW)

    start_pos = find_earliest_match(text, terms)
    if start_pos == -1:
        plain = text[:FALLBACK_LENGTH] + ELLIPSIS
        rendered = html.escape(plain) if escape else plain
        return Snippet(text=rendered, plain_text=plain)

    snippet_start = max(0, start_pos - CONTEXT_BEFORE)
    snippet_end = min(len(text), start_pos + CONTEXT_AFTER)
    window = text[snippet_start:snippet_end]

    prefix = ELLIPSIS if snippet_start > 0 else ""
    suffix = ELLIPSIS if snippet_end < len(text) else ""
    plain_text = prefix + window + suffix

    if highlight:
        body = highlight_terms(window, terms, escape=escape)
    else:
        body = html.escape(window) if escape else window

    return Snippet(text=prefix + body + suffix, plain_text=plain_text)


def highlight_snippet(text: str | None, terms: list[str], escape: bool = True) -> str:
    """
    Convenience function that returns just the highlighted HTML string.
    """
    snippet = generate_snippet(text, terms, highlight=True, escape=escape)
    return snippet.text
