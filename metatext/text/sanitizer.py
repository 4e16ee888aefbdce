"""Clean raw provider descriptions for display.

The cleanup rules follow the summary sanitizers used by the long-standing
Plex and Jellyfin anime agents: inline AniDB links become Markdown links,
list markers and source citations are dropped, and paragraphs are compacted.

Examples
--------
>>> sanitize_description(
...     "http://anidb.net/ch7 [Ash] travels.\\n\\n\\nSource: ANN",
...     SanitizerToggles(),
... )
'[Ash](http://anidb.net/ch7) travels.'
"""

from __future__ import annotations

import re
import typing as typ

if typ.TYPE_CHECKING:
    from .config import SanitizerToggles

_URL = r"https?://\w+.\w+(?:/?\w+)?"

#: ``http://anidb.net/ch1 [Label]`` as written by AniDB.
_INLINE_LINK_RE = re.compile(rf"({_URL}) \[([^\]]+)\]")
#: ``[http://example.com Label]`` wiki-style links.
_BRACKETED_LINK_RE = re.compile(rf"\[({_URL}) ([^\]]+)\]")
#: Markers may be indented or stacked and lines may end in a bare ``\r``.
#: A leading ``**`` is Markdown bold (as written by ``remove_summary``), not a marker.
_MISC_LINE_RE = re.compile(
    r"(?:^|(?<=\r))[ \t]*(?:(?:\*(?!\*)|--|~)\s*)+",
    re.MULTILINE,
)
_SUMMARY_LABEL_RE = re.compile(r"\b(Note|Summary):\s*", re.DOTALL)
_SOURCE_CITATION_RE = re.compile(r"\bSource: [^ ]+", re.DOTALL)
_LINE_TERMINATOR_RE = re.compile(r"\r\n|\r")
_EMPTY_LINES_RE = re.compile(r"\n{2,}")


def _markdown_link(match: re.Match[str]) -> str:
    return f"[{match.group(2)}]({match.group(1)})"


def clean_links(text: str) -> str:
    """Rewrite provider links as Markdown ``[Label](URL)`` links."""
    text = _BRACKETED_LINK_RE.sub(_markdown_link, text)
    return _INLINE_LINK_RE.sub(_markdown_link, text)


def clean_misc_lines(text: str) -> str:
    """Remove ``*``, ``--`` and ``~`` markers at the start of lines.

    Runs of markers such as ``"* * "`` are removed together, along with any
    indentation before them.
    """
    return _MISC_LINE_RE.sub("", text)


def remove_summary(text: str) -> str:
    """Bold ``Note:``/``Summary:`` labels and drop ``Source:`` citations."""
    text = _SUMMARY_LABEL_RE.sub(lambda match: f"**{match.group(1)}**: ", text)
    return _SOURCE_CITATION_RE.sub("", text)


def collapse_empty_lines(text: str) -> str:
    """Normalise line terminators and collapse runs of newlines."""
    text = _LINE_TERMINATOR_RE.sub("\n", text)
    return _EMPTY_LINES_RE.sub("\n", text)


def sanitize_description(raw: str, toggles: SanitizerToggles) -> str:
    """Apply the enabled cleanup passes to a raw description.

    Passes always run in the same order: links, misc lines, summary labels,
    then newlines. Disabling one pass does not reorder the others.

    Parameters
    ----------
    raw : str
        The raw provider description.
    toggles : SanitizerToggles
        Which passes to apply.

    Returns
    -------
    str
        The cleaned description, or an empty string for blank input.
    """
    if not raw or not raw.strip():
        return ""

    text = raw
    if toggles.clean_links:
        text = clean_links(text)
    if toggles.clean_misc_lines:
        text = clean_misc_lines(text)
    if toggles.remove_summary:
        text = remove_summary(text)
    if toggles.collapse_empty_lines:
        text = collapse_empty_lines(text)
    return text.strip()


__all__ = [
    "clean_links",
    "clean_misc_lines",
    "collapse_empty_lines",
    "remove_summary",
    "sanitize_description",
]
