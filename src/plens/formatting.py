"""String helpers shared by the presentation layer."""
from __future__ import annotations

from typing import Optional
import math
import re
import unicodedata

_YOUTUBE_EMBED = re.compile(r"embed/([^?&]+)")
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_NON_SLUG = re.compile(r"[^a-z0-9]+")

_POLARIZATION_LABELS = {
    1: "Unanimitat",
    2: "Acord majoritari",
    3: "Desacord",
    4: "Polarització màxima",
}
_POLARIZATION_EMOJIS = {
    1: "🟢",
    2: "🟡",
    3: "🟠",
    4: "🔴",
}


def slugify(name: Optional[str]) -> str:
    """Return a URL slug for ``name`` (``"unknown"`` when it is empty)."""

    if not name:
        return "unknown"
    normalized = unicodedata.normalize("NFD", name.lower())
    stripped = _COMBINING_MARKS.sub("", normalized)
    slug = _NON_SLUG.sub("-", stripped)
    return slug.removeprefix("-").removesuffix("-")


def youtube_id(url: Optional[str]) -> str:
    """Extract the video id from an ``embed/<id>`` URL, or ``""``."""

    match = _YOUTUBE_EMBED.search(url or "")
    return match.group(1) if match else ""


def derive_session_id(date: str, video_url: str) -> str:
    """Return ``<year>-<month>-<day>_<video-id>`` for a ``DD/MM/YYYY`` date.

    Missing date parts and unparseable URLs become empty segments.
    """

    parts = (date or "").split("/")
    day, month, year = (parts + ["", "", ""])[:3]
    return f"{year}-{month}-{day}_{youtube_id(video_url)}"


def youtube_timestamp(video_url: str, seconds: float) -> str:
    return f"https://www.youtube.com/watch?v={youtube_id(video_url)}&t={math.floor(seconds)}s"


def party_class(party: Optional[str]) -> str:
    """Map a party name to its badge CSS class."""

    if not party:
        return "badge--other"
    p = party.lower()
    if "psc" in p:
        return "badge--psc"
    if "junts" in p:
        return "badge--junts"
    if "comú" in p or "comu" in p:
        return "badge--bcomu"
    if "erc" in p:
        return "badge--erc"
    if p == "pp" or "popular" in p:
        return "badge--pp"
    if "vox" in p:
        return "badge--vox"
    return "badge--other"


def pol_class(level: Optional[int]) -> str:
    if not level:
        return ""
    return f"badge--pol-{level}"


def pol_label(level: Optional[int]) -> str:
    return _POLARIZATION_LABELS.get(level, "")


def pol_emoji(level: Optional[int]) -> str:
    return _POLARIZATION_EMOJIS.get(level, "")


__all__ = [
    "derive_session_id",
    "party_class",
    "pol_class",
    "pol_emoji",
    "pol_label",
    "slugify",
    "youtube_id",
    "youtube_timestamp",
]
