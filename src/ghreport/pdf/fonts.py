"""Font selection for report text.

Helvetica only covers the WinAnsi (cp1252) character set. Anything outside it
is drawn with one of reportlab's built-in CID fonts (CJK ideographs, kana,
Cyrillic, Greek, Hangul) or with a TrueType font configured through
``settings.pdf_font_path``. Characters that no available font covers are
replaced with ``?`` before layout, and the replacement is logged.
"""

import unicodedata
from functools import lru_cache
from pathlib import Path
from typing import Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from reportlab.pdfbase.ttfonts import TTFError, TTFont

from ghreport.config.settings import get_settings
from ghreport.core.logging import get_logger
from ghreport.errors import PDFError

logger = get_logger(__name__)

BASE_FONT = "Helvetica"
REPLACEMENT_CHAR = "?"

# CID font -> unicodedata name prefixes it is used for
CID_FONT_SCRIPTS = {
    "STSong-Light": (
        "CJK",
        "HIRAGANA",
        "KATAKANA",
        "IDEOGRAPHIC",
        "FULLWIDTH",
        "CYRILLIC",
        "GREEK",
    ),
    "HYSMyeongJo-Medium": ("HANGUL",),
}


def _in_base_font(char: str) -> bool:
    try:
        char.encode("cp1252")
    except UnicodeEncodeError:
        return False
    return True


@lru_cache(maxsize=None)
def _register_cid_font(name: str) -> str:
    pdfmetrics.registerFont(UnicodeCIDFont(name))
    return name


@lru_cache(maxsize=None)
def _load_truetype(path: str) -> TTFont:
    font_name = f"GHReport-{Path(path).stem}"
    try:
        font = TTFont(font_name, path)
    except (OSError, TTFError) as exc:
        raise PDFError(f"cannot load TrueType font {path}: {exc}") from exc
    pdfmetrics.registerFont(font)
    return font


def _truetype_font() -> Optional[TTFont]:
    path = get_settings().pdf_font_path
    if path is None:
        return None
    return _load_truetype(str(path))


def font_for(char: str) -> Optional[str]:
    """Name of the registered font that draws ``char``, or None if none does."""
    if _in_base_font(char):
        return BASE_FONT

    truetype = _truetype_font()
    if truetype is not None and ord(char) in truetype.face.charToGlyph:
        return truetype.fontName

    char_name = unicodedata.name(char, "")
    for font_name, prefixes in CID_FONT_SCRIPTS.items():
        if char_name.startswith(prefixes):
            return _register_cid_font(font_name)
    return None


def drawable_text(text: str) -> str:
    """Replace characters no available font can draw with ``?``."""
    missing = {char for char in text if font_for(char) is None}
    if not missing:
        return text
    logger.warning(
        "No font covers {} in {!r}; drawing them as '{}'",
        " ".join(f"U+{ord(char):04X}" for char in sorted(missing)),
        text,
        REPLACEMENT_CHAR,
    )
    return "".join(REPLACEMENT_CHAR if char in missing else char for char in text)


def font_runs(text: str) -> list[tuple[str, str]]:
    """Split ``text`` into ``(font name, chunk)`` runs drawable in one font.

    Expects text already passed through ``drawable_text``.

    Examples:
        >>> font_runs("Name: Ada")
        [('Helvetica', 'Name: Ada')]
    """
    runs: list[tuple[str, str]] = []
    for char in text:
        font_name = font_for(char) or BASE_FONT
        if runs and runs[-1][0] == font_name:
            runs[-1] = (font_name, runs[-1][1] + char)
        else:
            runs.append((font_name, char))
    return runs


def text_width(text: str, size: float) -> float:
    """Rendered width of ``text`` at ``size`` points across all its runs."""
    return sum(
        pdfmetrics.stringWidth(chunk, font_name, size)
        for font_name, chunk in font_runs(text)
    )
