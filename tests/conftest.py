"""
Pytest configuration and fixtures for lollipops font tests.
"""

import string
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import newTable
from fontTools.ttLib.tables._k_e_r_n import KernTable_format_0

from lollipops.core.config import FontConfig
from lollipops.fonts import FontCandidate, FontRegistry

UNITS_PER_EM = 1000
GLYPH_ADVANCE = 500  # half an em
SPACE_ADVANCE = 250
KERN_PAIRS = {("glyph65", "glyph86"): -100}  # "AV" pulled together by a tenth of an em


def _box_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((450, 700))
    pen.lineTo((450, 0))
    pen.closePath()
    return pen.glyph()


def _kern_table(pairs: dict[tuple[str, str], int]):
    subtable = KernTable_format_0()
    subtable.version = 0
    subtable.format = 0
    subtable.coverage = 1
    subtable.kernTable = dict(pairs)

    kern = newTable("kern")
    kern.version = 0
    kern.kernTables = [subtable]
    return kern


def build_test_font(
    path: Path, family: str = "TestSans", kerning: dict[tuple[str, str], int] | None = None
) -> Path:
    """Write a minimal TrueType font covering ASCII letters, digits and space."""
    chars = string.ascii_letters + string.digits
    glyph_names = {ord(c): f"glyph{ord(c)}" for c in chars}
    glyph_names[ord(" ")] = "space"
    glyph_order = [".notdef", *glyph_names.values()]

    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(glyph_names)

    glyph = _box_glyph()
    fb.setupGlyf({name: glyph for name in glyph_order})

    glyph_table = fb.font["glyf"]
    metrics = {
        name: (SPACE_ADVANCE if name == "space" else GLYPH_ADVANCE, glyph_table[name].xMin)
        for name in glyph_order
    }
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": family, "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupMaxp()
    fb.setupPost()
    if kerning:
        fb.font["kern"] = _kern_table(kerning)
    fb.save(str(path))
    return path


@pytest.fixture(scope="session")
def test_font_path(tmp_path_factory) -> Path:
    """A valid TrueType font file shared by the whole session."""
    return build_test_font(tmp_path_factory.mktemp("fonts") / "TestSans-Regular.ttf")


@pytest.fixture(scope="session")
def test_font_bytes(test_font_path) -> bytes:
    """Raw bytes of the test font."""
    return test_font_path.read_bytes()


@pytest.fixture(scope="session")
def kerned_font_path(tmp_path_factory) -> Path:
    """Like the test font, with a kern table tightening the "AV" pair."""
    return build_test_font(
        tmp_path_factory.mktemp("fonts") / "KernSans-Regular.ttf",
        family="KernSans",
        kerning=KERN_PAIRS,
    )


@pytest.fixture
def corrupt_font_path(tmp_path) -> Path:
    """A file that exists but is not a font."""
    path = tmp_path / "corrupt.ttf"
    path.write_bytes(b"this is not a font file at all" * 10)
    return path


@pytest.fixture
def missing_font_path(tmp_path) -> Path:
    """A font path that does not exist."""
    return tmp_path / "missing" / "arial.ttf"


@pytest.fixture
def registry() -> FontRegistry:
    """Empty font registry."""
    return FontRegistry()


@pytest.fixture
def font_config(tmp_path) -> FontConfig:
    """Font configuration whose system fonts are all missing and cache lives in tmp_path."""
    return FontConfig(
        system_candidates=[
            FontCandidate("Arial", str(tmp_path / "Library" / "Fonts" / "Arial.ttf")),
            FontCandidate("Arial", str(tmp_path / "WINDOWS" / "Fonts" / "arial.ttf")),
        ],
        cache_path=str(tmp_path / "OpenSans-Regular.ttf"),
    )


@pytest.fixture
def make_response():
    """Factory for mock streaming requests responses."""

    def _make_response(chunks: list[bytes] | None = None, status_code: int = 200) -> Mock:
        response = Mock(spec=requests.Response)
        response.status_code = status_code
        response.ok = status_code < 400
        response.iter_content.return_value = chunks or []
        return response

    return _make_response


@pytest.fixture
def mock_session() -> Mock:
    """Mock requests session; tests set ``get`` behaviour."""
    session = Mock(spec=requests.Session)
    session.headers = {}
    return session
