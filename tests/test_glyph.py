import pytest

from musicstack.notation.glyph import GlyphId, StemDirection


def test_glyph_id_display_matches_smufl_format():
    glyph = GlyphId.from_codepoint(0xE0A4)
    assert str(glyph) == "U+E0A4"
    assert glyph.to_smufl() == str(glyph)


def test_stem_direction_sign_and_flip():
    assert StemDirection.UP.sign() == 1.0
    assert StemDirection.DOWN.sign() == -1.0
    assert StemDirection.UP.flipped() is StemDirection.DOWN


def test_flip_is_involution():
    assert StemDirection.UP.flipped().flipped() is StemDirection.UP
    assert StemDirection.DOWN.flipped().flipped() is StemDirection.DOWN
    assert StemDirection.DOWN.flipped() is StemDirection.UP
    assert StemDirection.UP.flipped().sign() == -StemDirection.UP.sign()
    assert StemDirection.DOWN.flipped().sign() == -StemDirection.DOWN.sign()


def test_from_char_matches_codepoint():
    assert GlyphId.from_char("\ue0a4") == GlyphId.from_codepoint(0xE0A4)


def test_short_code_is_zero_padded():
    assert GlyphId.from_codepoint(0x41).to_smufl() == "U+0041"


def test_from_char_rejects_multiple_characters():
    with pytest.raises(ValueError):
        GlyphId.from_char("ab")


def test_negative_code_rejected():
    with pytest.raises(ValueError):
        GlyphId.from_codepoint(-1)


def test_smufl_parses_back_to_code():
    for code in (0x0, 0xE050, 0x1D11E):
        text = GlyphId.from_codepoint(code).to_smufl()
        assert text.startswith("U+")
        assert int(text[2:], 16) == code