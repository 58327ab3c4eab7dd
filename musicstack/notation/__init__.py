"""Articulations, ornaments, dynamics, glyphs, stem directions and layout geometry."""