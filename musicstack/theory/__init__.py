"""Pitches, intervals, scales, chords, keys, harmonic functions and tonic-name parsing."""