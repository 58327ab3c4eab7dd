"""Beats, time points and spans, meters, tempos and time grids."""