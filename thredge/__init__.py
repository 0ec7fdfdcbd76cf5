"""Thredge: threaded discussions with a depth-bounded reply tree."""
