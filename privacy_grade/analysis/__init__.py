"""Site rating, its scoring terms and the shared rating cache."""
