"""Page geometry, text placement and PDF output."""
