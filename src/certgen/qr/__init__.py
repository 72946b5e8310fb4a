"""QR encoding and recoloring."""
