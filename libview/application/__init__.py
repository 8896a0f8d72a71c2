"""Application layer: list presets and the use cases built on them."""
