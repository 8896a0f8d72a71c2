"""libview - indexed, grouped list views over media library records."""

__version__ = "0.1.0"
