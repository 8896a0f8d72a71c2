"""libview command line interface."""
