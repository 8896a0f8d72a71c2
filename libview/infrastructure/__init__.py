"""Infrastructure layer: record sources and the command line interface."""
