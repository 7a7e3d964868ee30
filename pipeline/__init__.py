"""Command-line pipeline around the bounce engine: configuration, scene setup, running and reporting."""
