"""Phone application services."""
