"""Portfolio tracker source package."""
