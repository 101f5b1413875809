"""Output formatters for CI integration."""
