"""Detection, aggregation and reporting."""
