"""Output layer: JSON normalization and Rich rendering."""
