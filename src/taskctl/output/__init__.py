"""Output layer: Rich console rendering and JSON formatting."""
