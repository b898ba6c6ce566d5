"""Infrastructure layer: file-backed persistence."""
