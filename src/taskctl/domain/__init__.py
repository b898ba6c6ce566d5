"""Domain layer: task models, date parsing, and command parsing."""
