"""Service layer: command execution returning ServiceResult."""
