"""HTTP host for engine sessions."""
