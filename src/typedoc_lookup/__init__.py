"""Declaration lookup and rendering over TypeDoc API models."""
