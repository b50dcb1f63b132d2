"""Machine drive models."""
