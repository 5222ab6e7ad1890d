"""Classic Snake on a pygame window."""
