"""Turn-based combat simulator."""
