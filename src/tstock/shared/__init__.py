"""Models and enums shared across layers."""
