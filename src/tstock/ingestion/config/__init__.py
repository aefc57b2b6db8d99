from .value_objects import HexunConfig

__all__ = ["HexunConfig"]
