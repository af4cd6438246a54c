"""Fixed-width unsigned integers with wrapping, checked, saturating and modular arithmetic, roots and parsing."""

__version__ = "1.14.0"
__all__ = ["modular", "parsing", "root", "uint"]