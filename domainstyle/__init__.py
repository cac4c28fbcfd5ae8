"""
Domainstyle: Domain Name Style Classification Library

Classifies the style of a domain name (pure number, initial consonants,
full pinyin, pure letters or mixed) and counts its characters or syllables.
"""

__version__ = "0.1.0"

__all__ = ["DomainStyleDetector"]

def __getattr__(name):
    """Lazy import to avoid eager loading of heavy dependencies."""
    if name == "DomainStyleDetector":
        from .detector import DomainStyleDetector
        return DomainStyleDetector
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
