"""
Show Vote - Daily TV show voting service.

Every day a random slate of shows is drawn from the catalog. Anonymous
viewers get one vote each while the window is open, and the tally is
revealed in the evening.

Invariants:
- Exactly one slate per calendar day
- At most one vote per viewer per day
- Results stay hidden until the reveal hour
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
