"""
TJ App - Trade Journal Analytics Engine

Derives per-trade metrics for a discretionary trading journal: net PnL,
outcome classification, R-multiple, entry session and HTF/LTF timeframe
alignment. Pure, synchronous computation over a single trade snapshot.
"""

__version__ = "0.1.0"
__author__ = "TJ Team"
