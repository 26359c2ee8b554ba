"""
Turnforge - Turn-based card game rules engine

A deterministic engine that advances card game matches one action at a
time. Rule sets plug into a shared core that provides:
- State, zones and per-player turn resources
- Legal action generation
- Multi-step (extended) actions and deferred effects
- Round/game scoring with tie-breaks
- Bot policies and a match runner
"""

__version__ = "0.1.0"
