"""
WordPlay - Word Transformation Game Engine

A deterministic rules engine for a word game where players add, remove,
substitute or rearrange letters. The engine provides:
- Word validation against an injected lexicon
- Letter diffing and scoring
- Move generation and a greedy bot opponent
- A turn-based state machine with observer notifications
"""

__version__ = "0.1.0"
