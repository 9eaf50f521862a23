"""Feature extraction modules."""
from .edges import Side, edge, edges_match
from .pattern import PatternMask, SEA_MONSTER_MASK
