"""Move generators.

- MovementGenerator: walks tile strides and emits straight moves and captures
- BarragoonRelocationExpander: expands a barragoon capture into every
  (target square, new face) placement
"""

from barragoon.rules.generators.capture import BarragoonRelocationExpander
from barragoon.rules.generators.movement import MovementGenerator

__all__ = [
    "BarragoonRelocationExpander",
    "MovementGenerator",
]
