"""Pattern masks searched for in the composite image."""

from dataclasses import dataclass
from typing import Sequence, Tuple

SEA_MONSTER = (
    "                  # ",
    "#    ##    ##    ###",
    " #  #  #  #  #  #   ",
)


@dataclass(frozen=True)
class PatternMask:
    """
    Fixed stencil of "on" cells.

    Attributes:
        offsets: (row, col) of each '#' relative to the stencil's top-left
        width: Stencil width in pixels
        height: Stencil height in pixels
    """
    offsets: Tuple[Tuple[int, int], ...]
    width: int
    height: int

    def __post_init__(self):
        if not self.offsets:
            raise ValueError("Pattern mask has no 'on' cells")
        for row, col in self.offsets:
            if not (0 <= row < self.height and 0 <= col < self.width):
                raise ValueError(
                    f"Offset ({row}, {col}) is outside a {self.width}x{self.height} mask"
                )

    @classmethod
    def from_template(cls, lines: Sequence[str], on_char: str = '#') -> 'PatternMask':
        """Parse an ASCII stencil. Any character other than `on_char` is off."""
        lines = list(lines)
        width = max((len(line) for line in lines), default=0)
        offsets = tuple(
            (row, col)
            for row, line in enumerate(lines)
            for col, char in enumerate(line)
            if char == on_char
        )
        return cls(offsets=offsets, width=width, height=len(lines))

    def __len__(self):
        return len(self.offsets)


SEA_MONSTER_MASK = PatternMask.from_template(SEA_MONSTER)
