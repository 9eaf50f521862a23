"""
Tile Assembler

Grows the arrangement outward from one seed tile:
- Seed: any tile, identity orientation, at (0, 0)
- Step: for each frontier position, try the unplaced oriented tiles whose
  edge matches the first placed neighbour; accept the first one whose edges
  equal those of all placed neighbours, then rescan the frontier
- Stop: when no tile is left, or when a full scan places nothing

The 8 orientations of every tile and their fingerprints are computed once
and indexed by (side, fingerprint), so a frontier scan only looks at tiles
that can share an edge with the position's neighbour.

Positions are (row, col) integer pairs and may go negative. Placements are
only ever added; there is no backtracking, so the input must have a unique
arrangement.
"""

import random
from collections import defaultdict
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterator, List, Mapping, Optional, Sequence, Set, Tuple

from core.errors import DimensionMismatch, MissingTile, NoValidArrangement, TileFormatError
from core.orientation import Orientation
from core.pixel_grid import PixelGrid
from core.tile import Tile
from features.edges import NEIGHBOR_SIDES, Side, edge_map

Position = Tuple[int, int]
EdgeKey = Tuple[bool, ...]


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class AssemblerConfig:
    """Assembler parameters."""
    # Tile placed at (0, 0); first input tile when None
    seed_tile_id: Optional[int] = None

    # Shuffle work-list and frontier order (determinism checks)
    shuffle_seed: Optional[int] = None

    # Frontier scans before giving up; defaults to the tile count
    max_iterations: Optional[int] = None

    verbose: bool = False

    def __post_init__(self):
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class Placement:
    position: Position
    tile_id: int
    orientation: Orientation
    grid: PixelGrid


@dataclass(frozen=True)
class BoundingBox:
    """Inclusive bounds of every placed position."""
    min_row: int = 0
    max_row: int = 0
    min_col: int = 0
    max_col: int = 0

    def include(self, position: Position) -> 'BoundingBox':
        """Smallest box covering this one and `position`."""
        row, col = position
        return replace(
            self,
            min_row=min(self.min_row, row),
            max_row=max(self.max_row, row),
            min_col=min(self.min_col, col),
            max_col=max(self.max_col, col),
        )

    @property
    def height(self) -> int:
        return self.max_row - self.min_row + 1

    @property
    def width(self) -> int:
        return self.max_col - self.min_col + 1

    def corners(self) -> Tuple[Position, Position, Position, Position]:
        """Top-left, top-right, bottom-left, bottom-right."""
        return (
            (self.min_row, self.min_col),
            (self.min_row, self.max_col),
            (self.max_row, self.min_col),
            (self.max_row, self.max_col),
        )

    def positions(self) -> Iterator[Position]:
        """Every position in row-major order."""
        for row in range(self.min_row, self.max_row + 1):
            for col in range(self.min_col, self.max_col + 1):
                yield row, col


@dataclass(frozen=True)
class Assembly:
    """Finished arrangement, frozen once the assembler returns."""
    placements: Mapping[Position, Placement]
    bbox: BoundingBox

    @property
    def tile_side(self) -> int:
        return next(iter(self.placements.values())).grid.rows

    @property
    def grid_shape(self) -> Tuple[int, int]:
        return self.bbox.height, self.bbox.width

    def placement_at(self, position: Position) -> Placement:
        try:
            return self.placements[position]
        except KeyError:
            raise MissingTile(position) from None

    def corner_ids(self) -> List[int]:
        return [self.placement_at(pos).tile_id for pos in self.bbox.corners()]

    def corner_product(self) -> int:
        product = 1
        for tile_id in self.corner_ids():
            product *= tile_id
        return product

    def layout(self) -> List[List[int]]:
        """Tile ids row by row, top to bottom."""
        return [
            [self.placement_at((row, col)).tile_id
             for col in range(self.bbox.min_col, self.bbox.max_col + 1)]
            for row in range(self.bbox.min_row, self.bbox.max_row + 1)
        ]

    def adjacent_pairs(self) -> Set[FrozenSet[int]]:
        """Unordered tile-id pairs that share an edge."""
        pairs = set()
        for (row, col), placement in self.placements.items():
            for d_row, d_col in ((1, 0), (0, 1)):
                neighbor = self.placements.get((row + d_row, col + d_col))
                if neighbor is not None:
                    pairs.add(frozenset((placement.tile_id, neighbor.tile_id)))
        return pairs


# =============================================================================
# ASSEMBLER
# =============================================================================

@dataclass(frozen=True)
class OrientedTile:
    """One orientation of a tile with its four fingerprints worked out once."""
    tile: Tile
    orientation: Orientation
    grid: PixelGrid
    edges: Mapping[Side, EdgeKey]


def orient_tile(tile: Tile) -> List[OrientedTile]:
    """All 8 orientations of a tile, in ALL_ORIENTATIONS order."""
    return [
        OrientedTile(tile, orientation, grid, MappingProxyType(edge_map(grid)))
        for orientation, grid in tile.orientations()
    ]


class TileAssembler:
    """Places tiles one at a time by exact edge-fingerprint equality."""

    def __init__(self, config: Optional[AssemblerConfig] = None):
        self.config = config or AssemblerConfig()
        self._rng = (random.Random(self.config.shuffle_seed)
                     if self.config.shuffle_seed is not None else None)
        self.placements: Dict[Position, Placement] = {}
        self.bbox = BoundingBox()
        self._placed_edges: Dict[Position, Mapping[Side, EdgeKey]] = {}
        self._index: Dict[Tuple[Side, EdgeKey], List[OrientedTile]] = {}
        self._remaining: Dict[int, Tile] = {}

    def assemble(self, tiles: Sequence[Tile]) -> Assembly:
        """
        Arrange every tile.

        Raises:
            NoValidArrangement: No tiles, unknown seed tile, or a frontier
                scan placed nothing
            DimensionMismatch: Tiles of different sizes
            TileFormatError: Duplicate tile ids
        """
        if not tiles:
            raise NoValidArrangement("No tiles to assemble")
        self._validate(tiles)

        self.placements = {}
        self.bbox = BoundingBox()
        self._placed_edges = {}

        remaining = list(tiles)
        seed = self._pop_seed(remaining)
        if self._rng is not None:
            self._rng.shuffle(remaining)
        self._remaining = {tile.id: tile for tile in remaining}
        self._build_index(remaining)
        self._place((0, 0), orient_tile(seed)[0])

        max_iterations = self.config.max_iterations or len(tiles)
        iterations = 0
        while self._remaining:
            if iterations >= max_iterations:
                raise NoValidArrangement(
                    f"Stopped after {iterations} frontier scans with "
                    f"{len(self._remaining)} tiles unplaced",
                    unplaced=list(self._remaining),
                )
            iterations += 1
            if not self._place_next():
                raise NoValidArrangement(
                    f"No tile fits any of {len(self.frontier())} frontier positions; "
                    f"{len(self._remaining)} tiles unplaced",
                    unplaced=list(self._remaining),
                )

        if self.config.verbose:
            print(f"  Placed {len(self.placements)} tiles "
                  f"({self.bbox.height}x{self.bbox.width} grid)")

        return Assembly(placements=MappingProxyType(dict(self.placements)), bbox=self.bbox)

    def frontier(self) -> List[Position]:
        """Unfilled positions 4-adjacent to a filled one, first-seen order."""
        seen = set()
        positions = []
        for row, col in self.placements:
            for d_row, d_col in NEIGHBOR_SIDES:
                pos = (row + d_row, col + d_col)
                if pos not in self.placements and pos not in seen:
                    seen.add(pos)
                    positions.append(pos)
        if self._rng is not None:
            self._rng.shuffle(positions)
        return positions

    def can_fit(self, position: Position, edges: Mapping[Side, EdgeKey]) -> bool:
        """True when `edges` agree with every placed neighbour of `position`."""
        row, col = position
        neighbors = 0
        for (d_row, d_col), side in NEIGHBOR_SIDES.items():
            placed = self._placed_edges.get((row + d_row, col + d_col))
            if placed is None:
                continue
            neighbors += 1
            if edges[side] != placed[side.opposite]:
                return False
        return neighbors > 0

    def candidates(self, position: Position) -> List[OrientedTile]:
        """
        Unplaced oriented tiles matching the first placed neighbour of
        `position`, in work-list then orientation order.
        """
        row, col = position
        for (d_row, d_col), side in NEIGHBOR_SIDES.items():
            placed = self._placed_edges.get((row + d_row, col + d_col))
            if placed is not None:
                return [
                    c for c in self._index.get((side, placed[side.opposite]), ())
                    if c.tile.id in self._remaining
                ]
        return []

    def _place_next(self) -> bool:
        for position in self.frontier():
            for candidate in self.candidates(position):
                if self.can_fit(position, candidate.edges):
                    self._place(position, candidate)
                    return True
        return False

    def _build_index(self, tiles: Sequence[Tile]) -> None:
        self._index = defaultdict(list)
        for tile in tiles:
            for candidate in orient_tile(tile):
                for side, key in candidate.edges.items():
                    self._index[(side, key)].append(candidate)

    def _place(self, position: Position, candidate: OrientedTile) -> None:
        tile = candidate.tile
        self.placements[position] = Placement(position, tile.id, candidate.orientation, candidate.grid)
        self._placed_edges[position] = candidate.edges
        self._remaining.pop(tile.id, None)
        self.bbox = self.bbox.include(position)
        if self.config.verbose:
            print(f"    Tile {tile.id} -> {position} ({candidate.orientation})")

    def _pop_seed(self, remaining: List[Tile]) -> Tile:
        seed_id = self.config.seed_tile_id
        if seed_id is None:
            return remaining.pop(0)
        for index, tile in enumerate(remaining):
            if tile.id == seed_id:
                return remaining.pop(index)
        raise NoValidArrangement(
            f"Seed tile {seed_id} is not in the input",
            unplaced=[t.id for t in remaining],
        )

    @staticmethod
    def _validate(tiles: Sequence[Tile]) -> None:
        side = tiles[0].side
        ids = set()
        for tile in tiles:
            if tile.side != side:
                raise DimensionMismatch(
                    f"Tile {tile.id} is {tile.side}x{tile.side}, expected {side}x{side}"
                )
            if tile.id in ids:
                raise TileFormatError(f"Duplicate tile id {tile.id}")
            ids.add(tile.id)


def assemble_tiles(tiles: Sequence[Tile], config: Optional[AssemblerConfig] = None) -> Assembly:
    """Convenience wrapper around TileAssembler."""
    return TileAssembler(config).assemble(tiles)
