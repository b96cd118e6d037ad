"""Protein catalogue describing the genome layout."""
from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Callable, Iterable, Iterator, Optional

from artmaker.core.errors import ConfigurationError
from .phenotype import DrawInstruction, PhenotypeValue, ScalarValue

DecodeFn = Callable[[str, int, int, int], Optional[PhenotypeValue]]


def digits(genome: str, start: int, count: int) -> str:
    return genome[start : start + count]


def scaled(genome: str, start: int, count: int, target: float) -> float:
    """Map ``count`` digits linearly onto ``[0, target]``."""
    chunk = digits(genome, start, count)
    if not chunk or count <= 0:
        return 0.0
    return int(chunk) / (10**count - 1) * target


def rgb(genome: str, start: int = 0, count: int = 3) -> float:
    return scaled(genome, start, count, 255.0)


@dataclass(frozen=True)
class Protein:
    """One positioned segment of the genome.

    Repeating proteins are prefixed by a control digit holding their sibling
    count; the payload then spans ``siblings * size`` digits. Drawable
    proteins must carry a ``decode`` that yields draw instructions; any other
    protein without one decodes to its raw digits.
    """

    name: str
    ordinal: int
    size: int
    repeating: bool = False
    drawable: bool = False
    decode: Optional[DecodeFn] = field(default=None, compare=False)

    def express(self, payload: str, index: int, siblings: int, offset: int) -> Optional[PhenotypeValue]:
        if self.decode is None:
            return ScalarValue(self.name, payload, payload)
        return self.decode(payload, index, siblings, offset)


class ProteinSchema:
    """Immutable, ordinal-ordered protein catalogue."""

    def __init__(self, proteins: Iterable[Protein]):
        items = list(proteins)
        if not items:
            raise ConfigurationError("schema needs at least one protein")
        names = [p.name for p in items]
        if len(set(names)) != len(names):
            raise ConfigurationError(f"duplicate protein names in {names}")
        ordinals = sorted(p.ordinal for p in items)
        if ordinals != list(range(len(items))):
            raise ConfigurationError(f"protein ordinals must be contiguous from 0, got {ordinals}")
        for p in items:
            if p.size < 0:
                raise ConfigurationError(f"protein {p.name!r} has negative size {p.size}")
            if p.drawable and p.decode is None:
                raise ConfigurationError(f"drawable protein {p.name!r} needs a decode function")
        self._proteins = tuple(sorted(items, key=lambda p: p.ordinal))
        self._by_name = {p.name: p for p in self._proteins}

    def proteins(self) -> tuple[Protein, ...]:
        return self._proteins

    def __iter__(self) -> Iterator[Protein]:
        return iter(self._proteins)

    def __len__(self) -> int:
        return len(self._proteins)

    def __getitem__(self, name: str) -> Protein:
        return self._by_name[name]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"ProteinSchema({[p.name for p in self._proteins]})"

    @property
    def fixed_length(self) -> int:
        """Genome length when every repeating protein has zero siblings."""
        return sum(1 if p.repeating else p.size for p in self._proteins)

    @property
    def max_length(self) -> int:
        return sum(1 + 9 * p.size if p.repeating else p.size for p in self._proteins)


# --- default drawing catalogue ------------------------------------------------


def _decode_setup(payload: str, index: int, siblings: int, offset: int) -> None:
    # occupies no digits; its only role is the leading boundary at offset 0
    return None


def _decode_frame_rate(payload: str, index: int, siblings: int, offset: int) -> ScalarValue:
    return ScalarValue("frame_rate", int(payload) / 4 if payload else 0.0, payload)


def _decode_background(payload: str, index: int, siblings: int, offset: int) -> ScalarValue:
    return ScalarValue("background", (rgb(payload, 0), rgb(payload, 3), rgb(payload, 6)), payload)


def _decode_ellipse(payload: str, index: int, siblings: int, offset: int) -> DrawInstruction:
    return DrawInstruction(
        shape="ellipse",
        index=index,
        siblings=siblings,
        params={
            "radius": int(digits(payload, 0, 2)),
            "fill": (rgb(payload, 2), rgb(payload, 5), rgb(payload, 8)),
        },
    )


def _decode_linegrid(payload: str, index: int, siblings: int, offset: int) -> Optional[DrawInstruction]:
    # many siblings draw a square grid, few draw rays from the centre
    if siblings > 7:
        density = int(digits(payload, 0, 3)) / 150
        if density == 0:
            return None
        return DrawInstruction("grid", index, siblings, {"density": density, "lines": math.ceil(density)})
    if siblings < 4:
        step = int(digits(payload, 3, 2))
        if step == 0:
            return None
        return DrawInstruction("rays", index, siblings, {"angle_step": step, "count": 360 / step})
    return None


def default_schema() -> ProteinSchema:
    """Catalogue used by the gallery: setup anchor, animation gate, frame rate, background, ellipses, line grids."""
    return ProteinSchema(
        [
            Protein("setup", 0, 0, decode=_decode_setup),
            Protein("drawing", 1, 2),
            Protein("frame_rate", 2, 2, decode=_decode_frame_rate),
            Protein("background", 3, 9, decode=_decode_background),
            Protein("ellipse", 4, 11, repeating=True, drawable=True, decode=_decode_ellipse),
            Protein("linegrid", 5, 5, repeating=True, drawable=True, decode=_decode_linegrid),
        ]
    )
