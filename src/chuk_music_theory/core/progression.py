"""
Progression primitives - ChordProgressionNode, ChordProgression, HarmonicFunction.

Progressions are key-independent: a sequence of scale degrees (I..VII)
that resolves to concrete chords through a scale's harmonic field.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from chuk_music_theory.constants import ErrorMessages

from .chord import Chord
from .scale import HarmonicField, Scale

_ROMAN: list[str] = ["I", "II", "III", "IV", "V", "VI", "VII"]


class ChordProgressionNode(IntEnum):
    """A scale degree in a progression (value = zero-based degree index)."""

    I = 0  # noqa: E741
    II = 1
    III = 2
    IV = 3
    V = 4
    VI = 5
    VII = 6

    @classmethod
    def parse(cls, text: str) -> ChordProgressionNode:
        """Parse a roman numeral like 'IV' or 'vi' (case-insensitive)."""
        numeral = text.strip().upper()
        if numeral not in _ROMAN:
            raise ValueError(ErrorMessages.INVALID_NODE.format(text=text))
        return cls(_ROMAN.index(numeral))

    @property
    def next(self) -> list[ChordProgressionNode]:
        """Nodes that commonly follow this one."""
        return list(_NEXT_NODES[self])

    def __str__(self) -> str:
        return self.name


_N = ChordProgressionNode

# Recommended continuations (module level to avoid IntEnum member issues)
_NEXT_NODES: dict[ChordProgressionNode, tuple[ChordProgressionNode, ...]] = {
    _N.I: (_N.I, _N.II, _N.III, _N.IV, _N.V, _N.VI, _N.VII),
    _N.II: (_N.V, _N.III, _N.VI, _N.VII),
    _N.III: (_N.II, _N.IV, _N.VI),
    _N.IV: (_N.I, _N.III, _N.V, _N.VII),
    _N.V: (_N.I,),
    _N.VI: (_N.II, _N.IV),
    _N.VII: (_N.VI,),
}


@dataclass(frozen=True)
class ChordProgression:
    """
    An ordered sequence of scale-degree nodes.

    Examples:
        ChordProgression.I_V_VI_IV.description = "I - V - VI - IV"
        ChordProgression.ALL_NODES.description = "All"
    """

    nodes: tuple[ChordProgressionNode, ...]

    ALL_NODES: ClassVar[ChordProgression]
    I_V_VI_IV: ClassVar[ChordProgression]
    VI_V_IV_V: ClassVar[ChordProgression]
    I_VI_IV_V: ClassVar[ChordProgression]
    I_IV_VI_V: ClassVar[ChordProgression]
    I_V_IV_V: ClassVar[ChordProgression]
    VI_II_V_I: ClassVar[ChordProgression]
    I_VI_II_V: ClassVar[ChordProgression]
    I_IV_II_V: ClassVar[ChordProgression]
    VI_IV_I_V: ClassVar[ChordProgression]
    I_VI_III_VII: ClassVar[ChordProgression]
    VI_V_IV_III: ClassVar[ChordProgression]
    I_V_VI_III_IV_I_IV_V: ClassVar[ChordProgression]
    IV_I_V_IV: ClassVar[ChordProgression]
    I_II_VI_IV: ClassVar[ChordProgression]
    I_III_VI_IV: ClassVar[ChordProgression]
    I_V_II_IV: ClassVar[ChordProgression]
    II_IV_I_V: ClassVar[ChordProgression]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "nodes", tuple(ChordProgressionNode(node) for node in self.nodes)
        )

    @classmethod
    def parse(cls, text: str) -> ChordProgression:
        """Parse numerals separated by '-' or whitespace, e.g. 'I-V-vi-IV'."""
        numerals = text.replace("-", " ").split()
        return cls(tuple(ChordProgressionNode.parse(numeral) for numeral in numerals))

    @classmethod
    def from_nodes(cls, nodes: list[ChordProgressionNode]) -> ChordProgression:
        """Return the named progression with these nodes, or a new unnamed one."""
        wanted = tuple(ChordProgressionNode(node) for node in nodes)
        for progression in _NAMED:
            if progression.nodes == wanted:
                return progression
        return cls(wanted)

    @classmethod
    def all(cls) -> list[ChordProgression]:
        """The named progressions."""
        return list(_NAMED)

    @property
    def description(self) -> str:
        if self.nodes == ChordProgression.ALL_NODES.nodes:
            return "All"
        return " - ".join(str(node) for node in self.nodes)

    def chords(
        self, scale: Scale, field: HarmonicField, inversion: int = 0
    ) -> list[Chord | None]:
        """
        Resolve the progression against a scale's harmonic field.

        Args:
            scale: Scale to harmonize
            field: Chord size
            inversion: Inversion applied to every chord

        Returns:
            One entry per node; None where the harmonic field has no chord
        """
        harmonics = scale.harmonic_field(field, inversion=inversion)
        return [harmonics[node] if node < len(harmonics) else None for node in self.nodes]

    def __len__(self) -> int:
        return len(self.nodes)

    def __str__(self) -> str:
        return self.description


def _progression(name: str, numerals: str) -> ChordProgression:
    progression = ChordProgression.parse(numerals)
    setattr(ChordProgression, name, progression)
    return progression


_NAMED: tuple[ChordProgression, ...] = (
    _progression("ALL_NODES", "I II III IV V VI VII"),
    _progression("I_V_VI_IV", "I V VI IV"),
    _progression("VI_V_IV_V", "VI V IV V"),
    _progression("I_VI_IV_V", "I VI IV V"),
    _progression("I_IV_VI_V", "I IV VI V"),
    _progression("I_V_IV_V", "I V IV V"),
    _progression("VI_II_V_I", "VI II V I"),
    _progression("I_VI_II_V", "I VI II V"),
    _progression("I_IV_II_V", "I IV II V"),
    _progression("VI_IV_I_V", "VI IV I V"),
    _progression("I_VI_III_VII", "I VI III VII"),
    _progression("VI_V_IV_III", "VI V IV III"),
    _progression("I_V_VI_III_IV_I_IV_V", "I V VI III IV I IV V"),
    _progression("IV_I_V_IV", "IV I V IV"),
    _progression("I_II_VI_IV", "I II VI IV"),
    _progression("I_III_VI_IV", "I III VI IV"),
    _progression("I_V_II_IV", "I V II IV"),
    _progression("II_IV_I_V", "II IV I V"),
)


@dataclass(frozen=True)
class CustomChordProgression:
    """A user-named progression."""

    name: str
    progression: ChordProgression

    def __str__(self) -> str:
        return f"{self.name}: {self.progression}"


class HarmonicFunction(IntEnum):
    """Function of a scale degree within a key."""

    TONIC = 0
    SUPERTONIC = 1
    MEDIANT = 2
    SUBDOMINANT = 3
    DOMINANT = 4
    SUBMEDIANT = 5
    LEADING = 6

    @classmethod
    def tonic_prolongation_functions(cls) -> list[HarmonicFunction]:
        return [cls.MEDIANT, cls.SUBMEDIANT]

    @classmethod
    def predominant_functions(cls) -> list[HarmonicFunction]:
        return [cls.SUBMEDIANT, cls.SUPERTONIC]

    @classmethod
    def dominant_functions(cls) -> list[HarmonicFunction]:
        return [cls.DOMINANT, cls.LEADING]

    @property
    def direction(self) -> list[HarmonicFunction]:
        """Functions this one can move to."""
        cls = HarmonicFunction
        if self == cls.TONIC:
            return list(cls)
        if self == cls.SUPERTONIC:
            return cls.dominant_functions()
        if self == cls.MEDIANT:
            return cls.predominant_functions() + [cls.SUBMEDIANT]
        if self == cls.SUBDOMINANT:
            return [cls.SUPERTONIC] + cls.dominant_functions()
        if self == cls.DOMINANT:
            return [cls.TONIC]
        if self == cls.SUBMEDIANT:
            return cls.predominant_functions()
        return [cls.TONIC, cls.SUPERTONIC, cls.DOMINANT]

    @property
    def roman_numeral(self) -> str:
        return _ROMAN[self.value]

    @property
    def node(self) -> ChordProgressionNode:
        """The progression node for this degree."""
        return ChordProgressionNode(self.value)
