"""
Interaction-related domain models.

Immutable descriptions of candidate interactions and the tagged
result returned by interaction list generators.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Iterator, Optional, Union

from services import pdg


@dataclass(frozen=True)
class TargetDescriptor:
    """
    Target nucleus (or free nucleon) composition.

    The struck nucleon is left unset by callers and bound during
    enumeration with ``with_struck_nucleon``.
    """

    Z: int
    N: int
    struck_nucleon_pdg: Optional[int] = None

    def __post_init__(self):
        """Validate the target."""
        if self.Z < 0:
            raise ValueError(f"Z must be non-negative, got {self.Z}")
        if self.N < 0:
            raise ValueError(f"N must be non-negative, got {self.N}")
        if self.struck_nucleon_pdg is not None and not pdg.is_nucleon(self.struck_nucleon_pdg):
            raise ValueError(
                f"struck_nucleon_pdg must be a proton or neutron code, got {self.struck_nucleon_pdg}"
            )

    @property
    def A(self) -> int:
        return self.Z + self.N

    @property
    def is_nucleus(self) -> bool:
        return self.A > 1

    @property
    def has_protons(self) -> bool:
        return self.Z > 0

    @property
    def has_neutrons(self) -> bool:
        return self.N > 0

    @property
    def pdg(self) -> int:
        """PDG code of the target as a whole (bare nucleon code for A == 1)."""
        if self.A == 1:
            return pdg.PDG_PROTON if self.Z == 1 else pdg.PDG_NEUTRON
        return pdg.ion_pdg_code(self.Z, self.A)

    def with_struck_nucleon(self, nucleon_pdg: int) -> 'TargetDescriptor':
        return replace(self, struck_nucleon_pdg=nucleon_pdg)

    def __str__(self) -> str:
        text = f"Z={self.Z}, N={self.N}"
        if self.struck_nucleon_pdg is not None:
            text += f", struck={pdg.particle_name(self.struck_nucleon_pdg)}"
        return text


@dataclass(frozen=True)
class InitialState:
    """Probe species and target."""

    probe_pdg: int
    target: TargetDescriptor

    def with_struck_nucleon(self, nucleon_pdg: int) -> 'InitialState':
        """Return a copy with the struck nucleon bound into the target."""
        return replace(self, target=self.target.with_struck_nucleon(nucleon_pdg))

    def __str__(self) -> str:
        return f"{pdg.particle_name(self.probe_pdg)} + [{self.target}]"


class ScatteringType(Enum):
    """Scattering regime."""

    QUASI_ELASTIC = auto()
    DEEP_INELASTIC = auto()

    def __str__(self) -> str:
        return self.name


class InteractionType(Enum):
    """Weak interaction mode."""

    WEAK_CC = auto()
    WEAK_NC = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ProcessInfo:
    """Scattering regime plus interaction mode."""

    scattering: ScatteringType
    interaction: InteractionType

    @property
    def is_cc(self) -> bool:
        return self.interaction == InteractionType.WEAK_CC

    @property
    def is_nc(self) -> bool:
        return self.interaction == InteractionType.WEAK_NC

    @property
    def is_deep_inelastic(self) -> bool:
        return self.scattering == ScatteringType.DEEP_INELASTIC

    @property
    def is_quasi_elastic(self) -> bool:
        return self.scattering == ScatteringType.QUASI_ELASTIC

    def __str__(self) -> str:
        return f"<{self.scattering} - {self.interaction}>"


@dataclass(frozen=True)
class ExclusiveTag:
    """Restriction on the hadronic final state."""

    charm: bool = False

    @classmethod
    def charm_production(cls) -> 'ExclusiveTag':
        return cls(charm=True)

    def __str__(self) -> str:
        return "charm" if self.charm else "inclusive"


@dataclass(frozen=True)
class Interaction:
    """One candidate interaction channel."""

    initial_state: InitialState
    process_info: ProcessInfo
    exclusive_tag: Optional[ExclusiveTag] = None

    @property
    def probe_pdg(self) -> int:
        return self.initial_state.probe_pdg

    @property
    def target(self) -> TargetDescriptor:
        return self.initial_state.target

    @property
    def struck_nucleon_pdg(self) -> Optional[int]:
        return self.initial_state.target.struck_nucleon_pdg

    @property
    def is_charm(self) -> bool:
        return self.exclusive_tag is not None and self.exclusive_tag.charm

    def __str__(self) -> str:
        text = f"{self.initial_state} {self.process_info}"
        if self.exclusive_tag is not None:
            text += f" [{self.exclusive_tag}]"
        return text


class InteractionList(Sequence):
    """
    Ordered collection of interactions.

    Iteration order is insertion order, which generators use to
    express enumeration order.
    """

    def __init__(self, interactions: Optional[list[Interaction]] = None):
        self._interactions: list[Interaction] = []
        for interaction in interactions or []:
            self.append(interaction)

    def append(self, interaction: Interaction):
        if not isinstance(interaction, Interaction):
            raise TypeError(f"Expected Interaction, got {type(interaction).__name__}")
        self._interactions.append(interaction)

    def __getitem__(self, index):
        return self._interactions[index]

    def __len__(self) -> int:
        return len(self._interactions)

    def __iter__(self) -> Iterator[Interaction]:
        return iter(self._interactions)

    def __eq__(self, other) -> bool:
        if not isinstance(other, InteractionList):
            return NotImplemented
        return self._interactions == other._interactions

    def __repr__(self) -> str:
        return f"InteractionList({self._interactions!r})"

    def __str__(self) -> str:
        lines = [f"Interaction list [{len(self)} entries]"]
        for i, interaction in enumerate(self._interactions):
            lines.append(f"  {i}: {interaction}")
        return "\n".join(lines)


@dataclass(frozen=True)
class NoChannel:
    """No physically valid interaction exists for the given input."""

    reason: str

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"No channel: {self.reason}"


InteractionListResult = Union[InteractionList, NoChannel]
