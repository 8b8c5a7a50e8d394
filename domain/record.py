"""
Event record domain models.

The event record is the one mutable object in the domain: processing
stages append and edit particle entries in place.
"""

import copy
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, Optional

import awkward as ak
import numpy as np

from services import pdg
from .interaction import Interaction


class ParticleStatus(IntEnum):
    """Status code of a particle entry."""

    INITIAL_STATE = 0
    STABLE_FINAL_STATE = 1
    INTERMEDIATE = 2
    DECAYED = 3
    NUCLEON_TARGET = 11
    HADRON_IN_NUCLEUS = 14

    def __str__(self) -> str:
        return self.name


def _four_momentum(values=None) -> np.ndarray:
    if values is None:
        return np.zeros(4, dtype=np.float64)
    p4 = np.asarray(values, dtype=np.float64).copy()
    if p4.shape != (4,):
        raise ValueError(f"momentum must have 4 components (px, py, pz, E), got shape {p4.shape}")
    return p4


@dataclass(eq=False)
class ParticleEntry:
    """
    One particle in the event record.

    Mother and daughter links are index ranges into the owning record,
    -1 meaning no link.
    """

    pdg: int
    status: ParticleStatus
    first_mother: int = -1
    last_mother: int = -1
    first_daughter: int = -1
    last_daughter: int = -1
    momentum: np.ndarray = field(default_factory=_four_momentum)

    def __post_init__(self):
        self.momentum = _four_momentum(self.momentum)
        if self.last_mother == -1 and self.first_mother >= 0:
            self.last_mother = self.first_mother

    @property
    def energy(self) -> float:
        return float(self.momentum[3])

    @property
    def mass(self) -> float:
        """Invariant mass, clipped at zero for numerically off-shell entries."""
        px, py, pz, e = self.momentum
        m2 = e * e - (px * px + py * py + pz * pz)
        return float(np.sqrt(max(m2, 0.0)))

    @property
    def has_mother(self) -> bool:
        return self.first_mother >= 0

    @property
    def has_daughters(self) -> bool:
        return self.first_daughter >= 0

    def __eq__(self, other) -> bool:
        if not isinstance(other, ParticleEntry):
            return NotImplemented
        return (
            self.pdg == other.pdg
            and self.status == other.status
            and self.first_mother == other.first_mother
            and self.last_mother == other.last_mother
            and self.first_daughter == other.first_daughter
            and self.last_daughter == other.last_daughter
            and np.array_equal(self.momentum, other.momentum)
        )


class EventRecord:
    """
    Ordered particle record of one event.

    Entries may only name mothers that precede them, so the
    mother/daughter graph is acyclic by construction.
    """

    def __init__(self, interaction: Optional[Interaction] = None, weight: float = 1.0):
        self.interaction = interaction
        self.weight = weight
        self._entries: list[ParticleEntry] = []

    @classmethod
    def from_interaction(cls, interaction: Interaction, probe_energy: float) -> 'EventRecord':
        """
        Initialize a record with the initial state of an interaction.

        Adds the probe, the target and (for nuclear targets) the struck
        nucleon as a daughter of the target. The target sits at rest and
        its energy ignores nuclear binding.

        Args:
            interaction: Selected interaction channel
            probe_energy: Probe energy in GeV, travelling along +z

        Returns:
            EventRecord holding the initial-state entries
        """
        record = cls(interaction=interaction)
        record.append_initial_state(probe_energy)
        return record

    def append_initial_state(self, probe_energy: float):
        """Append the probe, target and struck nucleon of the bound interaction."""
        if self.interaction is None:
            raise ValueError("record has no interaction to take the initial state from")
        if probe_energy <= 0:
            raise ValueError(f"probe_energy must be positive, got {probe_energy}")

        interaction = self.interaction
        target = interaction.target

        self.add_particle(ParticleEntry(
            pdg=interaction.probe_pdg,
            status=ParticleStatus.INITIAL_STATE,
            momentum=(0.0, 0.0, probe_energy, probe_energy),
        ))

        target_mass = (
            target.Z * pdg.NUCLEON_MASSES[pdg.PDG_PROTON]
            + target.N * pdg.NUCLEON_MASSES[pdg.PDG_NEUTRON]
        )
        target_index = self.add_particle(ParticleEntry(
            pdg=target.pdg,
            status=ParticleStatus.INITIAL_STATE,
            momentum=(0.0, 0.0, 0.0, target_mass),
        ))

        nucleon = interaction.struck_nucleon_pdg
        if nucleon is not None and target.is_nucleus:
            self.add_particle(ParticleEntry(
                pdg=nucleon,
                status=ParticleStatus.NUCLEON_TARGET,
                first_mother=target_index,
                momentum=(0.0, 0.0, 0.0, pdg.NUCLEON_MASSES[nucleon]),
            ))

    def add_particle(self, entry: ParticleEntry) -> int:
        """
        Append a particle and link it to its mothers.

        Args:
            entry: Particle to append

        Returns:
            Index of the new entry
        """
        position = len(self._entries)

        if not entry.has_mother and entry.last_mother >= 0:
            raise ValueError(
                f"last_mother ({entry.last_mother}) set without first_mother ({entry.first_mother})"
            )
        if entry.has_mother:
            if entry.last_mother < entry.first_mother:
                raise ValueError(
                    f"last_mother ({entry.last_mother}) must not precede first_mother ({entry.first_mother})"
                )
            if entry.last_mother >= position:
                raise ValueError(
                    f"mother index {entry.last_mother} must refer to an earlier entry (record has {position})"
                )

        self._entries.append(entry)

        if entry.has_mother:
            for mother_index in range(entry.first_mother, entry.last_mother + 1):
                mother = self._entries[mother_index]
                if mother.first_daughter < 0:
                    mother.first_daughter = position
                mother.last_daughter = position

        return position

    def particle(self, position: int) -> ParticleEntry:
        return self._entries[position]

    def daughters(self, position: int) -> list[ParticleEntry]:
        entry = self._entries[position]
        if not entry.has_daughters:
            return []
        return self._entries[entry.first_daughter:entry.last_daughter + 1]

    def final_state(self) -> list[ParticleEntry]:
        return [p for p in self._entries if p.status == ParticleStatus.STABLE_FINAL_STATE]

    def copy(self) -> 'EventRecord':
        """Deep copy sharing no mutable state with this record."""
        return copy.deepcopy(self)

    def to_awkward(self) -> ak.Array:
        """Columnar view of the entries (one record per particle)."""
        return ak.Array({
            "pdg": [p.pdg for p in self._entries],
            "status": [int(p.status) for p in self._entries],
            "first_mother": [p.first_mother for p in self._entries],
            "last_mother": [p.last_mother for p in self._entries],
            "first_daughter": [p.first_daughter for p in self._entries],
            "last_daughter": [p.last_daughter for p in self._entries],
            "px": [float(p.momentum[0]) for p in self._entries],
            "py": [float(p.momentum[1]) for p in self._entries],
            "pz": [float(p.momentum[2]) for p in self._entries],
            "E": [float(p.momentum[3]) for p in self._entries],
        })

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ParticleEntry]:
        return iter(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, EventRecord):
            return NotImplemented
        return (
            self.interaction == other.interaction
            and self.weight == other.weight
            and self._entries == other._entries
        )

    def __str__(self) -> str:
        lines = [f"Event record [{len(self)} entries, weight={self.weight:g}]"]
        if self.interaction is not None:
            lines.append(f"  interaction: {self.interaction}")
        lines.append(
            f"  {'idx':>3} {'name':>14} {'ist':>4} {'mom':>9} {'dau':>9} "
            f"{'px':>9} {'py':>9} {'pz':>9} {'E':>9}"
        )
        for i, p in enumerate(self._entries):
            px, py, pz, e = p.momentum
            lines.append(
                f"  {i:>3} {pdg.particle_name(p.pdg):>14} {int(p.status):>4} "
                f"{p.first_mother:>4}{p.last_mother:>5} {p.first_daughter:>4}{p.last_daughter:>5} "
                f"{px:>9.3f} {py:>9.3f} {pz:>9.3f} {e:>9.3f}"
            )
        return "\n".join(lines)
