"""
Shared fixtures for the test suite.
"""

import pytest

from domain.interaction import InitialState, TargetDescriptor
from domain.record import EventRecord, ParticleEntry, ParticleStatus
from services import pdg
from services.interactions import DISInteractionListGenerator


@pytest.fixture
def carbon_initial_state():
    """nu_mu on carbon-12."""
    return InitialState(probe_pdg=pdg.PDG_NU_MU, target=TargetDescriptor(Z=6, N=6))


@pytest.fixture
def carbon_interaction(carbon_initial_state):
    """First DIS CC channel on carbon-12 (struck proton)."""
    interactions = DISInteractionListGenerator().create_interaction_list(
        carbon_initial_state, {"is-CC": True}
    )
    return interactions[0]


@pytest.fixture
def sample_record(carbon_interaction):
    """Initial state plus one final state lepton."""
    record = EventRecord.from_interaction(carbon_interaction, probe_energy=2.0)
    record.add_particle(ParticleEntry(
        pdg=pdg.PDG_MUON,
        status=ParticleStatus.STABLE_FINAL_STATE,
        first_mother=0,
        momentum=(0.1, 0.2, 1.5, 1.52),
    ))
    return record
