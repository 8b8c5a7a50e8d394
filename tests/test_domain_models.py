"""
Unit tests for domain models.

Tests that all domain models validate correctly and are immutable.
"""

import pytest
import numpy as np

from domain import (
    TargetDescriptor,
    InitialState,
    ScatteringType,
    InteractionType,
    ProcessInfo,
    ExclusiveTag,
    Interaction,
    InteractionList,
    NoChannel,
    ParticleStatus,
    ParticleEntry,
    EventRecord,
)
from services import pdg


class TestTargetDescriptor:
    """Tests for TargetDescriptor domain model."""

    def test_create_valid_target(self):
        """Test creating a valid nuclear target."""
        target = TargetDescriptor(Z=26, N=30)

        assert target.A == 56
        assert target.is_nucleus
        assert target.has_protons
        assert target.has_neutrons
        assert target.struck_nucleon_pdg is None
        assert target.pdg == 1000260560

    def test_free_nucleon_pdg(self):
        """Test that free nucleons use the bare nucleon code."""
        assert TargetDescriptor(Z=1, N=0).pdg == pdg.PDG_PROTON
        assert TargetDescriptor(Z=0, N=1).pdg == pdg.PDG_NEUTRON
        assert not TargetDescriptor(Z=1, N=0).is_nucleus

    def test_negative_z_fails(self):
        """Test that negative Z raises ValueError."""
        with pytest.raises(ValueError, match="Z must be non-negative"):
            TargetDescriptor(Z=-1, N=2)

    def test_negative_n_fails(self):
        """Test that negative N raises ValueError."""
        with pytest.raises(ValueError, match="N must be non-negative"):
            TargetDescriptor(Z=2, N=-2)

    def test_empty_target_is_constructible(self):
        """Test that Z=N=0 is allowed (enumeration rejects it later)."""
        target = TargetDescriptor(Z=0, N=0)
        assert not target.has_protons
        assert not target.has_neutrons

    def test_invalid_struck_nucleon_fails(self):
        """Test that a non-nucleon struck code raises ValueError."""
        with pytest.raises(ValueError, match="struck_nucleon_pdg"):
            TargetDescriptor(Z=1, N=1, struck_nucleon_pdg=pdg.PDG_ELECTRON)

    def test_with_struck_nucleon_returns_new_target(self):
        """Test binding the struck nucleon leaves the original untouched."""
        target = TargetDescriptor(Z=6, N=6)
        bound = target.with_struck_nucleon(pdg.PDG_NEUTRON)

        assert bound.struck_nucleon_pdg == pdg.PDG_NEUTRON
        assert target.struck_nucleon_pdg is None

    def test_target_is_immutable(self):
        """Test that TargetDescriptor is immutable."""
        target = TargetDescriptor(Z=6, N=6)
        with pytest.raises(Exception):  # FrozenInstanceError
            target.Z = 8


class TestInteraction:
    """Tests for Interaction and InteractionList."""

    def test_interaction_properties(self, carbon_initial_state):
        """Test convenience accessors."""
        interaction = Interaction(
            initial_state=carbon_initial_state.with_struck_nucleon(pdg.PDG_PROTON),
            process_info=ProcessInfo(ScatteringType.DEEP_INELASTIC, InteractionType.WEAK_CC),
            exclusive_tag=ExclusiveTag.charm_production(),
        )

        assert interaction.probe_pdg == pdg.PDG_NU_MU
        assert interaction.struck_nucleon_pdg == pdg.PDG_PROTON
        assert interaction.process_info.is_cc
        assert interaction.process_info.is_deep_inelastic
        assert interaction.is_charm
        assert "charm" in str(interaction)

    def test_interaction_without_tag_is_not_charm(self, carbon_initial_state):
        """Test that the exclusive tag is absent by default."""
        interaction = Interaction(
            initial_state=carbon_initial_state,
            process_info=ProcessInfo(ScatteringType.DEEP_INELASTIC, InteractionType.WEAK_NC),
        )
        assert interaction.exclusive_tag is None
        assert not interaction.is_charm

    def test_interaction_list_keeps_insertion_order(self, carbon_initial_state):
        """Test that InteractionList iterates in insertion order."""
        info = ProcessInfo(ScatteringType.DEEP_INELASTIC, InteractionType.WEAK_CC)
        neutron = Interaction(carbon_initial_state.with_struck_nucleon(pdg.PDG_NEUTRON), info)
        proton = Interaction(carbon_initial_state.with_struck_nucleon(pdg.PDG_PROTON), info)

        interactions = InteractionList()
        interactions.append(neutron)
        interactions.append(proton)

        assert len(interactions) == 2
        assert list(interactions) == [neutron, proton]
        assert interactions[1] is proton

    def test_interaction_list_rejects_other_types(self):
        """Test that only Interaction values can be appended."""
        with pytest.raises(TypeError):
            InteractionList().append("not an interaction")

    def test_interaction_list_constructor_rejects_other_types(self):
        """Test that the constructor applies the same type check as append."""
        with pytest.raises(TypeError):
            InteractionList(["not an interaction"])

    def test_no_channel_is_falsy(self):
        """Test that NoChannel evaluates false and keeps its reason."""
        sentinel = NoChannel(reason="no interaction type selected")
        assert not sentinel
        assert "no interaction type selected" in str(sentinel)


class TestParticleEntry:
    """Tests for ParticleEntry."""

    def test_momentum_stored_as_array(self):
        """Test that momentum is converted to a float array."""
        entry = ParticleEntry(pdg=pdg.PDG_MUON, status=ParticleStatus.STABLE_FINAL_STATE,
                              momentum=[0, 0, 3, 5])
        assert isinstance(entry.momentum, np.ndarray)
        assert entry.energy == pytest.approx(5.0)
        assert entry.mass == pytest.approx(4.0)

    def test_bad_momentum_shape_fails(self):
        """Test that a non four-vector raises ValueError."""
        with pytest.raises(ValueError, match="4 components"):
            ParticleEntry(pdg=pdg.PDG_MUON, status=ParticleStatus.STABLE_FINAL_STATE,
                          momentum=[1, 2, 3])

    def test_single_mother_sets_last_mother(self):
        """Test that first_mother alone implies last_mother."""
        entry = ParticleEntry(pdg=pdg.PDG_MUON, status=ParticleStatus.STABLE_FINAL_STATE,
                              first_mother=2)
        assert entry.last_mother == 2


class TestEventRecord:
    """Tests for EventRecord."""

    def test_from_interaction_builds_initial_state(self, carbon_interaction):
        """Test probe, target and struck nucleon entries."""
        record = EventRecord.from_interaction(carbon_interaction, probe_energy=3.0)

        assert len(record) == 3
        probe, target, nucleon = list(record)
        assert probe.pdg == pdg.PDG_NU_MU
        assert probe.energy == pytest.approx(3.0)
        assert target.pdg == 1000060120
        assert nucleon.pdg == pdg.PDG_PROTON
        assert nucleon.status == ParticleStatus.NUCLEON_TARGET
        assert nucleon.first_mother == 1
        assert target.first_daughter == 2
        assert target.last_daughter == 2

    def test_free_nucleon_target_has_no_struck_entry(self):
        """Test that a free nucleon target is not split into a daughter."""
        state = InitialState(probe_pdg=pdg.PDG_ANTI_NU_MU, target=TargetDescriptor(Z=1, N=0))
        interaction = Interaction(
            state.with_struck_nucleon(pdg.PDG_PROTON),
            ProcessInfo(ScatteringType.QUASI_ELASTIC, InteractionType.WEAK_CC),
        )
        record = EventRecord.from_interaction(interaction, probe_energy=1.0)
        assert len(record) == 2

    def test_non_positive_energy_fails(self, carbon_interaction):
        """Test that probe energy must be positive."""
        with pytest.raises(ValueError, match="probe_energy must be positive"):
            EventRecord.from_interaction(carbon_interaction, probe_energy=0.0)

    def test_mother_must_precede_entry(self):
        """Test that a forward mother link raises ValueError."""
        record = EventRecord()
        with pytest.raises(ValueError, match="earlier entry"):
            record.add_particle(ParticleEntry(
                pdg=pdg.PDG_MUON, status=ParticleStatus.STABLE_FINAL_STATE, first_mother=0
            ))
        assert len(record) == 0

    def test_last_mother_without_first_mother_fails(self, sample_record):
        """Test that a mother range with no start is rejected before appending."""
        with pytest.raises(ValueError, match="set without first_mother"):
            sample_record.add_particle(ParticleEntry(
                pdg=pdg.PDG_ELECTRON,
                status=ParticleStatus.STABLE_FINAL_STATE,
                first_mother=-1,
                last_mother=3,
            ))
        assert len(sample_record) == 4

    def test_mother_range_past_end_leaves_record_unchanged(self, sample_record):
        """Test that an out-of-range last_mother raises without touching the record."""
        struck = sample_record.particle(2)
        daughters_before = (struck.first_daughter, struck.last_daughter)

        with pytest.raises(ValueError, match="earlier entry"):
            sample_record.add_particle(ParticleEntry(
                pdg=pdg.PDG_MUON,
                status=ParticleStatus.STABLE_FINAL_STATE,
                first_mother=2,
                last_mother=9,
            ))

        assert len(sample_record) == 4
        assert (struck.first_daughter, struck.last_daughter) == daughters_before

    def test_daughter_range_spans_all_daughters(self, sample_record):
        """Test that a mother's daughter range grows with new daughters."""
        sample_record.add_particle(ParticleEntry(
            pdg=pdg.PDG_ELECTRON, status=ParticleStatus.STABLE_FINAL_STATE, first_mother=0
        ))
        probe = sample_record.particle(0)
        assert probe.first_daughter == 3
        assert probe.last_daughter == 4
        assert [p.pdg for p in sample_record.daughters(0)] == [pdg.PDG_MUON, pdg.PDG_ELECTRON]
        assert len(sample_record.final_state()) == 2

    def test_copy_is_equal_and_independent(self, sample_record):
        """Test deep copy shares no mutable state."""
        clone = sample_record.copy()
        assert clone == sample_record

        clone.particle(3).momentum[0] = 99.0
        clone.particle(0).status = ParticleStatus.DECAYED
        clone.weight = 0.5

        assert sample_record.particle(3).momentum[0] == pytest.approx(0.1)
        assert sample_record.particle(0).status == ParticleStatus.INITIAL_STATE
        assert sample_record.weight == 1.0
        assert clone != sample_record

    def test_to_awkward_layout(self, sample_record):
        """Test the columnar view has one row per particle."""
        array = sample_record.to_awkward()

        assert len(array) == 4
        assert array.fields == [
            "pdg", "status", "first_mother", "last_mother",
            "first_daughter", "last_daughter", "px", "py", "pz", "E",
        ]
        assert array["pdg"].tolist()[0] == pdg.PDG_NU_MU
        assert array["E"].tolist()[3] == pytest.approx(1.52)

    def test_str_lists_every_entry(self, sample_record):
        """Test printable table."""
        text = str(sample_record)
        assert "4 entries" in text
        assert "nu_mu" in text
        assert "mu-" in text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
