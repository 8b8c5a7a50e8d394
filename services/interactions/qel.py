"""
QELInteractionListGenerator - Quasi-elastic interaction channels.
"""

from domain.config import InteractionListConfig
from domain.interaction import (
    InitialState,
    Interaction,
    InteractionList,
    InteractionType,
    ProcessInfo,
    ScatteringType,
)
from services import pdg
from .base import InteractionListGenerator


class QELInteractionListGenerator(InteractionListGenerator):
    """
    Generator for quasi-elastic scattering.

    CC channels conserve charge on a single nucleon: neutrinos
    scatter off neutrons (nu n -> l- p), antineutrinos off protons
    (nu_bar p -> l+ n). NC channels use both nucleons.
    """

    def _enumerate(
        self,
        initial_state: InitialState,
        interaction_type: InteractionType,
        config: InteractionListConfig
    ) -> InteractionList:
        if config.is_charm:
            self.logger.info("Charm tag ignored for quasi-elastic channels")

        nucleons = self._available_nucleons(initial_state)

        if interaction_type == InteractionType.WEAK_CC:
            allowed = pdg.PDG_NEUTRON if pdg.is_neutrino(initial_state.probe_pdg) else pdg.PDG_PROTON
            nucleons = [n for n in nucleons if n == allowed]

        interactions = InteractionList()
        process_info = ProcessInfo(ScatteringType.QUASI_ELASTIC, interaction_type)
        for nucleon in nucleons:
            interactions.append(Interaction(
                initial_state=initial_state.with_struck_nucleon(nucleon),
                process_info=process_info,
            ))

        return interactions
