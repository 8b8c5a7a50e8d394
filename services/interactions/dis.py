"""
DISInteractionListGenerator - Deep-inelastic interaction channels.
"""

from domain.config import InteractionListConfig
from domain.interaction import (
    ExclusiveTag,
    InitialState,
    Interaction,
    InteractionList,
    InteractionType,
    ProcessInfo,
    ScatteringType,
)
from .base import InteractionListGenerator


class DISInteractionListGenerator(InteractionListGenerator):
    """
    Generator for deep-inelastic scattering.

    One interaction per available nucleon (proton, then neutron),
    tagged for charm production when requested.
    """

    def _enumerate(
        self,
        initial_state: InitialState,
        interaction_type: InteractionType,
        config: InteractionListConfig
    ) -> InteractionList:
        interactions = InteractionList()
        process_info = ProcessInfo(ScatteringType.DEEP_INELASTIC, interaction_type)
        exclusive_tag = ExclusiveTag.charm_production() if config.is_charm else None

        for nucleon in self._available_nucleons(initial_state):
            interactions.append(Interaction(
                initial_state=initial_state.with_struck_nucleon(nucleon),
                process_info=process_info,
                exclusive_tag=exclusive_tag,
            ))

        return interactions
