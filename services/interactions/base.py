"""
Base interaction list generator.

Abstract base class for all interaction list generators.
"""

import logging
from abc import ABC, abstractmethod
from typing import Mapping, Union

from domain.config import InteractionListConfig
from domain.interaction import (
    InitialState,
    InteractionList,
    InteractionListResult,
    InteractionType,
    NoChannel,
)
from services import pdg
from utils.log import INTERACTION_LIST_LOGGER


class InteractionListGenerator(ABC):
    """
    Base class for interaction list generators.

    One implementation per process family. Generators hold no mutable
    state, so a single instance can be shared across concurrent runs.
    """

    def __init__(self):
        """Initialize generator."""
        self.logger = logging.getLogger(INTERACTION_LIST_LOGGER)

    def create_interaction_list(
        self,
        initial_state: InitialState,
        configuration: Union[InteractionListConfig, Mapping]
    ) -> InteractionListResult:
        """
        Enumerate the interactions this process family allows.

        Args:
            initial_state: Probe and target (struck nucleon unset)
            configuration: InteractionListConfig or mapping with
                'is-CC', 'is-NC', 'is-Charm'

        Returns:
            Non-empty InteractionList, or NoChannel
        """
        config = self._coerce_config(configuration)

        self.logger.info(
            f"Generating {self.__class__.__name__} interaction list for {initial_state}"
        )

        interaction_type = self._select_interaction_type(config)
        if interaction_type is None:
            return self._no_channel("no interaction type selected")

        probe = initial_state.probe_pdg
        if not pdg.is_neutrino(probe) and not pdg.is_antineutrino(probe):
            return self._no_channel(f"probe {probe} is not a neutrino or antineutrino")

        interactions = self._enumerate(initial_state, interaction_type, config)

        if len(interactions) == 0:
            return self._no_channel(f"no eligible struck nucleon in target [{initial_state.target}]")

        self.logger.info(f"Generated {len(interactions)} interactions")
        return interactions

    @abstractmethod
    def _enumerate(
        self,
        initial_state: InitialState,
        interaction_type: InteractionType,
        config: InteractionListConfig
    ) -> InteractionList:
        """
        Build the candidate list for a validated probe and interaction type.

        May return an empty list; the caller collapses it to NoChannel.
        """
        pass

    @staticmethod
    def _coerce_config(configuration) -> InteractionListConfig:
        if isinstance(configuration, InteractionListConfig):
            return configuration
        return InteractionListConfig.from_dict(configuration)

    @staticmethod
    def _select_interaction_type(config: InteractionListConfig):
        # CC wins when both are requested
        if config.is_cc:
            return InteractionType.WEAK_CC
        if config.is_nc:
            return InteractionType.WEAK_NC
        return None

    @staticmethod
    def _available_nucleons(initial_state: InitialState) -> list[int]:
        """Struck nucleon candidates, always proton before neutron."""
        target = initial_state.target
        nucleons = []
        if target.has_protons:
            nucleons.append(pdg.PDG_PROTON)
        if target.has_neutrons:
            nucleons.append(pdg.PDG_NEUTRON)
        return nucleons

    def _no_channel(self, reason: str) -> NoChannel:
        self.logger.warning(f"Could not generate interaction list: {reason}")
        return NoChannel(reason=reason)
