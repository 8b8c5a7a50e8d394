#!/usr/bin/env python3
"""
Main entry point for the neutrino event generator.

Enumerates the interaction channels allowed for a probe and target and,
optionally, runs the generation pipeline over them.

Exit codes:
  0  channels found (and every generated event succeeded)
  1  no channel, or at least one generated event failed
  2  invalid configuration or arguments
"""

import sys
import logging
import argparse
import itertools
import yaml

from domain.config import GenerationConfig
from domain.interaction import InitialState, NoChannel, TargetDescriptor
from orchestration import InitialStateStage, PipelineDriver
from pipeline.executor import EventGenerationExecutor
from services.interactions import get_generator
from utils.log import setup_logging


def load_config(config_path: str) -> dict:
    """Load configuration from YAML file."""
    with open(config_path, 'r') as f:
        return yaml.safe_load(f) or {}


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Neutrino interaction channel enumeration and event generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List DIS channels for nu_mu on carbon-12
  python main.py --probe 14 --Z 6 --N 6

  # Generate 1000 events over those channels at 2 GeV
  python main.py --probe 14 --Z 6 --N 6 --events 1000 --energy 2.0

  # Keep record snapshots between stages
  EVGEN_HISTORY_ENABLE=1 python main.py --probe -14 --Z 1 --N 0 --events 10

  # Dry-run to validate config
  python main.py --dry-run
        """
    )

    parser.add_argument(
        "--config", type=str, default="config.yaml",
        help="Path to configuration file (default: config.yaml)"
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "NOTICE", "WARNING", "ERROR"],
        help="Logging level (default: INFO)"
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Validate configuration without enumerating channels"
    )

    target_group = parser.add_argument_group("Initial State")
    target_group.add_argument("--probe", type=int, default=14, help="Probe PDG code (default: 14)")
    target_group.add_argument("--Z", type=int, default=6, help="Target proton count (default: 6)")
    target_group.add_argument("--N", type=int, default=6, help="Target neutron count (default: 6)")

    gen_group = parser.add_argument_group("Generation Options")
    gen_group.add_argument(
        "--events", type=int, default=0,
        help="Number of events to generate over the channels (default: 0, list only)"
    )
    gen_group.add_argument(
        "--energy", type=float, default=1.0,
        help="Probe energy in GeV (default: 1.0)"
    )

    args = parser.parse_args(argv)

    if args.events < 0:
        parser.error("--events must be non-negative")
    if args.energy <= 0:
        parser.error("--energy must be positive")

    return args


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        logger.info(f"Loading configuration from: {args.config}")
        config = GenerationConfig.from_dict(load_config(args.config))
        generator = get_generator(config.process)
        initial_state = InitialState(
            probe_pdg=args.probe,
            target=TargetDescriptor(Z=args.Z, N=args.N),
        )
    except (OSError, yaml.YAMLError, ValueError, KeyError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    logger.info("Configuration loaded and validated successfully")

    if args.dry_run:
        logger.info("Dry run mode - configuration is valid, exiting")
        logger.info(f"Process: {config.process}, history enabled: {config.history.enabled}")
        return 0

    result = generator.create_interaction_list(initial_state, config.interaction_list)

    if isinstance(result, NoChannel):
        print(result)
        return 1

    print(result)

    if args.events == 0:
        return 0

    driver = PipelineDriver([InitialStateStage(args.energy)], config.driver)
    executor = EventGenerationExecutor.from_config(driver, config)

    channels = list(itertools.islice(itertools.cycle(result), args.events))
    results = executor.generate(channels)
    summary = executor.summarize(results)

    for key, value in summary.to_dict().items():
        logger.info(f"  {key}: {value}")

    return 0 if summary.failed_events == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
