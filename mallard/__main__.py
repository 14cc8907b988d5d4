"""CLI for the duck simulator and behavior registry.

Usage:
    python -m mallard demo
    python -m mallard list
    python -m mallard perform decoy
    python -m mallard perform model --locomote rocket
    python -m mallard --plugins plugins/ list
"""

from __future__ import annotations

import argparse
import logging
import sys

from mallard.archetypes import spawn_archetype
from mallard.config import MallardConfig
from mallard.errors import MallardError
from mallard.plugins import PluginLoader
from mallard.registry import BehaviorRegistry
from mallard.simulator import DuckSimulator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mallard",
        description="Duck simulator: behaviors composed, not inherited",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--plugins",
        action="append",
        default=None,
        metavar="DIR",
        help="Load behavior plugins from DIR (repeatable)",
    )
    parser.add_argument("--log-level", type=str, help="Logging level (default: from config)")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("demo", help="Run the duck simulator scenario")
    subparsers.add_parser("list", help="List registered behaviors and archetypes")

    perform_parser = subparsers.add_parser("perform", help="Spawn one duck and let it perform")
    perform_parser.add_argument("archetype", help="Archetype name (e.g., mallard, decoy)")
    perform_parser.add_argument("--name", type=str, help="Display name for the duck")
    perform_parser.add_argument("--vocalize", type=str, help="Override vocalize behavior")
    perform_parser.add_argument("--locomote", type=str, help="Override locomote behavior")

    return parser


def _render(output: str | None, config: MallardConfig) -> str:
    return output if output is not None else config.silence_marker


def _cmd_demo(config: MallardConfig) -> int:
    simulator = DuckSimulator(config)
    for performance in simulator.run():
        rendered = _render(performance.output, config)
        print(f"{performance.actor:<12} {performance.capability:<9} {rendered}")
    return 0


def _cmd_list() -> int:
    print("Behaviors:")
    for capability, variants in BehaviorRegistry.all_behaviors().items():
        print(f"  {capability}:")
        for name, behavior_cls in variants.items():
            print(f"    {name:<12} {behavior_cls.__name__}")
    print()
    print("Archetypes:")
    for name, arch in BehaviorRegistry.all_archetypes().items():
        print(f"  {name:<12} {arch.get('description', '')}")
    return 0


def _cmd_perform(args: argparse.Namespace, config: MallardConfig) -> int:
    duck = spawn_archetype(
        args.archetype, args.name, vocalize=args.vocalize, locomote=args.locomote
    )
    print(duck.display())
    for capability in duck.capability_names:
        print(f"  {capability}: {_render(duck.perform(capability), config)}")
    print(f"  swim: {duck.swim()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = MallardConfig()
    logging.basicConfig(
        level=(args.log_level or config.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    plugin_dirs = list(config.plugin_dirs) + (args.plugins or [])
    if plugin_dirs:
        stats = PluginLoader.load_all(plugin_dirs)
        for error in stats["errors"]:
            print(f"Warning: {error}", file=sys.stderr)

    try:
        if args.command == "demo":
            return _cmd_demo(config)
        if args.command == "list":
            return _cmd_list()
        if args.command == "perform":
            return _cmd_perform(args, config)
    except MallardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
