#!/usr/bin/env python3
"""CLI tool to plan and play a sentence rotation.

Usage:
    python examples/rotate_sentences.py <sentence> <sentence> [...]

Examples:
    python examples/rotate_sentences.py "I like cats." "I really like dogs!"
    python examples/rotate_sentences.py -f sentences.txt --json --pretty
    python examples/rotate_sentences.py -f sentences.txt --ticks 6 --interval 300
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from substitute import (
    EditPlan,
    Insert,
    Keep,
    Orchestrator,
    Remove,
    Substitute,
    SubstituteError,
    build_tour,
    join_tokens,
    load_settings,
    strip_marker,
    tokenize_all,
)
from substitute.animation import MemoryRenderer


def action_to_dict(action: Keep | Substitute | Remove | Insert) -> dict[str, Any]:
    """Convert an edit action to a JSON-serializable dict."""
    if isinstance(action, Keep | Substitute):
        return {
            "type": type(action).__name__.lower(),
            "from_index": action.from_index,
            "to_index": action.to_index,
            "from_word": strip_marker(action.from_word),
            "to_word": strip_marker(action.to_word),
        }
    if isinstance(action, Remove):
        return {"type": "remove", "from_index": action.from_index, "from_word": strip_marker(action.from_word)}
    return {"type": "insert", "to_index": action.to_index, "to_word": strip_marker(action.to_word)}


def plan_to_dict(plan: EditPlan) -> dict[str, Any]:
    """Convert an EditPlan to a JSON-serializable dict."""
    return {
        "from": join_tokens(plan.source),
        "to": join_tokens(plan.target),
        "cost": plan.cost,
        "actions": [action_to_dict(action) for action in plan.actions],
    }


async def play(sentences: list[str], options: dict[str, Any], ticks: int) -> None:
    """Run the rotation against an in-memory container and print each sentence."""
    renderer = MemoryRenderer()
    orchestrator = Orchestrator(sentences, renderer, load_settings(options))
    if not orchestrator.queue:
        return

    orchestrator.run()
    for _ in range(ticks + 1):
        if orchestrator.last_dispatch is not None:
            await orchestrator.last_dispatch.finished
        print(renderer.displayed_text())
        if orchestrator.queue:
            await asyncio.sleep(orchestrator.settings.interval_seconds)
    orchestrator.stop()


def read_sentences(args: argparse.Namespace) -> list[str]:
    """Collect sentences from the arguments and the optional file."""
    sentences = list(args.sentences)
    if args.file is not None:
        lines = args.file.read_text().splitlines()
        sentences.extend(line.strip() for line in lines if line.strip())
    return sentences


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Plan and play a word-level sentence rotation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "I like cats." "I really like dogs!"
  %(prog)s -f sentences.txt --json --pretty
  %(prog)s -f sentences.txt --ticks 6 --interval 300
        """,
    )
    parser.add_argument("sentences", nargs="*", help="Sentences to rotate among")
    parser.add_argument("-f", "--file", type=Path, default=None, help="File with one sentence per line")
    parser.add_argument("--json", action="store_true", help="Print the tour as JSON instead of playing it")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    parser.add_argument("--ticks", type=int, default=3, help="Number of sentence changes to play (default: 3)")
    parser.add_argument("--interval", type=int, default=500, help="Milliseconds between changes (default: 500)")
    parser.add_argument("--speed", type=int, default=20, help="Milliseconds per animation step (default: 20)")
    parser.add_argument("--ring", action="store_true", help="Keep the given order instead of the cheapest tour")
    parser.add_argument("--random", action="store_true", help="Start the rotation at a random sentence")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log planning and animation steps")

    args = parser.parse_args()

    if args.file is not None and not args.file.exists():
        print(f"Error: Input file not found: {args.file}", file=sys.stderr)
        return 1

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    sentences = read_sentences(args)
    options = {
        "interval": args.interval,
        "speed": args.speed,
        "best": not args.ring,
        "random": args.random,
        "verbose": args.verbose,
    }

    try:
        if args.json:
            tour = build_tour(tokenize_all(sentences), best=not args.ring, random_start=args.random)
            indent = 2 if args.pretty else None
            print(json.dumps([plan_to_dict(plan) for plan in tour], indent=indent, ensure_ascii=False))
        else:
            asyncio.run(play(sentences, options, args.ticks))
    except SubstituteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
