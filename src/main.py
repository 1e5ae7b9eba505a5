"""
Main entry point for creating, inspecting and auto-playing word connect sessions.

Usage:
    python -m src.main config.yaml
    python -m src.main config.yaml --local --autoplay --output sessions/run1.json
    python -m src.main --resume sessions/run1.json --hint
"""

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from .content import ContentService, LLMConfig
from .engine import (
    GameSession,
    Language,
    Level,
    MalformedInput,
    StateValidationError,
    WordConnectError,
    create_session_config,
)


class AppConfig(BaseModel):
    """Configuration for a new session."""
    language: Language = "zh"
    level: Level = "easy"
    theme: str = Field(default="learning", min_length=1)
    seed: Optional[int] = None
    llm: LLMConfig = Field(default_factory=LLMConfig)


def load_config(config_path: str) -> AppConfig:
    """Load session configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return AppConfig(**data)


def main():
    parser = argparse.ArgumentParser(
        description="Create or resume a word connect session",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  language: en
  level: medium
  theme: technology
  seed: 42
  llm:
    model: gpt-4o-mini
    temperature: 0.7
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used if omitted)"
    )
    parser.add_argument(
        "--resume",
        help="Resume from a saved session JSON file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the session JSON (default: sessions/<timestamp>.json)"
    )
    parser.add_argument(
        "--local",
        action="store_true",
        help="Use the local word bank only, without calling the LLM"
    )
    parser.add_argument(
        "--autoplay",
        action="store_true",
        help="Clear the board by playing hint pairs and print a summary"
    )
    parser.add_argument(
        "--hint",
        action="store_true",
        help="Print a currently connectable pair"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else AppConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    service = ContentService.create(llm_config=config.llm, use_ai=not args.local, seed=config.seed)

    if args.resume:
        try:
            session = GameSession.load(args.resume)
        except (OSError, MalformedInput, StateValidationError) as e:
            print(f"Error resuming from {args.resume}: {e}", file=sys.stderr)
            sys.exit(1)

        if args.output:
            output_path = Path(args.output)
        else:
            # Default: add _resumed to original filename
            resume_path = Path(args.resume)
            output_path = resume_path.parent / f"{resume_path.stem}_resumed{resume_path.suffix}"

        print(f"Resumed: {session.board.remaining_tiles} tiles left, "
              f"score {session.stats.score.correct}/{session.stats.score.wrong}")

    else:
        session_config = create_session_config(config.language, config.level, config.theme)
        try:
            tiles, source = asyncio.run(service.supply_tiles(session_config))
            session = GameSession.create(session_config, tiles, seed=config.seed)
        except WordConnectError as e:
            print(f"Error creating session: {e}", file=sys.stderr)
            sys.exit(1)

        if args.output:
            output_path = Path(args.output)
        else:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_path = Path("sessions") / f"session_{timestamp}.json"

        size = session_config.board_size
        print(f"New {session_config.difficulty_level} board ({size.rows}x{size.cols}), "
              f"theme '{session_config.theme}', content source: {source}")

    if args.hint:
        pair = session.hint()
        if pair:
            print(f"Hint: {tuple(pair[0])} <-> {tuple(pair[1])}")
        else:
            print("Hint: no connectable pair")

    if args.autoplay:
        session.start()
        try:
            outcomes = session.autoplay()
        finally:
            session.close()

        result = session.stats.get_game_result()
        summary = asyncio.run(service.summarize(result, session.config.language_mode))

        print()
        print("=== Autoplay Summary ===")
        print(f"Pairs cleared: {sum(1 for o in outcomes if o.is_success)}")
        print(f"Tiles remaining: {session.board.remaining_tiles}")
        print(f"Complete: {session.is_complete}")
        print()
        print(summary)
    else:
        session.close()

    session.save(output_path)
    print()
    print(f"Session saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
