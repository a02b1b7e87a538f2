"""
WordPlay CLI - Command-line interface for the engine.

Usage:
    wordplay play [--bot hard-bot] [--turns 10]     Play against a bot
    wordplay bot <word> [--keys S,E]                 Explain the bot's choice
    wordplay validate <word> [--previous CAT]        Check a word
    wordplay score <from> <to> [--keys S]            Score a transformation

Every command accepts --words <file> (or WORDPLAY_WORDS_FILE) to use a
full word list instead of the bundled starter lexicon.
"""

import argparse
import logging
import random
import sys

from .config import LOG_LEVEL, WORDS_FILE, DEFAULT_MAX_TURNS, GameConfig, PlayerConfig


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="WordPlay - Word Transformation Game Engine",
        prog="wordplay",
    )
    parser.add_argument("--words", default=WORDS_FILE, help="Path to a word list file")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play against a bot")
    play_parser.add_argument("--bot", default="trainer-bot", help="Bot personality id")
    play_parser.add_argument("--turns", type=int, default=DEFAULT_MAX_TURNS, help="Max turns")
    play_parser.add_argument("--word", default=None, help="Starting word")

    # Bot command
    bot_parser = subparsers.add_parser("bot", help="Explain the bot's move for a word")
    bot_parser.add_argument("word", help="Current word")
    bot_parser.add_argument("--bot", default="hard-bot", help="Bot personality id")
    bot_parser.add_argument("--keys", default="", help="Comma-separated key letters")
    bot_parser.add_argument("--top", type=int, default=5, help="Number of top moves to show")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a word")
    validate_parser.add_argument("word", help="Word to check")
    validate_parser.add_argument("--previous", default=None, help="Previous word")

    # Score command
    score_parser = subparsers.add_parser("score", help="Score a transformation")
    score_parser.add_argument("from_word", help="Word before the move")
    score_parser.add_argument("to_word", help="Word after the move")
    score_parser.add_argument("--keys", default="", help="Comma-separated key letters")

    args = parser.parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL.upper())

    if args.command == "play":
        cmd_play(args)
    elif args.command == "bot":
        cmd_bot(args)
    elif args.command == "validate":
        cmd_validate(args)
    elif args.command == "score":
        cmd_score(args)
    else:
        parser.print_help()
        sys.exit(1)


def _load_words(args):
    from .lexicon import WordData, load_bundled_word_data

    if not args.words:
        return load_bundled_word_data()
    try:
        return WordData.from_files(args.words)
    except FileNotFoundError:
        print(f"Error: File not found: {args.words}")
        sys.exit(1)


def _parse_letters(text):
    return [part.strip().upper() for part in text.split(",") if part.strip()]


def cmd_validate(args):
    """Validate a word."""
    from .lexicon import ValidationOptions, validate_word

    word_data = _load_words(args)
    result = validate_word(
        args.word, word_data, ValidationOptions(previous_word=args.previous)
    )
    if result.is_valid:
        print(f"{result.display_override or result.word}: valid")
    else:
        print(f"{result.word}: {result.user_message} ({result.reason.value})")
        sys.exit(1)


def cmd_score(args):
    """Score a transformation."""
    from .engine_core.scoring import format_breakdown, score_move

    breakdown = score_move(args.from_word, args.to_word, _parse_letters(args.keys))
    print(f"{args.from_word.upper()} → {args.to_word.upper()}: {breakdown.total} point(s)")
    print(f"  {format_breakdown(breakdown)}")
    for action in breakdown.actions:
        print(f"  - {action}")


def cmd_bot(args):
    """Explain the bot's move for a word."""
    from .bots import GreedyBot, explain_bot_move, get_bot_strategy
    from .engine_core.move_generator import MoveGenerator

    rng = random.Random(args.seed)
    bot = GreedyBot(
        word_data=_load_words(args),
        strategy=get_bot_strategy(args.bot),
        generator=MoveGenerator(rng=rng),
    )
    explanation = explain_bot_move(bot, args.word, _parse_letters(args.keys), args.top)
    print(explanation.analysis)
    if explanation.top_moves:
        print("\nTop moves:")
        for move in explanation.top_moves:
            print(f"  {move.word:<12} {move.score} pt  {round(move.confidence * 100)}%")


def cmd_play(args):
    """Play a terminal game against a bot."""
    from .engine_core.runtime import Utilities
    from .engine_core.scoring import format_breakdown
    from .engine_core.state import GameStatus
    from .session import GameLoop, SessionManager

    config = GameConfig(
        initial_word=args.word,
        max_turns=args.turns,
        players=[
            PlayerConfig(player_id="human", name="You"),
            PlayerConfig(player_id="bot", name=args.bot, is_bot=True),
        ],
    )
    utilities = Utilities(rng=random.Random(args.seed))
    manager = SessionManager(_load_words(args), utilities=utilities, bot_strategy=args.bot)
    session = manager.create_session(config)
    loop = GameLoop(session)
    game = session.orchestrator

    print(f"Starting word: {game.state.current_word}")
    print("Type a word, '/pass' to pass or '/quit' to stop.\n")

    while game.state.status == GameStatus.PLAYING:
        state = game.state
        keys = ", ".join(sorted(state.key_letters)) or "-"
        locked = ", ".join(sorted(state.all_locked_letters)) or "-"
        scores = "  ".join(f"{p.name}: {p.score}" for p in state.players)
        print(f"Turn {state.current_turn}/{state.max_turns}  [{scores}]")
        print(f"Word: {state.current_word}   Key: {keys}   Locked: {locked}")

        try:
            text = input("> ").strip()
        except EOFError:
            text = "/quit"

        if text == "/quit":
            print("Bye!")
            return
        result = loop.pass_turn() if text == "/pass" else loop.submit_word(text)

        if not result.success:
            print(f"  {result.user_message}\n")
            continue
        if result.word:
            last = [t for t in game.state.turn_history if t.player_id == "human"][-1]
            print(f"  +{result.score} ({format_breakdown(last.breakdown)})")
        for line in result.bot_moves:
            print(f"  {line}")
        print()

    state = game.state
    print("Game over!")
    for p in state.players:
        print(f"  {p.name}: {p.score}")
    if state.is_draw:
        print("It's a draw.")
    elif state.winner:
        print(f"Winner: {state.winner.name}")


if __name__ == "__main__":
    main()
