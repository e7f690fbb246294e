"""
tictac CLI - Command-line interface for the engine.

Usage:
    tictac play [--mode pvp|pvc] [--delay S]   Play a game in the console
    tictac evaluate <board>                     Print the outcome of a board
    tictac suggest <board> [--mark O]           Print the heuristic's move

Boards are 9 characters, row-major: X, O, and _ for empty (e.g. XX_______).
"""

import argparse
import asyncio
import logging
import sys
import threading

from .config import load_settings, configure_logging

_log = logging.getLogger(__name__)

PROMPT = "Cell 1-9, r = new game, m = switch mode, q = quit > "
CELL_COMMANDS = {str(n): n - 1 for n in range(1, 10)}


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="tictac - Tic Tac Toe with a scripted opponent",
        prog="tictac",
    )
    parser.add_argument("--log-level", help="Override TICTAC_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game in the console")
    play_parser.add_argument("--mode", choices=["pvp", "pvc"], help="Game mode")
    play_parser.add_argument("--delay", type=float, help="Computer thinking delay (seconds)")
    play_parser.add_argument("--json", action="store_true", help="Print session views as JSON")

    # Evaluate command
    evaluate_parser = subparsers.add_parser("evaluate", help="Print the outcome of a board")
    evaluate_parser.add_argument("board", help="Board, e.g. XOX_O_X__")

    # Suggest command
    suggest_parser = subparsers.add_parser("suggest", help="Print the computer's move for a board")
    suggest_parser.add_argument("board", help="Board, e.g. XX_______")
    suggest_parser.add_argument("--mark", choices=["X", "O"], default="O", help="Mark to move")

    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        configure_logging(args.log_level.upper() if args.log_level else settings.log_level)

        if args.command == "play":
            cmd_play(args, settings)
        elif args.command == "evaluate":
            cmd_evaluate(args)
        elif args.command == "suggest":
            cmd_suggest(args)
        else:
            parser.print_help()
            sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


def cmd_evaluate(args):
    """Print the outcome of a board."""
    from .engine_core import parse_board, evaluate

    board = parse_board(args.board)
    print(evaluate(board))


def cmd_suggest(args):
    """Print the heuristic's move for a board."""
    from .engine_core import Mark, parse_board, evaluate
    from .bots import explain_move

    board = parse_board(args.board)
    if evaluate(board).is_terminal:
        print("Game is over - no move")
        return

    mark = Mark(args.mark)
    index, rule = explain_move(board, mark, mark.opponent)
    print(f"{index} ({rule.value})")


def cmd_play(args, settings):
    """Play an interactive game."""
    from .session import GameMode

    mode = GameMode(args.mode) if args.mode else settings.mode
    delay = args.delay if args.delay is not None else settings.automa_delay
    if delay < 0:
        raise ValueError("Delay must not be negative")

    print(f"tictac ({settings.env})")
    _log.info("Starting %s game (delay=%.2fs)", mode.value, delay)
    try:
        asyncio.run(_play(mode, delay, args.json))
    except KeyboardInterrupt:
        print()


def _show(game, as_json: bool):
    from .engine_core import format_board

    view = game.view()
    if as_json:
        print(view.model_dump_json())
        return

    print()
    print(format_board(game.state.board))
    if view.winning_line:
        print(f"Winning line: {', '.join(str(i + 1) for i in view.winning_line)}")
    print(view.status_text)


def _resolve(future, line):
    if not future.done():
        future.set_result(line)


async def _read_line(loop):
    """
    Read one line of input on a daemon thread.

    Returns None at end of input. The thread never blocks interpreter
    exit, so Ctrl-C ends the game without waiting for Enter.
    """
    future = loop.create_future()

    def reader():
        try:
            line = input(PROMPT)
        except EOFError:
            line = None
        try:
            loop.call_soon_threadsafe(_resolve, future, line)
        except RuntimeError:
            # Event loop already closed; the game has ended
            pass

    threading.Thread(target=reader, name="tictac-input", daemon=True).start()
    return await future


async def _play(mode, delay: float, as_json: bool):
    from .session import GameLoop, GameMode, AsyncioScheduler

    loop = asyncio.get_running_loop()
    game = GameLoop(mode=mode, automa_delay=delay, scheduler=AsyncioScheduler(loop))
    _show(game, as_json)

    while True:
        if game.pending:
            while game.pending:
                await asyncio.sleep(0.02)
            _show(game, as_json)

        line = await _read_line(loop)
        if line is None:
            return
        command = line.strip().lower()

        if command in ("q", "quit"):
            return
        if command in ("r", "reset"):
            game.reset()
        elif command in ("m", "mode"):
            game.set_mode(GameMode.PVP if game.mode == GameMode.PVC else GameMode.PVC)
            print(f"Mode: {game.mode.value}")
        elif command in CELL_COMMANDS:
            if not game.select_cell(CELL_COMMANDS[command]):
                print("Move not allowed")
                continue
        else:
            print("Unknown command")
            continue

        _show(game, as_json)


if __name__ == "__main__":
    main()
