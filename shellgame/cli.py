"""
Shell Game CLI - Play or simulate from the terminal.

Usage:
    shellgame play                 Interactive game in the terminal
    shellgame simulate --guess b   Headless game, prints the outcome

Swap range, speed and seed default to the SHELLGAME_* environment
variables; flags override them.
"""

import argparse
import logging
import sys
import time

from pydantic import ValidationError


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Shell Game - find the ball under the shell",
        prog="shellgame",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    parser.add_argument("--min-swaps", type=int, help="Fewest swaps per shuffle")
    parser.add_argument("--max-swaps", type=int, help="Most swaps per shuffle")
    parser.add_argument("--speed", type=float, help="Distance moved per tick")
    parser.add_argument("--seed", type=int, help="Shuffle seed")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--fps", type=float, default=60.0, help="Animation frames per second")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Run a headless game")
    simulate_parser.add_argument(
        "--guess", choices=["a", "b", "c"], default="b", help="Place to guess once shuffled"
    )
    simulate_parser.add_argument("--show", action="store_true", help="Print every frame")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        return cmd_play(args)
    elif args.command == "simulate":
        return cmd_simulate(args)
    else:
        parser.print_help()
        sys.exit(1)


def _build(args):
    """Create the session, loop and pointer input from CLI args."""
    from .config import GameConfig
    from .session import GameLoop, Session
    from .host import PointerInput

    try:
        config = GameConfig.from_env(
            min_swaps=args.min_swaps,
            max_swaps=args.max_swaps,
            speed=args.speed,
            seed=args.seed,
        )
    except ValidationError as e:
        print(f"Error: invalid configuration\n{e}")
        sys.exit(2)

    loop = GameLoop(Session.create(config))
    return loop, PointerInput(loop)


def _click_place(pointer, place_id: str) -> bool:
    """Click the centre of a place's slot."""
    from .host import SHELL_SIZE

    place = pointer.loop.state.places[place_id]
    return pointer.click(
        place.position.x + SHELL_SIZE / 2,
        place.position.y + SHELL_SIZE / 2,
    )


def cmd_simulate(args):
    """Run one game without a player."""
    from .engine_core.state import Stage
    from .host import TextRenderer, TickSource

    loop, pointer = _build(args)
    renderer = TextRenderer()
    ticks = TickSource()

    pointer.click(0, 0)
    used = 0
    while loop.state.stage == Stage.SHUFFLING:
        loop.on_tick(ticks.next())
        used += 1
        if args.show:
            print(renderer.render(loop.state))

    _click_place(pointer, args.guess)

    print(renderer.track(loop.state))
    print(renderer.legend(loop.state))
    print(f"Swaps: {loop.planned_swaps}")
    print(f"Ticks: {used}")
    print(f"Guessed place {args.guess}: {loop.state.outcome.value}")
    return 0


def cmd_play(args):
    """Interactive terminal game."""
    from .engine_core.state import Stage
    from .host import TextRenderer, TickSource

    loop, pointer = _build(args)
    renderer = TextRenderer()
    ticks = TickSource()
    frame_delay = 1.0 / args.fps if args.fps > 0 else 0.0

    print("Watch the ball, then pick the place it ended up in. Ctrl-C quits.")
    try:
        while True:
            print(renderer.render(loop.state))
            print(renderer.legend(loop.state))
            input("[Enter] ")
            pointer.click(0, 0)

            while loop.state.stage == Stage.SHUFFLING:
                loop.on_tick(ticks.next())
                sys.stdout.write("\r" + renderer.render(loop.state))
                sys.stdout.flush()
                time.sleep(frame_delay)
            print()

            while loop.state.stage == Stage.GUESSING:
                print(renderer.legend(loop.state))
                choice = input("Which place hides the ball? [a/b/c] ").strip().lower()
                if choice in loop.state.places:
                    _click_place(pointer, choice)

            print(renderer.render(loop.state))
            print(renderer.legend(loop.state))
            input("[Enter] to play again ")
            pointer.click(0, 0)
    except (KeyboardInterrupt, EOFError):
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())
