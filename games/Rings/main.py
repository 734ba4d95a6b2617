#!/usr/bin/env python3
"""Rings - Standalone entry point.

Usage:
    python -m games.Rings.main                 # play in the terminal
    python -m games.Rings.main --framerate 60
    python -m games.Rings.main --window        # play in a pygame window
    python -m games.Rings.main --seed 42       # reproducible rings
"""

import argparse
import curses
import os
import sys
from typing import List, Optional

# Add project root to path
_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _root not in sys.path:
    sys.path.insert(0, _root)

from g4.errors import InvalidConfiguration
from g4.games import GameLoop
from g4.games.input import InputManager
from g4.games.input.sources import CursesKeyboardSource
from g4.logging import (
    get_logger, get_log_dir, set_log_file, register_sink,
    create_sink_for_module, close_all_sinks,
)
from models import LaunchConfig, load_launch_config
from games.Rings import config
from games.Rings.game_info import get_game_mode
from games.Rings.game_mode import RingsMode
from games.Rings.game.frame import FrameSampler
from games.Rings.game.skins.terminal import BANNER_LINES, TerminalSkin, init_colors

log = get_logger('rings_main')

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser from the game's declared arguments."""
    parser = argparse.ArgumentParser(
        description=f'{RingsMode.NAME} - {RingsMode.DESCRIPTION}',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Controls: Space to shoot, Ctrl-C to exit",
    )

    for arg_def in RingsMode.get_arguments():
        kwargs = {k: v for k, v in arg_def.items() if k in ('type', 'default', 'help', 'action', 'choices')}
        if 'action' in kwargs:
            kwargs.pop('type', None)  # action and type are mutually exclusive
        parser.add_argument(arg_def['name'], **kwargs)

    return parser


def resolve_config(argv: Optional[List[str]] = None) -> LaunchConfig:
    """Parse arguments, fill unset options from the environment and validate.

    Raises:
        InvalidConfiguration: If any option is malformed
    """
    args = build_parser().parse_args(argv)
    return load_launch_config(
        framerate=args.framerate if args.framerate is not None else config.FRAMERATE,
        seed=args.seed if args.seed is not None else config.SEED,
        window=args.window,
        width=args.width if args.width is not None else config.WIDTH,
        height=args.height if args.height is not None else config.HEIGHT,
    )


def print_banner() -> None:
    for line in BANNER_LINES:
        print(line)


def run_terminal(game: RingsMode, launch: LaunchConfig) -> int:
    """Play in the terminal. Returns the number of ticks played."""
    # curses owns the screen; keep log lines out of it
    log_path = os.path.join(get_log_dir(), 'g4-terminal.log')
    set_log_file(log_path)

    def _session(stdscr) -> int:
        curses.curs_set(0)
        curses.raw()  # Ctrl-C arrives as a key instead of SIGINT
        stdscr.nodelay(True)
        stdscr.timeout(0)
        init_colors()

        # Banner, one blank line, then HUD and grid
        skin = TerminalSkin(stdscr, FrameSampler(launch.width, launch.height), top=len(BANNER_LINES) + 1)
        skin.draw_banner()
        rows, cols = stdscr.getmaxyx()
        need_rows, need_cols = skin.required_size()
        if rows < need_rows or cols < need_cols:
            log.warning("Terminal is %dx%d, frame needs %dx%d", cols, rows, need_cols, need_rows)

        loop = GameLoop(
            game,
            renderer=skin,
            input_manager=InputManager(CursesKeyboardSource(stdscr)),
            framerate=launch.framerate,
        )
        try:
            return loop.run()
        finally:
            skin.close()

    try:
        return curses.wrapper(_session)
    except KeyboardInterrupt:
        log.info("Interrupted")
        return 0
    finally:
        set_log_file(None)


def run_window(game: RingsMode, launch: LaunchConfig) -> int:
    """Play in a pygame window. Returns the number of ticks played."""
    import pygame
    from g4.games.input.sources.window import PygameKeyboardSource
    from games.Rings.game.skins.window import WindowSkin

    sampler = FrameSampler(launch.width, launch.height)
    pygame.init()
    try:
        screen = pygame.display.set_mode(WindowSkin.window_size(sampler))
        pygame.display.set_caption(RingsMode.NAME)

        loop = GameLoop(
            game,
            renderer=WindowSkin(screen, sampler),
            input_manager=InputManager(PygameKeyboardSource()),
            framerate=launch.framerate,
        )
        try:
            return loop.run()
        except KeyboardInterrupt:
            log.info("Interrupted")
            return loop.ticks
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    try:
        launch = resolve_config(argv)
    except InvalidConfiguration as e:
        log.error("%s", e)
        return EXIT_CONFIG_ERROR

    register_sink('session', create_sink_for_module('session'))
    try:
        game = get_game_mode(seed=launch.seed)
        if launch.window:
            print_banner()
            ticks = run_window(game, launch)
        else:
            ticks = run_terminal(game, launch)
        log.info("Session over after %d ticks at level %d", ticks, game.level)
    finally:
        close_all_sinks()

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
