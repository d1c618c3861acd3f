from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import GameConfig
from .core.random import RandomSource
from .errors import DataValidationError, UnsupportedVariant
from .items import Item, PhysicalForm, PhysicalItem
from .textures import PixelBuffer, StaticAsset, default_palettes, draw_item_type
from .world import World

logger = logging.getLogger(__name__)

# Press durations used by the scripted session.
SHORT_PRESS = 0.1
LONG_PRESS = 1.5
TICK_SECONDS = 0.5


def _load_config(args: argparse.Namespace) -> GameConfig:
    cfg = GameConfig.from_json(args.config) if args.config else GameConfig()
    if args.seed is not None:
        cfg.seed = args.seed
    return cfg


def run_session(world: World, steps: int) -> None:
    """Play a fixed script: click, feed the ocean, store mud, let timers run."""
    now = 0.0
    for step in range(steps):
        world.click("button", LONG_PRESS if step % 4 == 3 else SHORT_PRESS)
        for item in world.click("primordial_ocean", SHORT_PRESS):
            world.ingest("primordial_ocean", item)
        if step % 5 == 4:
            for item in world.click("primordial_ocean", LONG_PRESS):
                if "chest" in world.minigames:
                    world.ingest("chest", item)
        now += TICK_SECONDS
        world.tick(now)
        if "tree" in world.minigames:
            world.click("tree", SHORT_PRESS)
        world.evolve()


def _cmd_simulate(args: argparse.Namespace) -> int:
    world = World(_load_config(args))
    run_session(world, args.steps)
    print(json.dumps(world.snapshot(), indent=2, sort_keys=True))
    return 0


def _texture_items() -> List[Item]:
    items = []
    for material in default_palettes():
        for form in (PhysicalForm.POWDER, PhysicalForm.LUMP, PhysicalForm.BLOCK, PhysicalForm.BALL):
            items.append(Item(PhysicalItem(form, material)))
    return items


def _cmd_textures(args: argparse.Namespace) -> int:
    cfg = _load_config(args)
    out = Path(args.out)
    out.mkdir(parents=True, exist_ok=True)
    written = 0
    for item in _texture_items():
        try:
            texture = draw_item_type(item.type, RandomSource(cfg.texture_seed), args.size)
        except UnsupportedVariant as e:
            logger.warning("Skipping %r: %s", item.type, e)
            continue
        if isinstance(texture, StaticAsset):
            continue
        assert isinstance(texture, PixelBuffer)
        path = out / (item.uid.replace("/", "_").replace(" ", "") + ".png")
        texture.to_image().save(path)
        written += 1
        logger.debug("Wrote %s", path)
    print(json.dumps({"out": str(out), "written": written}, sort_keys=True))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="primordia", description="Headless primordia simulation tools")
    p.add_argument("--debug", action="store_true", help="Enable verbose debug logging.")
    p.add_argument("--seed", type=int, default=None, help="Override the world seed.")
    p.add_argument("--config", type=Path, default=None, help="Path to a GameConfig JSON file.")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("simulate", help="Run a scripted session and print a JSON summary")
    s.add_argument("--steps", type=int, default=100, help="Number of scripted steps")
    s.set_defaults(func=_cmd_simulate)

    t = sub.add_parser("textures", help="Export synthesized item textures as PNG files")
    t.add_argument("--out", required=True, help="Output directory")
    t.add_argument("--size", type=int, default=64, help="Texture side in pixels")
    t.set_defaults(func=_cmd_textures)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except DataValidationError as e:
        print(f"INVALID DATA\n{e.to_human()}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
