"""CLI entrypoint for a single simulated walk.

Builds an engine from CLI flags and/or a JSON config file, runs either an
explicit command string or the hazard-avoiding policy, and prints a JSON
summary to stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from random import Random

from robot_gridsim.config.constants import (
    DEFAULT_DOUBLE_MOVE_PROBABILITY,
    DEFAULT_NO_MOVE_PROBABILITY,
    GRID_HEIGHT,
    GRID_WIDTH,
    SIM_SEED,
    START_DIRECTION,
    START_X,
    START_Y,
    WALK_STEPS,
)
from robot_gridsim.config.types import WalkConfig
from robot_gridsim.errors import SimulationError
from robot_gridsim.experiments.walk import run_walk
from robot_gridsim.simulation.builder import SimulationBuilder

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_coordinates(raw: object, label: str) -> list[tuple[int, int]]:
    """Parse ``"x,y;x,y"`` strings or JSON lists of ``[x, y]`` pairs."""
    if raw is None:
        return []
    pairs: list[tuple[int, int]] = []
    if isinstance(raw, str):
        for part in raw.split(";"):
            part = part.strip()
            if not part:
                continue
            pieces = [p.strip() for p in part.split(",")]
            if len(pieces) != 2:
                raise ValueError(f"{label} entries must look like 'x,y', got {part!r}")
            try:
                pairs.append((int(pieces[0]), int(pieces[1])))
            except ValueError as exc:
                raise ValueError(f"{label} entries must be integers, got {part!r}") from exc
        return pairs
    if isinstance(raw, list):
        for item in raw:
            if not isinstance(item, (list, tuple)) or len(item) != 2:
                raise ValueError(f"{label} entries must be [x, y] pairs, got {item!r}")
            pairs.append((_coerce_int(item[0], label), _coerce_int(item[1], label)))
        return pairs
    raise ValueError(f"{label} must be a 'x,y;x,y' string or a list of pairs")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        return int(raw)
    raise ValueError(f"{key} must be an integer value")


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        return float(raw)
    raise ValueError(f"{key} must be a float value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run one noisy grid-world robot walk")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file with default values; CLI flags override it",
    )
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--x", type=int, default=None)
    parser.add_argument("--y", type=int, default=None)
    parser.add_argument("--direction", type=str, default=None, help="N, E, S or W")
    parser.add_argument("--hazards", type=str, default=None, help="e.g. '2,0;3,4'")
    parser.add_argument("--blobs", type=str, default=None, help="e.g. '1,1;4,2'")
    parser.add_argument("--no-move-prob", type=float, default=None)
    parser.add_argument("--double-move-prob", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("--commands", type=str, default=None, help="e.g. 'FFRF'")
    mode_group.add_argument("--steps", type=int, default=None)
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for a single walk.

    Supports ``--config path/to/config.json`` for reproducibility.
    CLI arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        width = _coerce_int(_get_val(args.width, "width", file_cfg, GRID_WIDTH), "width")
        height = _coerce_int(_get_val(args.height, "height", file_cfg, GRID_HEIGHT), "height")
        x = _coerce_int(_get_val(args.x, "x", file_cfg, START_X), "x")
        y = _coerce_int(_get_val(args.y, "y", file_cfg, START_Y), "y")
        direction = _get_val(args.direction, "direction", file_cfg, START_DIRECTION)
        hazards = _parse_coordinates(_get_val(args.hazards, "hazards", file_cfg, None), "hazards")
        blobs = _parse_coordinates(_get_val(args.blobs, "blobs", file_cfg, None), "blobs")
        p_no_move = _coerce_float(
            _get_val(args.no_move_prob, "no_move_prob", file_cfg, DEFAULT_NO_MOVE_PROBABILITY),
            "no_move_prob",
        )
        p_double_move = _coerce_float(
            _get_val(
                args.double_move_prob,
                "double_move_prob",
                file_cfg,
                DEFAULT_DOUBLE_MOVE_PROBABILITY,
            ),
            "double_move_prob",
        )
        seed = _coerce_int(_get_val(args.seed, "seed", file_cfg, SIM_SEED), "seed")
        # An explicit --steps on the CLI wins over commands from the file.
        commands: object = None
        if args.steps is None:
            commands = _get_val(args.commands, "commands", file_cfg, None)
        steps = _coerce_int(_get_val(args.steps, "steps", file_cfg, WALK_STEPS), "steps")

        walk_config = WalkConfig(
            commands=None if commands is None else str(commands).upper(),
            steps=steps,
        )
        engine = (
            SimulationBuilder()
            .set_map_size(width, height)
            .set_robot_position(x, y)
            .set_robot_direction(str(direction))
            .set_hazards(hazards)
            .set_blobs(blobs)
            .set_random_source(Random(seed))
            .set_no_move_probability(p_no_move)
            .set_double_move_probability(p_double_move)
            .build()
        )
    except (SimulationError, ValueError) as exc:
        parser.error(str(exc))

    logger.info("Running walk on %r", engine)
    result = run_walk(engine, walk_config)
    summary = {
        "width": width,
        "height": height,
        "seed": seed,
        "mode": "commands" if walk_config.commands is not None else "policy",
        **result.summary(),
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
