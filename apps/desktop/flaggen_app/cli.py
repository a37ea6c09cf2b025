"""CLI entrypoints for flag generation, preview, and settings."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path

from flaggen_core import config_path, load_config, save_config
from flaggen_core.config import OUTPUT_FORMATS, clamp_dimension
from flaggen_core.logging_setup import configure_logging, get_logger
from flaggen_renderer import format_for_path, preview_data_url, random_flag, save_flag, seeded_rng


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


def numbered_path(path: Path, index: int, count: int) -> Path:
    if count <= 1:
        return path
    return path.with_name(f"{path.stem}-{index + 1:04d}{path.suffix}")


def cmd_generate(args: argparse.Namespace) -> int:
    cfg = load_config()
    logger = get_logger()
    width = clamp_dimension(args.width or cfg.output.width, cfg.output.width)
    height = clamp_dimension(args.height or cfg.output.height, cfg.output.height)
    out = Path(args.out or cfg.output.path).expanduser()
    fmt = args.format or format_for_path(out, default=cfg.output.format)
    seed = args.seed if args.seed is not None else cfg.generator.seed
    rng = seeded_rng(seed)

    flags = []
    for index in range(args.count):
        flag = random_flag(width, height, rng)
        path = save_flag(flag, numbered_path(out, index, args.count), format=fmt)
        logger.info(f"saved flag to {path}", extra={"event": "flag_saved", "path": str(path)})
        payload = flag.describe()
        payload["path"] = str(path)
        if args.data_url:
            payload["data_url"] = preview_data_url(flag)
        flags.append(payload)

    _print_json({"seed": seed, "format": fmt, "flags": flags})
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    from .app import run_gui

    return run_gui(width=args.width, height=args.height, seed=args.seed)


def cmd_config_show(_args: argparse.Namespace) -> int:
    _print_json(asdict(load_config()))
    return 0


def cmd_config_path(_args: argparse.Namespace) -> int:
    print(config_path())
    return 0


def cmd_config_init(args: argparse.Namespace) -> int:
    path = config_path()
    if path.exists() and not args.force:
        print(f"settings file already exists: {path}")
        return 1
    print(save_config(load_config(), path))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flaggen", description="Random flag generator")
    sub = parser.add_subparsers(dest="command", required=True)

    gen_cmd = sub.add_parser("generate", help="Write random flag images to disk")
    gen_cmd.add_argument("--width", type=_positive_int, default=None)
    gen_cmd.add_argument("--height", type=_positive_int, default=None)
    gen_cmd.add_argument("--out", default=None, help="Output image path")
    gen_cmd.add_argument("--format", type=str.upper, choices=list(OUTPUT_FORMATS), default=None)
    gen_cmd.add_argument("--seed", type=int, default=None, help="Seed for reproducible flags")
    gen_cmd.add_argument("--count", type=_positive_int, default=1, help="Number of flags to write")
    gen_cmd.add_argument("--data-url", action="store_true", help="Include a base64 PNG data URL per flag")
    gen_cmd.set_defaults(func=cmd_generate)

    preview_cmd = sub.add_parser("preview", help="Open interactive preview window")
    preview_cmd.add_argument("--width", type=_positive_int, default=None)
    preview_cmd.add_argument("--height", type=_positive_int, default=None)
    preview_cmd.add_argument("--seed", type=int, default=None)
    preview_cmd.set_defaults(func=cmd_preview)

    config_cmd = sub.add_parser("config", help="Inspect settings")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    show_cmd = config_sub.add_parser("show", help="Print effective settings")
    show_cmd.set_defaults(func=cmd_config_show)
    path_cmd = config_sub.add_parser("path", help="Print settings file path")
    path_cmd.set_defaults(func=cmd_config_path)
    init_cmd = config_sub.add_parser("init", help="Write effective settings to the settings file")
    init_cmd.add_argument("--force", action="store_true", help="Overwrite an existing settings file")
    init_cmd.set_defaults(func=cmd_config_init)

    return parser


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    configure_logging(keep_files=cfg.diagnostics.keep_log_files, console=False)
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
