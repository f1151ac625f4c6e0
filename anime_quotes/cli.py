"""Command-line interface for anime_quotes.

Launches the quote viewer, or converts a single picture headless.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from anime_quotes.core.color import ColorMode
from anime_quotes.core.config import DEFAULT_CONFIG_PATH
from anime_quotes.core.quotes import DEFAULT_QUOTES_PATH

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"UI config file (default: {DEFAULT_CONFIG_PATH}).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages to stderr.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="anime-quotes",
        description="Page through anime quotes with ASCII art pictures.",
    )
    parser.add_argument(
        "--quotes",
        default=str(DEFAULT_QUOTES_PATH),
        help=f"Quotes file (default: {DEFAULT_QUOTES_PATH}).",
    )
    _add_common_options(parser)
    return parser


def _build_render_parser() -> argparse.ArgumentParser:
    render = argparse.ArgumentParser(
        prog="anime-quotes render",
        description="Convert one image to ASCII art and print it.",
    )
    render.add_argument("image", help="Input image file path.")
    _add_common_options(render)
    render.add_argument(
        "--width",
        type=int,
        help="Target width in characters (default: from config).",
    )
    render.add_argument(
        "--aspect",
        type=float,
        help="Character cell aspect compensation (default: from config).",
    )
    render.add_argument("--detail-x", type=int, help="Horizontal samples per cell.")
    render.add_argument("--detail-y", type=int, help="Vertical samples per cell.")
    render.add_argument(
        "--gradient",
        help="Glyph gradient or preset name (default, simple, blocks).",
    )
    render.add_argument(
        "--color",
        choices=[c.value for c in ColorMode],
        default="truecolor",
        help="Color mode (default: truecolor).",
    )
    render.add_argument(
        "--json",
        action="store_true",
        help="Output structured JSON instead of colored text.",
    )
    return render


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _json_error(message: str, code: str) -> None:
    """Print JSON error to stderr and exit with code 1."""
    err = {"status": "error", "error": message, "code": code}
    print(json.dumps(err), file=sys.stderr)
    sys.exit(1)


def _run_render(args: argparse.Namespace) -> None:
    """Convert a single image and print it."""
    from anime_quotes.core.config import load_ui_config
    from anime_quotes.core.errors import ImageLoadError
    from anime_quotes.core.processor import convert_file
    from anime_quotes.core.settings import AsciiSettings

    ascii_config = load_ui_config(args.config).ascii

    def pick(override, configured):
        return configured if override is None else override

    settings = AsciiSettings.create(
        base_width=pick(args.width, ascii_config.target_width),
        char_aspect=pick(args.aspect, ascii_config.char_aspect),
        gradient=pick(args.gradient, ascii_config.gradient),
        detail_x=pick(args.detail_x, ascii_config.detail_x),
        detail_y=pick(args.detail_y, ascii_config.detail_y),
    )

    image_path = Path(args.image).resolve()
    try:
        art = convert_file(image_path, settings)
    except ImageLoadError as e:
        if args.json:
            _json_error(str(e), "IMAGE_UNAVAILABLE")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not args.json:
        print("\n".join(art.to_ansi_lines(ColorMode(args.color))))
        return

    result = {
        "status": "success",
        "input": str(image_path),
        "settings": {
            "base_width": settings.base_width,
            "char_aspect": settings.char_aspect,
            "gradient": settings.gradient,
            "detail_x": settings.detail_x,
            "detail_y": settings.detail_y,
        },
        "width": art.width,
        "height": art.height,
        "lines": art.lines,
    }
    print(json.dumps(result, indent=2, ensure_ascii=False))


def main(argv: list[str] | None = None) -> None:
    """Main entry point.

    Routing:
      anime-quotes render <image> [opts]  → headless conversion
      anime-quotes [--quotes ...]         → launch TUI
    """
    raw_args = sys.argv[1:] if argv is None else argv
    if raw_args and raw_args[0] == "render":
        args = _build_render_parser().parse_args(raw_args[1:])
        _configure_logging(args.verbose)
        _run_render(args)
        return

    args = _build_parser().parse_args(raw_args)
    _configure_logging(args.verbose)

    from anime_quotes.app import run_app

    run_app(quotes_path=args.quotes, config_path=args.config)


if __name__ == "__main__":
    main()
