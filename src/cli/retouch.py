#!/usr/bin/env python3
"""CLI for editing a local image with the retouch instructions.

Usage:
    # Localized edit around a pixel
    python -m cli.retouch photo.jpg --action edit --prompt "remove the cup" --x 320 --y 240

    # Global filter or adjustment
    python -m cli.retouch photo.jpg --action filter --prompt "1970s film look"

    # Background removal
    python -m cli.retouch photo.jpg --action remove-bg -o cutout.png

    # Print the instruction without calling the model
    python -m cli.retouch photo.jpg --action adjust --prompt "warmer light" --dry-run
"""

import argparse
import asyncio
import base64
import mimetypes
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from google.genai import errors as genai_errors
from rich.console import Console

from models.image_edit import EditAction, Hotspot, ImageEditRequest, InlineImage
from services.image_edit_service import ImageEditService, ImageEditServiceError
from services.prompts import InstructionError, build_instruction
from utils.config import load_config, setup_logging, validate_config
from utils.data_uri import parse_data_uri

console = Console()

EXTENSIONS = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/webp": ".webp",
}


def load_image(path: Path) -> InlineImage:
    """Read an image file into an InlineImage."""
    mime_type = mimetypes.guess_type(path.name)[0] or "image/png"
    data = base64.b64encode(path.read_bytes()).decode("ascii")
    return InlineImage(mime_type=mime_type, data=data)


def write_image(data_uri: str, output: Path) -> Path:
    """Decode a data URI and write it next to the requested output path."""
    image = parse_data_uri(data_uri)
    if not output.suffix:
        output = output.with_suffix(EXTENSIONS.get(image.mime_type, ".png"))
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(base64.b64decode(image.data))
    return output


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Edit an image with a Gemini image model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("image", type=Path, help="Path to the input image")
    parser.add_argument(
        "--action", "-a",
        required=True,
        choices=[action.value for action in EditAction],
        help="Edit action to apply",
    )
    parser.add_argument("--prompt", "-p", help="Edit request (required for edit, filter, adjust)")
    parser.add_argument("--x", type=float, help="Hotspot x coordinate (edit only)")
    parser.add_argument("--y", type=float, help="Hotspot y coordinate (edit only)")
    parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output path (default: <input>_<action>.<ext>)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the rendered instruction and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def _coordinate(value: float | None) -> int | float | None:
    """Keep whole-number coordinates as integers in the instruction text."""
    if value is not None and value.is_integer():
        return int(value)
    return value


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "INFO")

    if not args.image.is_file():
        console.print(f"[red]Error: {args.image} not found[/red]")
        return 1

    hotspot = None
    if args.x is not None and args.y is not None:
        hotspot = Hotspot(x=_coordinate(args.x), y=_coordinate(args.y))

    action = EditAction(args.action)
    try:
        instruction = build_instruction(action, args.prompt, hotspot)
    except InstructionError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    if args.dry_run:
        console.print(instruction, markup=False, highlight=False, soft_wrap=True)
        return 0

    config = load_config()
    errors = validate_config(config)
    if errors:
        for error in errors:
            console.print(f"[red]Error: {error}[/red]")
        console.print("[dim]Set API_KEY in your .env file[/dim]")
        return 1

    request = ImageEditRequest(
        image=load_image(args.image),
        action=action,
        prompt=args.prompt,
        hotspot=hotspot,
    )
    service = ImageEditService(api_key=config["api_key"], model_name=config["image_model"])

    with console.status(f"[bold blue]Applying {action.value}...[/bold blue]"):
        try:
            data_uri = asyncio.run(service.edit_image(request, instruction))
        except (ImageEditServiceError, genai_errors.APIError) as e:
            console.print(f"[red]Error: {e}[/red]")
            return 1

    output = args.output or args.image.with_name(f"{args.image.stem}_{action.value}")
    written = write_image(data_uri, output)
    console.print(f"[green]✓ Saved {written}[/green]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
