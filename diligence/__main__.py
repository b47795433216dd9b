"""CLI entry point for the Diligence Script Engine."""

import argparse
import io
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from diligence.catalog import unknown_options
from diligence.config import settings
from diligence.engine import generate_script, sync_multi_region
from diligence.models import GeneratedScript, UserInputs
from diligence.render import print_summary, script_to_markdown, write_csv

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)

FORMATS = ["text", "json", "csv", "markdown"]


def load_inputs(inputs_path: Path) -> UserInputs:
    """Load wizard answers from a JSON file."""
    with open(inputs_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return UserInputs(**data)


def render(script: GeneratedScript, fmt: str) -> str:
    """Render a script in one of the supported output formats."""
    if fmt == "json":
        return script.model_dump_json(indent=2) + "\n"
    if fmt == "markdown":
        return script_to_markdown(script)
    if fmt == "csv":
        buffer = io.StringIO()
        write_csv(script, buffer)
        return buffer.getvalue()
    raise ValueError(f"Unsupported format: {fmt}")


def emit(text: str, output_path: Optional[Path]):
    """Write output to a file, or stdout when no path is given."""
    if output_path is None:
        sys.stdout.write(text)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    logger.info(f"Script written to {output_path}")


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Diligence Script Engine - Generate a tailored technical due diligence script"
    )
    parser.add_argument(
        "--inputs", "-i",
        type=Path,
        default=Path("inputs.json"),
        help="Path to wizard answers JSON file (default: inputs.json)",
    )
    parser.add_argument(
        "--format", "-f",
        choices=FORMATS,
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Output path (default: stdout)",
    )
    parser.add_argument(
        "--sync-geo",
        action="store_true",
        help="Only print the reconciled geography selection",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Load inputs
    if not args.inputs.exists():
        logger.error(f"Inputs file not found: {args.inputs}")
        logger.info("Create an inputs.json file or use --inputs to specify path")
        return 1

    try:
        inputs = load_inputs(args.inputs)
        logger.info(f"Loaded inputs from {args.inputs}")
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Failed to load inputs: {e}")
        return 1

    if args.sync_geo:
        emit(json.dumps(sync_multi_region(inputs.geographies)) + "\n", args.output)
        return 0

    unknown_options(inputs)
    script = generate_script(inputs)

    if args.format == "text" and args.output is None:
        print_summary(script)
    else:
        fmt = "markdown" if args.format == "text" else args.format
        emit(render(script, fmt), args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
