"""
Mask formatting command-line interface.

Reads text line by line from a file (or standard input), formats every line
against a mask and writes the result to a file (or standard output).  The
mask and placeholder come either from ``--mask`` / ``--placeholder`` or from
a JSON config file passed with ``--config``.

---

# Quick ways to run the script

1. Format a file of phone numbers

>>> masked-edit-format --mask "(999) 999-9999" numbers.txt -o formatted.txt

2. Piping data

>>> echo "5551234567" | masked-edit-format --mask "(999) 999-9999"

3. Print what the user actually typed instead of the masked value

>>> echo "(555) 123-4567" | masked-edit-format --mask "(999) 999-9999" --raw

With ``--type`` every line is fed one character at a time, the way a text
field reports keystrokes, instead of being set as a whole.
"""

import argparse
import sys

from masked_edit_lib import MaskedText, MaskedTextConfig, load_config
from masked_edit_lib.constants import LOG_FILENAME, LOG_LEVEL
from masked_edit_lib.utils.logger import prepare_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Format text so it conforms to an input mask."
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input file (defaults to STDIN).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=argparse.FileType("w", encoding="utf-8"),
        default=sys.stdout,
        help="Output file (defaults to STDOUT).",
    )
    parser.add_argument("-m", "--mask", help="Mask pattern, e.g. '(999) 999-9999'.")
    parser.add_argument(
        "-p",
        "--placeholder",
        default=None,
        help="Placeholder character for unfilled positions (default: space).",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="JSON file with 'mask' and 'placeholder' keys.",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Write the unmasked value instead of the formatted one.",
    )
    parser.add_argument(
        "--type",
        dest="simulate_typing",
        action="store_true",
        help="Feed each line one character at a time.",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level (default: MASKED_EDIT_LOG_LEVEL or INFO).",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> MaskedTextConfig:
    config = load_config(args.config) if args.config else MaskedTextConfig()
    overrides = {}
    if args.mask is not None:
        overrides["mask"] = args.mask
    if args.placeholder is not None:
        overrides["placeholder"] = args.placeholder
    if overrides:
        config = MaskedTextConfig(**{**config.model_dump(), **overrides})
    return config


def format_line(
    line: str, config: MaskedTextConfig, simulate_typing: bool
) -> MaskedText:
    if not simulate_typing:
        return MaskedText.from_config(config, text=line)

    field = MaskedText.from_config(config)
    for ch in line:
        current = field.get_formatted_value()
        caret = field.get_selection().end
        edited = current[:caret] + ch + current[caret:]
        field.on_content_changed(edited, caret + 1, caret + 1)
    return field


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.mask and not args.config:
        parser.error("one of --mask or --config is required")

    logger = prepare_logger(
        "masked_edit_cli", level=args.log_level, log_file=LOG_FILENAME or None
    )
    config = resolve_config(args)
    logger.debug("Using mask %r with placeholder %r", config.mask, config.placeholder)

    count = 0
    for line in args.input:
        field = format_line(line.rstrip("\r\n"), config, args.simulate_typing)
        args.output.write(field.get_text(remove_mask=args.raw) + "\n")
        count += 1

    logger.info("Formatted %d line(s)", count)


if __name__ == "__main__":
    main()
