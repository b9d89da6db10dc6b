#!/usr/bin/env python3
"""
Generate placeholder avatar images for a list of people.
Creates rounded rectangles with initials as PNG files, colored by identity.

Usage:
    python tools/generate_avatars.py
    python tools/generate_avatars.py --people data/people.json --size 128 --corners 24
    python tools/generate_avatars.py --force --brightness 0.9
"""
import argparse
import json
import logging
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from avatar.render import generate_avatar
from avatar.text import Initials, Name

from config import (
    AVATAR_BRIGHTNESS,
    AVATAR_CORNERS,
    AVATAR_FONT_PATH,
    AVATAR_SATURATION,
    AVATAR_SIZE,
    AVATARS_DIR,
    PEOPLE_PATH,
)

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate initials avatars for a people file",
    )
    parser.add_argument("--people", type=Path, default=PEOPLE_PATH, help="People JSON file")
    parser.add_argument("--output", type=Path, default=AVATARS_DIR, help="Output directory")
    parser.add_argument("--size", type=int, default=AVATAR_SIZE, help=f"Image size in pixels (default: {AVATAR_SIZE})")
    parser.add_argument("--corners", type=float, default=AVATAR_CORNERS, help="Corner radius (default: square)")
    parser.add_argument("--padding", type=float, default=None, help="Padding (default: 10%% of size)")
    parser.add_argument("--saturation", type=float, default=AVATAR_SATURATION)
    parser.add_argument("--brightness", type=float, default=AVATAR_BRIGHTNESS)
    parser.add_argument("--font", type=str, default=AVATAR_FONT_PATH, help="TrueType font file")
    parser.add_argument("--force", action="store_true", help="Overwrite existing avatars")
    return parser.parse_args(argv)


def load_people(path: Path) -> list:
    """Load people entries from a JSON file ({"people": [...]})."""
    with open(path) as f:
        data = json.load(f)
    return data.get("people", [])


def text_for(person: dict):
    """Explicit initials win over the name."""
    if person.get("initials"):
        return Initials(person["initials"])
    return Name(person.get("name", ""))


def create_avatar(person: dict, output_dir: Path, args) -> bool:
    """Render and save one avatar. Returns False when nothing could be drawn."""
    image = generate_avatar(
        text_for(person),
        (args.size, args.size),
        identity=person.get("id", person.get("slug")),
        saturation=args.saturation,
        brightness=args.brightness,
        font=args.font,
        corner_radius=args.corners,
        padding=args.padding,
    )
    if image is None:
        logger.warning(f"Skipped (no initials): {person.get('slug')}")
        return False

    output_path = output_dir / f"{person['slug']}.png"
    image.save(output_path, "PNG")
    logger.info(f"Created: {output_path}")
    return True


def main(argv=None):
    args = parse_args(argv)
    output_dir = args.output
    output_dir.mkdir(parents=True, exist_ok=True)

    logger.info(f"Generating avatars in: {output_dir}")

    generated = 0
    skipped = 0
    for person in load_people(args.people):
        output_path = output_dir / f"{person['slug']}.png"
        if output_path.exists() and not args.force:
            logger.info(f"Skipped (exists): {output_path}")
            skipped += 1
            continue
        if create_avatar(person, output_dir, args):
            generated += 1
        else:
            skipped += 1

    logger.info(f"Generated {generated} avatars, skipped {skipped}.")
    return generated


if __name__ == "__main__":
    main()
