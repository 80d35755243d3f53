"""Checks for the icon and season image assets the page expects."""
import logging
import os
from typing import Dict, List

from PIL import Image, UnidentifiedImageError

from season import Season, season_filename
from weather_data import WeatherIcon

DEFAULT_ASSET_DIR = "images"


def expected_filenames(include_snow: bool = True) -> List[str]:
    """Every image filename the dial can write, in a stable order."""
    names = [icon.filename for icon in WeatherIcon if include_snow or icon is not WeatherIcon.SNOW]
    names.extend(season_filename(season) for season in Season)
    return names


def asset_path(asset_dir: str, filename: str) -> str:
    """Image source written to targets, e.g. "images/Sun.png"."""
    return f"{asset_dir.rstrip('/')}/{filename}"


def verify_assets(asset_dir: str, include_snow: bool = True) -> Dict[str, str]:
    """
    Open every expected image and report the ones that are unusable.

    Args:
        asset_dir: Directory holding the images
        include_snow: Whether Snow.png is expected

    Returns:
        Dictionary of filename -> problem ("missing" or "unreadable: ...").
        Empty when every asset is present and decodes.
    """
    problems = {}
    for filename in expected_filenames(include_snow):
        path = os.path.join(asset_dir, filename)
        if not os.path.isfile(path):
            problems[filename] = "missing"
            logging.warning(f"Asset missing: {path}")
            continue
        try:
            with Image.open(path) as image:
                image.verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            # Pillow raises SyntaxError for some truncated PNGs
            problems[filename] = f"unreadable: {e}"
            logging.warning(f"Asset unreadable: {path} ({e})")
            continue
        logging.debug(f"Asset ok: {path}")

    if not problems:
        logging.info(f"All {len(expected_filenames(include_snow))} assets present in {asset_dir}")
    return problems


def preview_sheet(asset_dir: str, filename: str, tile_size: int = 64, include_snow: bool = True) -> Image.Image:
    """
    Compose every expected asset into one horizontal contact sheet.

    Missing or unreadable assets leave a grey tile so gaps are easy to spot.

    Args:
        asset_dir: Directory holding the images
        filename: Where to save the sheet (PNG)
        tile_size: Edge length of each square tile in pixels

    Returns:
        The composed PIL image
    """
    names = expected_filenames(include_snow)
    sheet = Image.new("RGBA", (tile_size * len(names), tile_size), (0, 0, 0, 0))
    placeholder = Image.new("RGBA", (tile_size, tile_size), (128, 128, 128, 255))

    for index, name in enumerate(names):
        path = os.path.join(asset_dir, name)
        try:
            with Image.open(path) as image:
                tile = image.convert("RGBA")
                tile.thumbnail((tile_size, tile_size), Image.NEAREST)
        except (UnidentifiedImageError, OSError) as e:
            logging.warning(f"Preview placeholder for {name}: {e}")
            tile = placeholder
        sheet.paste(tile, (index * tile_size, 0))

    sheet.save(filename)
    logging.info(f"Asset preview saved to {filename}")
    return sheet
