import getopt
import os
import sys
from typing import Callable, List, Optional

import pygame

from nessprites.chr.chr_rom import CHRROM
from nessprites.chr.tile import Tile
from nessprites.exc.core import InvalidROM
from nessprites.header.ines import INESHeader

USAGE = "usage: nes-sprites <filename>"

def sprite_path(index: int, directory: str = "sprites") -> str:
    return os.path.join(directory, f"sprite{index}.png")

def save_sprite(index: int, tile: Tile, directory: str = "sprites") -> None:
    os.makedirs(directory, exist_ok=True)
    pygame.image.save(tile.to_surface(), sprite_path(index, directory))

def extract(image: bytes, emit: Callable[[int, Tile], None] = save_sprite) -> int:
    """Decode every tile in the CHR ROM of ``image`` and pass it to ``emit``.

    The region is located and bounds-checked before the first tile is
    emitted. Returns the number of tiles emitted.
    """
    chr_rom = CHRROM(image)

    count = 0
    for (index, tile) in chr_rom.tiles():
        emit(index, tile)
        count += 1

    return count

def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        (_, args) = getopt.getopt(argv, '')
    except getopt.GetoptError as e:
        print(e, file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 1

    filename = args[0]
    try:
        with open(filename, 'rb') as f:
            rom = f.read()

        INESHeader(rom).read().dump()
        count = extract(rom)
    except (InvalidROM, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"wrote {count} sprites")
    return 0

if __name__ == '__main__':
    sys.exit(main())
