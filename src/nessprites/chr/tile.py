from typing import List

import pygame
from bitarray.util import int2ba
from pygame.color import Color
from pygame.pixelarray import PixelArray

TILE_SIZE = 16
TILE_WIDTH = 8
TILE_HEIGHT = 8

PALETTE = [
    Color(211, 211, 211, 255),
    Color(169, 169, 169, 255),
    Color(105, 105, 105, 255),
    Color(0, 0, 0, 255),
]

class Tile:
    """One 8x8 CHR tile: plane 0 in bytes 0-7, plane 1 in bytes 8-15.

    Bit 0 of each plane byte is column 0, so the planes are expanded
    little-endian.
    """

    def __init__(self, record: bytes):
        if len(record) != TILE_SIZE:
            raise ValueError(f"Tile record must be {TILE_SIZE} bytes, got {len(record)}")
        self.record = bytes(record)

    def decode(self) -> List[List[int]]:
        grid = [[0] * TILE_WIDTH for _ in range(TILE_HEIGHT)]

        plane0 = self.record[0:8]
        plane1 = self.record[8:16]
        for (y, (pixels0, pixels1)) in enumerate(zip(plane0, plane1)):
            ba_pixels0 = int2ba(pixels0, 8, 'little')
            ba_pixels1 = int2ba(pixels1, 8, 'little')
            for (x, (pixel0, pixel1)) in enumerate(zip(ba_pixels0, ba_pixels1)):
                grid[y][x] = (pixel1 << 1) | pixel0

        return grid

    def to_surface(self) -> pygame.Surface:
        surface = pygame.Surface((TILE_WIDTH, TILE_HEIGHT), depth=8)
        surface.set_palette(PALETTE)

        pixel_array = PixelArray(surface)
        for (y, row) in enumerate(self.decode()):
            for (x, index) in enumerate(row):
                pixel_array[x, y] = index
        pixel_array.close()

        return surface
