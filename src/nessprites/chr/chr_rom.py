from typing import Iterator, Tuple

from nessprites.chr.tile import Tile, TILE_SIZE
from nessprites.exc.core import TruncatedInput
from nessprites.header.ines import INESHeader

class CHRROM:
    def __init__(self, image: bytes):
        self.header = INESHeader(image).read()
        (self.offset, self.length) = self.header.chr_region()

        end = self.offset + self.length
        if len(image) < end:
            raise TruncatedInput(
                f"CHR ROM spans {self.offset:#x}-{end:#x} but image is {len(image):#x} bytes"
            )
        self.data = bytes(image[self.offset:end])

    def __len__(self) -> int:
        return len(self.data) // TILE_SIZE

    def tiles(self) -> Iterator[Tuple[int, Tile]]:
        for index in range(len(self)):
            start = index * TILE_SIZE
            yield (index, Tile(self.data[start:start + TILE_SIZE]))
