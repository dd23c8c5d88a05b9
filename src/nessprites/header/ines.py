from typing import Tuple

from nessprites.exc.core import MissingGraphicsRom, TruncatedInput

HEADER_SIZE = 16
TRAINER_SIZE = 512
PRG_UNIT = 16 * 1024
CHR_UNIT = 8 * 1024

class INESHeader:
    def __init__(self, rom: bytes):
        self.rom = rom
        self.magic = b""
        self.prg_units = 0
        self.chr_units = 0
        self.flags6 = 0
        self.prg_rom = 0
        self.chr_rom = 0
        self.trainer = False
        self.battery = False
        self.vertical_nametable = False
        self.horizontal_nametable = False

    def read(self) -> "INESHeader":
        buffer = self.rom[0:HEADER_SIZE]
        if len(buffer) < HEADER_SIZE:
            raise TruncatedInput(f"Header needs {HEADER_SIZE} bytes, got {len(buffer)}")

        self.magic = bytes(buffer[0:4])

        self.prg_units = buffer[4]
        self.chr_units = buffer[5]
        self.prg_rom = self.prg_units * PRG_UNIT
        self.chr_rom = self.chr_units * CHR_UNIT

        # 76543210
        #      |++- nametable arrangement, battery
        #      +--- 512-byte trainer before PRG data
        self.flags6 = buffer[6]
        if self.flags6 & 0x01:
            self.vertical_nametable = True
        else:
            self.horizontal_nametable = True
        self.battery = (self.flags6 & 0b00000010) != 0
        self.trainer = (self.flags6 & 0b00000100) != 0

        return self

    def chr_region(self) -> Tuple[int, int]:
        if self.chr_units == 0:
            raise MissingGraphicsRom("CHR ROM not found (board uses CHR RAM).")

        offset = HEADER_SIZE + self.prg_rom
        if self.trainer:
            offset += TRAINER_SIZE

        return (offset, self.chr_rom)

    def dump(self, file=None):
        print(f"magic: {self.magic}", file=file)
        print(f"prg_rom: {self.prg_rom}", file=file)
        print(f"chr_rom: {self.chr_rom}", file=file)
        print(f"trainer: {self.trainer}", file=file)
        print(f"battery: {self.battery}", file=file)
        print(f"horiz nametable: {self.horizontal_nametable}", file=file)
        print(f"vert nametable: {self.vertical_nametable}", file=file)

def locate(image: bytes) -> Tuple[int, int]:
    return INESHeader(image).read().chr_region()
