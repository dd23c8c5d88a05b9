def make_rom(prg_units=0, chr_units=1, flags6=0, chr_data=None, magic=b"NES\x1a", pad=True):
    header = bytearray(16)
    header[0:4] = magic
    header[4] = prg_units
    header[5] = chr_units
    header[6] = flags6

    rom = bytearray(header)
    if flags6 & 0b00000100:
        rom += bytes([0xEA]) * 512
    rom += bytes([0xFF]) * (prg_units * 16384)

    if chr_data is None:
        chr_data = b""
    rom += chr_data
    if pad:
        rom += bytes(chr_units * 8192 - len(chr_data))
    return bytes(rom)
