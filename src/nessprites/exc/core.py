class InvalidROM(Exception):
    pass

class MissingGraphicsRom(InvalidROM):
    pass

class TruncatedInput(InvalidROM):
    pass
