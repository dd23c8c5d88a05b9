import sys

from nessprites.sprite_dump import main

sys.exit(main())
