import sys

import pygame

from .main import main

try:
    main()
except KeyboardInterrupt:
    pygame.quit(); sys.exit(0)
