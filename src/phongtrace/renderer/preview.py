# renderer/preview.py
import logging

import numpy as np
import pygame

logger = logging.getLogger(__name__)


def make_surface(image: np.ndarray) -> "pygame.Surface":
    """Surface for an (height, width, 3) uint8 image."""
    # surfarray indexes pixels as [x, y].
    return pygame.surfarray.make_surface(np.ascontiguousarray(image.swapaxes(0, 1)))


def show(image: np.ndarray, title: str = "phongtrace") -> None:
    """
    Opens a window with the finished render and blocks until it is closed
    or Escape is pressed.
    """
    height, width = image.shape[:2]
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        screen.blit(make_surface(image), (0, 0))
        pygame.display.flip()
        logger.info("Showing %dx%d preview, close the window or press Escape to exit",
                    width, height)

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()
