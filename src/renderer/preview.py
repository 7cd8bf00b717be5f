# renderer/preview.py
import numpy as np
import pygame


def show_image(rgb8: np.ndarray, title: str = "Path Tracer"):
    """
    Display a finished render in a pygame window until it is closed or
    Escape is pressed.
    """
    height, width, _ = rgb8.shape
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        # pygame surfaces are indexed (x, y)
        surface = pygame.surfarray.make_surface(np.transpose(rgb8, (1, 0, 2)))
        screen.blit(surface, (0, 0))
        pygame.display.flip()

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
