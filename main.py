import logging
import os
import random

import pygame

from wrapteroids.config import FPS, HEIGHT, WIDTH
from wrapteroids.presentation import PygameAudio, PygameRenderer
from wrapteroids.simulation import Simulation


LOG_LEVEL = os.environ.get("WRAPTEROIDS_LOG_LEVEL", "INFO")


def main():
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Wrapteroids")
    clock = pygame.time.Clock()

    game = Simulation(
        rng=random.Random(),
        render=PygameRenderer(screen),
        audio=PygameAudio(),
    )

    running = True
    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                game.on_key_down(event.key)
            elif event.type == pygame.KEYUP:
                game.on_key_up(event.key)

        game.update(pygame.time.get_ticks())
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
