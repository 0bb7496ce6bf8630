"""Input collection: translate OS events into simple control signals only."""

import pygame


class InputHandler:
    """Collects input events and key states, without applying any game logic."""

    def get_events(self) -> dict:
        """Poll pygame events and return a signals dict.

        Signals include:
          - quit: bool
          - reset: bool
          - left, right, jump (held keys)
        """
        signals: dict = {"quit": False, "reset": False}

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                signals["quit"] = True
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    signals["quit"] = True
                elif event.key == pygame.K_r:
                    signals["reset"] = True

        ks = pygame.key.get_pressed()
        signals.update(
            {
                "left": bool(ks[pygame.K_LEFT] or ks[pygame.K_a]),
                "right": bool(ks[pygame.K_RIGHT] or ks[pygame.K_d]),
                "jump": bool(ks[pygame.K_UP] or ks[pygame.K_w] or ks[pygame.K_SPACE]),
            }
        )
        return signals
