import pygame
from core.config import Config
from gameplay.item import Potion, Weapon

class GameRenderer:
    def __init__(self, font):
        self.font = font
        self.colors = Config.COLORS

    def render(self, screen, engine, message=""):
        screen.fill(self.colors["background"])

        maze = engine.maze
        size = Config.TILE_SIZE
        top = Config.HUD_HEIGHT

        for x, y in maze.positions():
            rect = pygame.Rect(x * size, top + y * size, size, size)
            self._draw_tile(screen, maze.get_tile(x, y), rect)

        px, py = engine.position
        center = (px * size + size // 2, top + py * size + size // 2)
        pygame.draw.circle(screen, self.colors["player"], center, size // 3)
        pygame.draw.circle(screen, (255, 255, 255), center, size // 3, 2)

        self._draw_hud(screen, engine, message)

    def _draw_tile(self, screen, tile, rect):
        fill = self.colors["floor"]
        if tile.is_wall:
            fill = self.colors["wall"]
        elif tile.is_exit:
            fill = self.colors["exit"]

        pygame.draw.rect(screen, fill, rect)
        pygame.draw.rect(screen, self.colors["outline"], rect, 1)

        # Occupants are drawn as smaller markers on top of the floor
        inner = rect.inflate(-rect.width // 2, -rect.height // 2)
        if tile.monster is not None:
            pygame.draw.rect(screen, self.colors["monster"], inner)
        elif isinstance(tile.item, Weapon):
            pygame.draw.polygon(
                screen,
                self.colors["weapon"],
                [inner.midtop, inner.midright, inner.midbottom, inner.midleft],
            )
        elif isinstance(tile.item, Potion):
            pygame.draw.circle(screen, self.colors["potion"], inner.center, inner.width // 2)

    def _draw_hud(self, screen, engine, message):
        width = screen.get_width()
        pygame.draw.rect(screen, self.colors["hud"], (0, 0, width, Config.HUD_HEIGHT))

        p = engine.player
        hp_text = self.font.render(f"HP: {p.hp}/{p.max_hp}", True, self.colors["player"])
        atk_text = self.font.render(f"Weapon: +{p.best_weapon_bonus()}", True, self.colors["weapon"])
        loc_text = self.font.render(f"X:{engine.player_x} Y:{engine.player_y}", True, self.colors["text"])

        screen.blit(hp_text, (10, 8))
        screen.blit(atk_text, (150, 8))
        screen.blit(loc_text, (width - loc_text.get_width() - 10, 8))

        if message:
            # Combat logs can be long, keep the tail that fits
            msg_surf = self.font.render(message, True, self.colors["text"])
            if msg_surf.get_width() > width - 20:
                msg_surf = self.font.render("..." + message[-(width // 10):], True, self.colors["text"])
            screen.blit(msg_surf, (10, 38))
