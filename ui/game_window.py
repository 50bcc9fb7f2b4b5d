import pygame
from core.config import Config
from gameplay.engine import Direction, GameEngine, GameStatus
from visuals.renderer import GameRenderer
from ui.button import Button

KEY_DIRECTIONS = {
    pygame.K_w: Direction.UP,
    pygame.K_UP: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class GameWindow:
    def __init__(self, width=Config.DEFAULT_MAZE_WIDTH, height=Config.DEFAULT_MAZE_HEIGHT, seed=None):
        self.maze_width = width
        self.maze_height = height
        self.seed = seed

        pygame.init()
        self.screen = pygame.display.set_mode(
            (width * Config.TILE_SIZE, height * Config.TILE_SIZE + Config.HUD_HEIGHT)
        )
        pygame.display.set_caption("Maze Adventure")
        self.clock = pygame.time.Clock()
        self.running = True

        self.font = pygame.font.SysFont("Arial", 18)
        self.big_font = pygame.font.SysFont("Arial", 32, bold=True)
        self.renderer = GameRenderer(self.font)
        self.new_game_button = Button.centered(
            self.screen, self.screen.get_height() // 2 + 20, 160, 44,
            "New Game", self.font, action_name="NEW_GAME",
        )

        self.engine = None
        self.message = ""
        self.new_game()

    def new_game(self):
        self.engine = GameEngine(self.maze_width, self.maze_height, seed=self.seed)
        self.message = "Welcome to the Adventure Game!"
        # Only the first game uses a fixed seed
        self.seed = None

    def run(self):
        while self.running:
            self.handle_input()
            self.draw()
            self.clock.tick(Config.FPS)
        pygame.quit()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
            ):
                self.running = False
                continue

            if self.engine.is_over:
                if self.new_game_button.handle_event(event) == "NEW_GAME":
                    self.new_game()
                continue

            if event.type == pygame.KEYDOWN:
                if event.key in KEY_DIRECTIONS:
                    result = self.engine.move(KEY_DIRECTIONS[event.key])
                    self.message = result.message
                else:
                    self.message = "Use WASD or arrow keys to move."

    def draw(self):
        self.renderer.render(self.screen, self.engine, self.message)
        if self.engine.is_over:
            self._draw_game_over()
        pygame.display.flip()

    def _draw_game_over(self):
        overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        self.screen.blit(overlay, (0, 0))

        if self.engine.status == GameStatus.PLAYER_WON:
            text, color = "You have escaped the maze!", Config.COLORS["exit"]
        else:
            text, color = "You have died. Game over.", Config.COLORS["player"]

        banner = self.big_font.render(text, True, color)
        rect = banner.get_rect(center=(self.screen.get_width() // 2, self.screen.get_height() // 2 - 30))
        self.screen.blit(banner, rect)
        self.new_game_button.draw(self.screen)
