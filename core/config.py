class Config:
    # Maze
    MIN_MAZE_SIZE = 10
    DEFAULT_MAZE_WIDTH = 15
    DEFAULT_MAZE_HEIGHT = 15

    # Player
    PLAYER_START_HEALTH = 100
    PLAYER_MAX_HEALTH = 150
    PLAYER_BASE_DAMAGE = 10

    # Monsters
    MONSTER_ATTACK_POWER = 10
    MONSTER_MIN_HEALTH = 30
    MONSTER_MAX_HEALTH = 50

    # Items
    POTION_HEAL_AMOUNT = 20
    POTION_NAME = "Health Potion"
    WEAPON_MIN_BONUS = 1
    WEAPON_MAX_BONUS = 5

    # Generation (content thresholds are cumulative)
    WALL_CHANCE = 0.25
    MONSTER_CHANCE = 0.10
    POTION_CHANCE = 0.15
    WEAPON_CHANCE = 0.20

    # Window Settings
    TILE_SIZE = 40
    HUD_HEIGHT = 70
    FPS = 60

    # Colors
    COLORS = {
        "background": (17, 17, 17),
        "floor": (46, 59, 40),
        "wall": (56, 56, 56),
        "exit": (200, 170, 40),
        "outline": (34, 34, 34),
        "monster": (170, 40, 40),
        "weapon": (150, 150, 210),
        "potion": (60, 160, 90),
        "player": (255, 80, 80),
        "hud": (30, 30, 30),
        "text": (220, 220, 220),
    }
