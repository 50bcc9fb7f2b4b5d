from core.config import Config
from gameplay.models import Character


class Monster(Character):
    def __init__(self, hp, attack_power=Config.MONSTER_ATTACK_POWER):
        super().__init__(hp)
        self.attack_power = attack_power

    @classmethod
    def spawn(cls, rng):
        """Creates a monster with health rolled from the given random source."""
        hp = int(rng.integers(Config.MONSTER_MIN_HEALTH, Config.MONSTER_MAX_HEALTH + 1))
        return cls(hp)

    def attack_damage(self):
        return self.attack_power
