from core.config import Config
from gameplay.item import Potion, Weapon
from gameplay.models import Character


class Player(Character):
    def __init__(self, hp=Config.PLAYER_START_HEALTH):
        super().__init__(hp)
        self.max_hp = Config.PLAYER_MAX_HEALTH
        self.inventory = []
        self._clamp_hp()

    def attack_damage(self):
        return Config.PLAYER_BASE_DAMAGE + self.best_weapon_bonus()

    def best_weapon_bonus(self):
        # Weapons don't stack, only the best one counts
        bonuses = [i.attack_bonus for i in self.inventory if isinstance(i, Weapon)]
        return max(bonuses, default=0)

    def add_item(self, item):
        self.inventory.append(item)
        if isinstance(item, Potion):
            self.heal(item.heal_amount)

    def heal(self, amount):
        self.hp += amount
        self._clamp_hp()

    def take_damage(self, amount):
        super().take_damage(amount)
        self._clamp_hp()

    def _clamp_hp(self):
        self.hp = min(self.max_hp, max(0, self.hp))
