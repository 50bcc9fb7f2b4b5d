class Tile:
    def __init__(self, is_wall=False, is_exit=False, item=None, monster=None):
        self.is_wall = is_wall
        self.is_exit = is_exit
        self.item = item
        self.monster = monster

    def is_empty(self):
        if self.is_wall or self.is_exit:
            return False
        return self.item is None and self.monster is None


class Character:
    """Anything that can fight: exposes hp, attack() and take_damage()."""

    def __init__(self, hp):
        self.hp = hp

    def attack_damage(self):
        raise NotImplementedError

    def attack(self, target):
        target.take_damage(self.attack_damage())

    def take_damage(self, amount):
        self.hp = max(0, self.hp - amount)

    def is_alive(self):
        return self.hp > 0
