from core.config import Config


class Item:
    def __init__(self, name, pickup_message):
        self._name = name
        self._pickup_message = pickup_message

    @property
    def name(self):
        return self._name

    @property
    def pickup_message(self):
        return self._pickup_message

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class Weapon(Item):
    """Raises the player's attack damage while it is the best one held."""

    def __init__(self, name, attack_bonus):
        super().__init__(name, f"You picked up a {name}!")
        self._attack_bonus = attack_bonus

    @property
    def attack_bonus(self):
        return self._attack_bonus


class Potion(Item):
    """Heals the player once, at pickup time."""

    def __init__(self, name=Config.POTION_NAME):
        super().__init__(name, f"You drink the {name} and get healthier!")

    @property
    def heal_amount(self):
        return Config.POTION_HEAL_AMOUNT
