"""The typed dependency 'comparative' introduced by "als"."""

from .base import Argument2, Role


class Kom(Argument2):
    """Comparative clause ("größer als Berlin", "arbeitet als Lehrer").

    With a noun inside, the comparison can either complete the relation or
    name its object; without one it only modifies the relation.
    """

    name = "KOM"

    @property
    def role(self) -> Role:
        if self.contains_noun():
            return Role.BOTH

        return Role.COMPLEMENT
