"""The typed dependency 'predicative'."""

from ..config import NOUN_GROUP
from .base import Argument2, Role


class Pred(Argument2):
    """Predicative of a copula ("Mike ist Bürgermeister", "Mike ist krank").

    A nominal predicative can be the object of the relation; an adjectival
    or adverbial one belongs to the relation phrase.
    """

    name = "PRED"

    @property
    def role(self) -> Role:
        if self.root_node.pos_group == NOUN_GROUP:
            return Role.OBJECT

        return Role.COMPLEMENT
