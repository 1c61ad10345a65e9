"""Object-typed dependencies: accusative, second accusative, dative, genitive
and prepositional objects.
"""

from ..config import NOUN_GROUP, PRONOMINAL_ADVERB, PRONOUN_GROUP, REFLEXIVE_PRONOUN
from .base import Argument2, Role


class Obja(Argument2):
    """Accusative object ("kauft ein Haus").

    A reflexive pronoun ("wäscht sich") is part of the verb.
    """

    name = "OBJA"

    @property
    def role(self) -> Role:
        if self.root_node.pos == REFLEXIVE_PRONOUN:
            return Role.COMPLEMENT

        return Role.OBJECT


class Obja2(Argument2):
    """Second accusative object ("lehrt die Kinder Mathematik")."""

    name = "OBJA2"

    @property
    def role(self) -> Role:
        if self.root_node.pos == REFLEXIVE_PRONOUN:
            return Role.COMPLEMENT

        return Role.BOTH


class Objd(Argument2):
    """Dative object ("gibt dem Mann ein Buch", "hilft dem Mann").

    Next to an accusative object the dative reads as part of the relation,
    on its own it is the object.
    """

    name = "OBJD"

    @property
    def role(self) -> Role:
        if self.root_node.pos == REFLEXIVE_PRONOUN:
            return Role.COMPLEMENT

        return Role.BOTH


class Objg(Argument2):
    """Genitive object ("gedenkt der Opfer")."""

    name = "OBJG"

    @property
    def role(self) -> Role:
        return Role.OBJECT


class Objp(Argument2):
    """Prepositional object ("wartet auf den Bus").

    A pronominal adverb ("darauf", "deswegen") refers to something outside
    the sentence; the relation is not informative without it.
    """

    name = "OBJP"

    @property
    def role(self) -> Role:
        if self.root_node.pos == PRONOMINAL_ADVERB:
            return Role.NONE
        if not self.root_node.contains_pos_group(NOUN_GROUP, PRONOUN_GROUP):
            return Role.NONE

        return Role.OBJECT
