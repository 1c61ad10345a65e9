"""Second-argument extraction over dependency trees.

Given a relation phrase, this module finds the subtrees that can complete it
(objects, predicatives, prepositional phrases, comparatives), decides for each
whether it belongs to the relation or is its object, and emits the object(s).

The procedure:
1. Collect candidate nodes attached to the relation's verbs
2. Wrap each candidate in the argument class for its typed dependency
3. Group the arguments by role (complement, object, both, none)
4. Resolve the groups: promote, tie-break by distance, fold complements
   into the relation phrase
5. Emit extractions for the chosen object
"""

import logging
from typing import List, Optional

from ..arguments import Argument2, Objp, Role, create_argument
from ..config import (
    ARGUMENT_LABELS,
    COMPARATIVE_LABEL,
    COMPARATIVE_WORD,
    FINITE_AUXILIARY,
    FULL_VERB_PREFIX,
    PP_LABEL,
    PRONOMINAL_ADVERB,
    REFLEXIVE_PRONOUN,
    RELATIVE_CLAUSE_LABEL,
    ExtractorConfig,
)
from ..tree.node import Node
from ..utils.validators import CandidateValidator
from .extractor import Extractor
from .tree_extraction import ArgumentExtraction, TreeExtraction

logger = logging.getLogger(__name__)


class Argument2Extractor(Extractor[TreeExtraction, ArgumentExtraction]):
    """Extract objects and complements of a relation's verb.

    Parameters
    ----------
    child_arguments : bool
        Also look for arguments of coordinated verbs and of the bare
        relation root if the relation's own verbs have none
    progressive_extraction : bool
        Also extract when more than two arguments were found, taking the
        one farthest from the relation as object
    """

    def __init__(self, child_arguments: bool = False, progressive_extraction: bool = False):
        self.child_arguments = child_arguments
        self.progressive_extraction = progressive_extraction
        self.validator = CandidateValidator()

    @classmethod
    def from_config(cls, config: ExtractorConfig) -> "Argument2Extractor":
        return cls(
            child_arguments=config.child_arguments,
            progressive_extraction=config.progressive_extraction,
        )

    def extract_candidates(self, rel: TreeExtraction) -> List[ArgumentExtraction]:
        """Resolve the second argument(s) of ``rel``.

        ``rel`` is modified in place: complements are folded into its ids.

        Parameters
        ----------
        rel : TreeExtraction
            The relation candidate

        Returns
        -------
        List[ArgumentExtraction]
            The extracted second arguments, empty if none can be extracted
            safely
        """
        self.validator.validate(rel)
        extrs: List[ArgumentExtraction] = []

        candidates = self.extract_object_complement_candidates(rel)
        if not candidates:
            logger.debug(f"No argument candidates for relation '{rel.text()}'")
            return extrs

        # Convert candidates into arguments depending on their typed dependency
        arguments = [a for a in (create_argument(n, rel) for n in candidates) if a is not None]
        logger.debug(f"Relation '{rel.text()}': arguments {arguments}")

        # A single argument is extracted if it can act as object - exception: pp
        if len(arguments) == 1:
            arg = arguments[0]
            if (arg.name == "PP" and arg.role is not Role.NONE) or arg.role not in (Role.COMPLEMENT, Role.NONE):
                extrs.extend(arg.create_tree_extractions())
            return extrs

        complements = [a for a in arguments if a.role is Role.COMPLEMENT]
        objects = [a for a in arguments if a.role is Role.OBJECT]
        both = [a for a in arguments if a.role is Role.BOTH]
        none = [a for a in arguments if a.role is Role.NONE and isinstance(a, Objp)]

        # A pronominal adverb ("deswegen") needs context from outside the sentence,
        # any relation extracted here would not be factual
        if none:
            logger.debug(f"Relation '{rel.text()}': unresolved prepositional object {none}")
            return extrs

        # Reflexive pronouns belong to the verb
        reflexive = next((a for a in complements if a.root_node.pos == REFLEXIVE_PRONOUN), None)
        if reflexive is not None:
            self._add_to_relation(rel, [reflexive])
            arguments.remove(reflexive)
            complements.remove(reflexive)

        if len(complements) + len(objects) + len(both) <= 2:
            # An adverbial predicative leaves the prepositional phrase as object
            if self._count(arguments, "PRED") == 1 and self._count(arguments, "PP") == 1:
                pred = self._get_args(arguments, "PRED")[0]
                pp = self._get_args(arguments, "PP")[0]

                if pred.role is Role.COMPLEMENT and pp.role is not Role.NONE:
                    self._move(pp, complements, objects)

            # A comparative next to a prepositional phrase joins the relation
            if self._count(arguments, "KOM") == 1 and self._count(arguments, "PP") == 1:
                kom = self._get_args(arguments, "KOM")[0]
                pp = self._get_args(arguments, "PP")[0]

                if kom.role is Role.BOTH and pp.role is not Role.NONE:
                    self._move(pp, complements, objects)
                    self._add_to_relation(rel, [kom])
                    both.remove(kom)

            # Of several prepositional phrases the farthest one is the object
            if self._contains_only(arguments, "PP"):
                obj = self._get_object(arguments)
                if obj is not None and obj.role is not Role.NONE:
                    self._move(obj, complements, objects)

            self._add_to_relation(rel, complements)

            if not objects and both:
                if len(both) > 1:
                    obj = self._get_object(both)
                    extrs.extend(obj.create_tree_extractions())
                    both.remove(obj)
                    self._add_to_relation(rel, both)
                else:
                    extrs.extend(both[0].create_tree_extractions())
                logger.debug(f"Relation '{rel.text()}': object chosen among ambiguous arguments")
                return extrs

            if objects and not both:
                # Objects close to the verb read as part of the predicate,
                # the farthest one is the real object
                folded = []
                while len(objects) != 1:
                    complement = self._get_complement(objects)
                    objects.remove(complement)
                    folded.append(complement)
                self._add_to_relation(rel, folded)
                extrs.extend(objects[0].create_tree_extractions())
                logger.debug(f"Relation '{rel.text()}': object {objects[0]}")
                return extrs

            if len(objects) == 1 and len(both) == 1:
                self._add_to_relation(rel, both)
                extrs.extend(objects[0].create_tree_extractions())
                logger.debug(f"Relation '{rel.text()}': object {objects[0]}, complement {both[0]}")
                return extrs

        if self.progressive_extraction:
            if objects:
                obj = self._get_object(objects)
                objects.remove(obj)
            else:
                obj = self._get_object(both)
                if obj is not None:
                    both.remove(obj)

            self._add_to_relation(rel, objects + both)

            if obj is not None:
                extrs.extend(obj.create_tree_extractions())
                logger.debug(f"Relation '{rel.text()}': progressive object {obj}")
            return extrs

        logger.debug(f"Relation '{rel.text()}': {len(arguments)} arguments could not be resolved")
        return extrs

    def extract_object_complement_candidates(self, rel: TreeExtraction) -> List[Node]:
        """Return the root nodes of object and complement candidates of ``rel``."""
        rel_nodes = rel.root_node.find(rel.node_ids)

        # Prefer arguments directly attached to the main verb of the relation
        full_verbs = [
            n for n in rel_nodes
            if n.pos.startswith(FULL_VERB_PREFIX) or n.pos == FINITE_AUXILIARY
        ]
        arguments = self._get_arguments(full_verbs)
        if not arguments:
            arguments = self._get_arguments(rel_nodes)

        if self.child_arguments:
            # Arguments of coordinated verbs
            if not arguments:
                arguments = self._get_arguments(rel.root_node.find(rel.kon_node_ids))
            # Arguments of the bare relation root
            if not arguments:
                arguments = self._get_arguments([rel.root_node])

        return arguments

    def _get_arguments(self, rel_nodes: List[Node]) -> List[Node]:
        arguments = []
        for node in rel_nodes:
            arguments.extend(c for c in node.children if self._is_argument(c))

        return [a for a in arguments if self._filter_arguments_with_relative_clause(a)]

    @staticmethod
    def _is_argument(node: Node) -> bool:
        label = node.label_to_parent
        if label == COMPARATIVE_LABEL:
            return node.word.lower() == COMPARATIVE_WORD
        if label == PP_LABEL:
            return node.pos != PRONOMINAL_ADVERB
        return label in ARGUMENT_LABELS

    @staticmethod
    def _filter_arguments_with_relative_clause(argument: Node) -> bool:
        """Drop arguments with at most two children, one of them a relative clause.

        Such an argument does not lead to an informative relation.
        """
        return len(argument.children) > 2 or not argument.has_child_of_type(RELATIVE_CLAUSE_LABEL)

    @staticmethod
    def _get_object(arguments: List[Argument2]) -> Optional[Argument2]:
        """Return the argument farthest from the relation.

        A single object-typed argument wins without comparing distances.
        Ties go to the first argument.
        """
        object_arguments = [a for a in arguments if a.name.startswith("OBJ")]
        if len(object_arguments) == 1:
            return object_arguments[0]

        obj = None
        max_distance = None
        for arg in arguments:
            distance = arg.distance_to_relation()
            if max_distance is None or distance > max_distance:
                max_distance = distance
                obj = arg
        return obj

    @staticmethod
    def _get_complement(arguments: List[Argument2]) -> Optional[Argument2]:
        """Return the argument closest to the relation, ties go to the first argument."""
        complement = None
        min_distance = None
        for arg in arguments:
            distance = arg.distance_to_relation()
            if min_distance is None or distance < min_distance:
                min_distance = distance
                complement = arg
        return complement

    @staticmethod
    def _add_to_relation(rel: TreeExtraction, complements: List[Argument2]) -> None:
        """Fold the complements (and their prepositions) into the relation phrase."""
        if not complements:
            return

        ids = []
        for arg in complements:
            ids.extend(arg.ids(False))
            if arg.preposition is not None:
                ids.append(arg.preposition.id)

        rel.prepend_ids(ids)

    @staticmethod
    def _move(arg: Argument2, source: List[Argument2], target: List[Argument2]) -> None:
        if arg not in target:
            target.append(arg)
        if arg in source:
            source.remove(arg)

    @staticmethod
    def _count(arguments: List[Argument2], name: str) -> int:
        return sum(1 for a in arguments if a.name == name)

    @staticmethod
    def _contains_only(arguments: List[Argument2], name: str) -> bool:
        return all(a.name == name for a in arguments)

    @staticmethod
    def _get_args(arguments: List[Argument2], name: str) -> List[Argument2]:
        return [a for a in arguments if a.name == name]
