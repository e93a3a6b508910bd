from typing import Dict, Type

import rankvote.evaluate
from rankvote.evaluate.core import VotingRule, ElectionResult
from rankvote.persist import simple_serialization
from rankvote.poll import Poll


@simple_serialization
class VotingSystem:
    """A named voting system. Wraps a voting rule.

    :param name: Name of the system; usually mainly includes the body or
        position to be elected.
    :param rule: Voting rule type representing the system, such as
        :class:`rankvote.evaluate.Plurality`.
    """
    def __init__(self, name: str, rule: Type[VotingRule]):
        self.name = name
        self.rule = rule

    def evaluate(self, poll: Poll) -> ElectionResult:
        """Return the rule's election result for the poll given."""
        return self.rule.election(poll)


RULES: Dict[str, Type[VotingRule]] = {
    "plurality": rankvote.evaluate.Plurality,
}
RULE_NAMES: Dict[str, str] = {
    "plurality": 'Plurality',
}


def get_rule(key: str) -> Type[VotingRule]:
    """Select a voting rule by its key."""
    try:
        return RULES[key]
    except KeyError as e:
        raise ValueError(f'unknown voting rule {str(e)}, available: '
                         + ', '.join(RULES.keys())) from e


def get_available_systems() -> Dict[str, VotingSystem]:
    return {
        key: VotingSystem(RULE_NAMES[key], rule)
        for key, rule in RULES.items()
    }
