'''Evaluate the results of the elections.

Voting rules take a :class:`rankvote.poll.Poll` of ranked ballots and return
either a ranking of all candidates (a tuple, winner first) or, when the rule
cannot determine a unique winner, a :class:`core.Tie` object containing the
candidates tied for the first place. Ties are regular results, not errors;
an empty poll, on the other hand, raises :class:`rankvote.poll.EmptyPoll`.

All rules derive from :class:`core.VotingRule` and are used as types, without
instantiation::

    Plurality.election(poll)

None of the rules validate ballot correctness; pass a
:class:`rankvote.vote.RankingValidator` to the poll for that.
'''

from rankvote.evaluate.core import *    # noqa
from rankvote.evaluate.plurality import Plurality    # noqa
