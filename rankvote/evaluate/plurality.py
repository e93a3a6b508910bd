'''Plurality voting.'''

import logging
from typing import List

import rankvote.util
from rankvote.evaluate.core import VotingRule, Tie, ElectionResult
from rankvote.poll import Poll


logger = logging.getLogger(__name__)


class Plurality(VotingRule):
    '''Plurality voting ranks candidates by number of first preferences.

    Only the top choice on each ballot counts; lower preferences are ignored
    entirely and empty ballots (abstentions) have no effect. Candidates are
    ranked by descending number of votes. Candidates with equal vote counts
    are ordered by their index, except for a tie for the first place, which
    cannot be resolved and produces a :class:`Tie` of all the candidates with
    the highest vote count.

    This is the single-winner *first-past-the-post* system, extended to rank
    all candidates.
    '''

    @classmethod
    def tally(cls, poll: Poll) -> List[int]:
        '''Count the first preferences in the poll, indexed by candidate.

        :raises EmptyPoll: If the poll contains no ranked candidate.
        '''
        return rankvote.util.first_preferences(poll, poll.n_candidates())

    @classmethod
    def election(cls, poll: Poll) -> ElectionResult:
        '''Rank candidates by plurality voting.

        :param poll: Ballots to evaluate.
        :returns: A tuple of all candidates sorted in descending order by
            their first preference votes, or a :class:`Tie` if the two best
            candidates have an equal number of votes.
        :raises EmptyPoll: If the poll contains no ranked candidate.
        '''
        votes = cls.tally(poll)
        logger.debug('first preference votes: %s', votes)
        ranking = rankvote.util.sorted_by_votes(votes)
        if len(ranking) >= 2 and votes[ranking[1]] == votes[ranking[0]]:
            top_votes = votes[ranking[0]]
            tie = Tie(cand for cand in ranking if votes[cand] == top_votes)
            logger.info('%s are tied best with %d votes, no winner',
                        tie, top_votes)
            return tie
        logger.info('%s wins with %d votes', ranking[0], votes[ranking[0]])
        return tuple(ranking)
