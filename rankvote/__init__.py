'''Rankvote - aggregate rankings of candidates from ranked ballots.

A *poll* is a collection of ranked ballots, each ordering some of the
candidates from the most to the least preferred. Candidates are identified by
contiguous non-negative integer indices. A *voting rule* turns a poll into a
total ranking of all the candidates, or signals that it cannot determine
a unique winner.

The package is organized as follows:

-   The ``candidate`` module defines the candidate index type.
-   The ``vote`` module defines ballots (rankings) and their validators.
-   The ``poll`` module defines the :class:`Poll` container.
-   The ``evaluate`` subpackage contains the voting rule contract and its
    implementations (currently :class:`evaluate.plurality.Plurality`).
-   The :class:`VotingSystem` object from the :mod:`system` module wraps a rule
    into a named election system; rules can also be looked up by key there.
'''
