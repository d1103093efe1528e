# Copyright 2012 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.


"""
Immutable non-deterministic finite automata with epsilon transitions.

An :class:`NFA` is the quintuple ``(Q, Σ, δ, q0, F)``. The transition relation
``δ`` maps a state and a label (a symbol or :data:`EPSILON`) to a set of
states. Automata are validated when they are built and never change
afterwards; the recognition algorithms live in :mod:`enfa.automata.recognize`.
"""

import sys
from types import MappingProxyType

from cached_property import cached_property
from loguru import logger

from enfa.automata.markers import EPSILON
from enfa.automata.recognize import accepts, epsilon_closure, reachable_after, step
from enfa.errors import (
    ConflictingTransition,
    InvalidFinalStates,
    InvalidStartState,
    MalformedTransitionTable,
)

# Default for omitted arguments; None is a valid state
_NOT_GIVEN = object()

# Policies for repeated (state, label) keys in a transition table
UNION = "union"
REJECT = "reject"
DUPLICATE_POLICIES = (UNION, REJECT)


def normalize_label(label):
    """
    Returns :data:`EPSILON` for ``None``, otherwise the label unchanged. Only
    table entries are normalized; ``None`` in an input word is a plain symbol.
    """

    return EPSILON if label is None else label


class NFA:
    """
    Non-deterministic finite automaton with epsilon transitions.

    Args:
        states (iterable): The states of the automaton. Any hashable values.
        alphabet (iterable): The symbols non-epsilon transitions may consume.
        delta (callable): The transition relation. Called as
            ``delta(state, label)`` where ``label`` is a symbol or
            :data:`EPSILON`, it returns an iterable of destination states
            (possibly empty).
        initial: The start state. Must be one of ``states``.
        final_states (iterable): The accepting states. Must be a subset of
            ``states``.

    Raises:
        InvalidStartState: If ``initial`` is not in ``states``.
        InvalidFinalStates: If some accepting state is not in ``states``.

    Example:
        >>> nfa = NFA.from_table(
        ...     ["q0", "q1"], "a", [("q0", "a", ["q1"])], "q0", ["q1"]
        ... )
        >>> nfa.accept("a")
        True
    """

    def __init__(self, states, alphabet, delta, initial, final_states):
        states = frozenset(states)
        final_states = frozenset(final_states)
        if initial not in states:
            raise InvalidStartState(initial)
        undeclared = final_states.difference(states)
        if undeclared:
            raise InvalidFinalStates(undeclared)

        # Attribute assignment is blocked, so fill the instance dict directly
        self.__dict__.update(
            _states=states,
            _alphabet=frozenset(alphabet),
            _delta=delta,
            _initial=initial,
            _final_states=final_states,
        )
        logger.debug(
            "Built NFA with {} states, {} symbols, {} final states",
            len(states),
            len(self._alphabet),
            len(final_states),
        )

    @classmethod
    def from_table(
        cls, states, alphabet, table, initial, final_states, duplicates=UNION
    ):
        """
        Builds an automaton from an explicit transition table.

        Args:
            states (iterable): The states of the automaton.
            alphabet (iterable): The input symbols.
            table (iterable): ``(src, label, dests)`` triples. ``label`` is a
                symbol, or :data:`EPSILON` (or ``None``) for an epsilon move.
                ``dests`` is an iterable of states.
            initial: The start state.
            final_states (iterable): The accepting states.
            duplicates (str): What to do when the same ``(src, label)`` pair
                appears more than once. ``"union"`` merges the destination
                sets, ``"reject"`` raises :class:`ConflictingTransition`.

        Returns:
            NFA: The validated automaton.

        Raises:
            MalformedTransitionTable: If an entry refers to an undeclared
                state or symbol.
            ConflictingTransition: If ``duplicates="reject"`` and a key is
                repeated.
            InvalidStartState: If ``initial`` is not in ``states``.
            InvalidFinalStates: If some accepting state is not in ``states``.
            ValueError: If ``duplicates`` is not a known policy.
        """

        if duplicates not in DUPLICATE_POLICIES:
            raise ValueError(f"Unknown duplicate policy {duplicates!r}")

        states = frozenset(states)
        alphabet = frozenset(alphabet)
        mapping = {}
        for entry in table:
            src, label, dests = entry
            label = normalize_label(label)
            dests = frozenset(dests)
            if src not in states:
                raise MalformedTransitionTable(entry, f"unknown state {src!r}")
            unknown = dests.difference(states)
            if unknown:
                names = ", ".join(sorted(repr(s) for s in unknown))
                raise MalformedTransitionTable(entry, f"unknown states {names}")
            if label is not EPSILON and label not in alphabet:
                raise MalformedTransitionTable(entry, f"unknown symbol {label!r}")

            key = (src, label)
            if key in mapping:
                if duplicates == REJECT:
                    raise ConflictingTransition(entry, key)
                mapping[key] = mapping[key].union(dests)
            else:
                mapping[key] = dests

        logger.debug("Transition table has {} keys", len(mapping))

        def delta(state, label):
            return mapping.get((state, label), frozenset())

        return cls(states, alphabet, delta, initial, final_states)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    def __len__(self):
        return len(self._states)

    def __repr__(self):
        return "<%s %d states, %d symbols, start=%r>" % (
            type(self).__name__,
            len(self._states),
            len(self._alphabet),
            self._initial,
        )

    def __eq__(self, other):
        if not isinstance(other, NFA):
            return NotImplemented
        return (
            self._initial == other._initial
            and self._states == other._states
            and self._alphabet == other._alphabet
            and self._final_states == other._final_states
            and self.table == other.table
        )

    __hash__ = None

    # Projections

    @property
    def states(self):
        return self._states

    @property
    def alphabet(self):
        return self._alphabet

    @property
    def delta(self):
        return self._delta

    @property
    def initial(self):
        return self._initial

    @property
    def final_states(self):
        return self._final_states

    def start(self):
        """Returns the start state."""

        return self._initial

    def is_final(self, state):
        """Returns True if ``state`` is an accepting state."""

        return state in self._final_states

    def transition(self, state, label):
        """
        Returns the states reached from ``state`` over one edge labeled
        ``label``.

        Args:
            state: The source state.
            label: A symbol, or :data:`EPSILON` for epsilon edges. ``None`` is
                an ordinary symbol here.

        Returns:
            frozenset: The destination states. Empty when there is no edge.
        """

        return frozenset(self._delta(state, label) or ())

    def epsilon_moves(self, state):
        """
        Returns the immediate epsilon successors of ``state``. The state itself
        is only included if it has an explicit epsilon self-loop.
        """

        return self.transition(state, EPSILON)

    @cached_property
    def table(self):
        """
        A read-only mapping of ``(src, label)`` to the non-empty destination
        sets, covering every declared state and every label in the alphabet
        plus :data:`EPSILON`.
        """

        labels = list(self._alphabet)
        labels.append(EPSILON)
        table = {}
        for src in self._states:
            for label in labels:
                dests = self.transition(src, label)
                if dests:
                    table[(src, label)] = dests
        return MappingProxyType(table)

    @cached_property
    def labels(self):
        """The set of labels that appear on at least one edge."""

        return frozenset(label for _, label in self.table)

    def triples(self):
        """
        Generates ``(src, label, dest)`` for every edge in the automaton.
        """

        for (src, label), dests in self.table.items():
            for dest in dests:
                yield src, label, dest

    def dump(self, stream=sys.stdout):
        """
        Prints a textual representation of the automaton to ``stream``.

        The start state is marked with ``@`` and accepting states are followed
        by ``||``. States, labels and destinations are listed in ``repr``
        order so the output is stable.
        """

        for src in sorted(self._states, key=repr):
            beg = "@" if src == self._initial else " "
            end = " ||" if self.is_final(src) else ""
            print(f"{beg} {src!r}{end}", file=stream)
            xs = {
                label: dests
                for (s, label), dests in self.table.items()
                if s == src
            }
            for label in sorted(xs, key=repr):
                dests = ", ".join(sorted(repr(d) for d in xs[label]))
                print(f"    {label!r} -> {dests}", file=stream)

    # Recognition

    def epsilon_closure(self, state):
        """See :func:`enfa.automata.recognize.epsilon_closure`."""

        return epsilon_closure(self, state)

    def step(self, symbol, state):
        """See :func:`enfa.automata.recognize.step`."""

        return step(self, symbol, state)

    def reachable_after(self, word, state=_NOT_GIVEN):
        """
        Returns the states the automaton can be in after consuming ``word``
        starting from ``state`` (the start state if omitted).
        """

        if state is _NOT_GIVEN:
            state = self._initial
        return reachable_after(self, word, state)

    def accept(self, word):
        """Returns True if the automaton accepts ``word``."""

        return accepts(self, word)
