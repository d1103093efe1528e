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
Word recognition for :class:`enfa.automata.nfa.NFA`.

The functions here only read the automaton through ``delta``, ``epsilon_moves``,
``is_final`` and ``initial``. They never raise: a symbol with
no matching edge, including a symbol outside the alphabet, simply leads
nowhere.
"""

from loguru import logger

from enfa.automata.markers import EPSILON


def epsilon_closure(nfa, state):
    """
    Returns the states reachable from ``state`` by following one or more
    epsilon transitions.

    The closure is transitive but not reflexive: ``state`` itself is only in
    the result when an epsilon cycle (a self-loop included) leads back to it.

    Args:
        nfa (NFA): The automaton.
        state: The state to start from.

    Returns:
        frozenset: The reachable states. Empty if ``state`` has no epsilon
        transitions.

    Example:
        >>> from enfa import EPSILON, NFA
        >>> table = [(0, EPSILON, [1]), (1, EPSILON, [2])]
        >>> nfa = NFA.from_table([0, 1, 2], "", table, 0, [])
        >>> sorted(epsilon_closure(nfa, 0))
        [1, 2]
    """

    closure = set()
    # Each state is expanded at most once, so cyclic epsilon graphs terminate
    visited = set()
    frontier = [state]
    while frontier:
        current = frontier.pop()
        if current in visited:
            continue
        visited.add(current)
        for dest in nfa.epsilon_moves(current):
            closure.add(dest)
            if dest not in visited:
                frontier.append(dest)
    return frozenset(closure)


def _edges(nfa, state, symbol):
    # Input symbols are never epsilon labels
    if symbol is EPSILON:
        return frozenset()
    return frozenset(nfa.delta(state, symbol) or ())


def step(nfa, symbol, state):
    """
    Returns the states reachable from ``state`` by consuming exactly one
    ``symbol``.

    The consuming edge may leave ``state`` directly or any state in its
    epsilon closure. Epsilon moves after the consuming edge are not followed.

    Args:
        nfa (NFA): The automaton.
        symbol: The input symbol. ``None`` is an ordinary symbol and
            :data:`EPSILON` matches no edge.
        state: The state to start from.

    Returns:
        frozenset: The destination states.
    """

    dests = set(_edges(nfa, state, symbol))
    for q in epsilon_closure(nfa, state):
        dests.update(_edges(nfa, q, symbol))
    return frozenset(dests)


def reachable_after(nfa, word, state):
    """
    Returns every state the automaton could be in after consuming all of
    ``word``, starting from ``state``.

    Each symbol fans out from every active state and the branches are merged
    into one set, so the active states never contain duplicates. Once the
    word is exhausted, trailing epsilon moves are followed from each active
    state.

    Args:
        nfa (NFA): The automaton.
        word (iterable): The input symbols. A string is consumed one
            character at a time.
        state: The state to start from.

    Returns:
        frozenset: The reachable states. Empty if every branch got stuck.
    """

    current = frozenset([state])
    for symbol in word:
        nextstates = set()
        for q in current:
            nextstates.update(step(nfa, symbol, q))
        logger.debug("{} -> {!r} -> {}", set(current), symbol, nextstates)
        current = frozenset(nextstates)
        if not current:
            break

    result = set(current)
    for q in current:
        result.update(epsilon_closure(nfa, q))
    return frozenset(result)


def accepts(nfa, word):
    """
    Returns True if ``word`` leads from the start state of ``nfa`` to at
    least one accepting state.
    """

    reached = reachable_after(nfa, word, nfa.initial)
    return any(nfa.is_final(q) for q in reached)
