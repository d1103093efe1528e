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


"""Exceptions raised while building an automaton.

Recognition itself never fails, so every error here is a construction-time
configuration error.
"""


class AutomatonError(Exception):
    """Base class for errors raised when an automaton is built."""


class InvalidStartState(AutomatonError):
    """
    Raised when the start state is not one of the automaton's states.

    Attributes:
        state: The offending start state.
    """

    def __init__(self, state):
        self.state = state
        super().__init__(f"start state {state!r} is not in the state set")


class InvalidFinalStates(AutomatonError):
    """
    Raised when one or more accepting states are not in the state set.

    Attributes:
        states (frozenset): The accepting states that were not declared.
    """

    def __init__(self, states):
        self.states = frozenset(states)
        names = ", ".join(sorted(repr(s) for s in self.states))
        super().__init__(f"final states not in the state set: {names}")


class MalformedTransitionTable(AutomatonError):
    """
    Raised when a transition table entry mentions an undeclared state or an
    undeclared symbol.

    Attributes:
        entry (tuple): The offending ``(src, label, dests)`` entry.
    """

    def __init__(self, entry, reason=None):
        self.entry = entry
        msg = f"bad transition table entry {entry!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class ConflictingTransition(MalformedTransitionTable):
    """Raised for a repeated ``(src, label)`` key when duplicates are rejected."""

    def __init__(self, entry, key):
        self.key = key
        super().__init__(entry, f"duplicate definition for {key!r}")
