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


"""Small automata used in the documentation and the test suite."""

from enfa.automata.nfa import EPSILON, NFA


def slide_example():
    """
    Three states over the symbols ``0`` and ``1``. Accepts the words that end
    with ``0`` followed by ``1``.

    >>> slide_example().reachable_after([0, 0, 1, 0, 1]) == {"q0", "q2"}
    True
    """

    return NFA.from_table(
        ["q0", "q1", "q2"],
        [0, 1],
        [
            ("q0", 1, ["q0"]),
            ("q0", 0, ["q0", "q1"]),
            ("q1", 1, ["q2"]),
        ],
        "q0",
        ["q2"],
    )


def exercise_a():
    return NFA.from_table(
        ["q0", "q1", "q2"],
        "ab",
        [
            ("q0", "a", ["q0", "q1"]),
            ("q0", "b", ["q2"]),
            ("q1", "b", ["q1"]),
            ("q2", "a", ["q0", "q1"]),
        ],
        "q0",
        ["q1", "q2"],
    )


def exercise_b(final_states=("q1",)):
    """
    An automaton with an epsilon move from ``q0`` to ``q1``.

    Args:
        final_states (iterable): The accepting states. Passing ``["q2"]``
            makes the automaton accept ``"b"``.
    """

    return NFA.from_table(
        ["q0", "q1", "q2"],
        "ab",
        [
            ("q0", EPSILON, ["q1"]),
            ("q0", "a", ["q2"]),
            ("q1", "a", ["q1"]),
            ("q1", "b", ["q0", "q2"]),
        ],
        "q0",
        final_states,
    )
