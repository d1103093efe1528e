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
Non-deterministic finite automata with epsilon transitions.

>>> from enfa import NFA
>>> nfa = NFA.from_table(["q0", "q1"], "a", [("q0", None, ["q1"])], "q0", ["q1"])
>>> nfa.accept("")
True

Tracing goes through loguru and is off by default. Call
``logger.enable("enfa")`` to see it.
"""

from loguru import logger

from enfa.automata.nfa import EPSILON, NFA
from enfa.automata.recognize import accepts, epsilon_closure, reachable_after, step
from enfa.errors import (
    AutomatonError,
    ConflictingTransition,
    InvalidFinalStates,
    InvalidStartState,
    MalformedTransitionTable,
)
from enfa.version import __version__, versionstring

logger.disable("enfa")

__all__ = [
    "NFA",
    "EPSILON",
    "epsilon_closure",
    "step",
    "reachable_after",
    "accepts",
    "AutomatonError",
    "InvalidStartState",
    "InvalidFinalStates",
    "MalformedTransitionTable",
    "ConflictingTransition",
    "__version__",
    "versionstring",
]
