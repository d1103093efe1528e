from io import StringIO

import pytest
from enfa import (
    EPSILON,
    NFA,
    AutomatonError,
    ConflictingTransition,
    InvalidFinalStates,
    InvalidStartState,
    MalformedTransitionTable,
    versionstring,
)
from enfa.automata.samples import exercise_a, exercise_b, slide_example


def test_projections():
    nfa = exercise_b()
    assert nfa.states == frozenset(["q0", "q1", "q2"])
    assert nfa.alphabet == frozenset("ab")
    assert nfa.initial == "q0"
    assert nfa.start() == "q0"
    assert nfa.final_states == frozenset(["q1"])
    assert nfa.is_final("q1")
    assert not nfa.is_final("q0")
    assert not nfa.is_final("nowhere")
    assert len(nfa) == 3


def test_transition_lookup():
    nfa = exercise_b()
    assert nfa.transition("q1", "b") == frozenset(["q0", "q2"])
    assert nfa.transition("q2", "a") == frozenset()
    assert nfa.epsilon_moves("q0") == frozenset(["q1"])
    assert nfa.epsilon_moves("q1") == frozenset()
    # None is only an epsilon label inside a table; as a lookup it is a symbol
    assert nfa.transition("q0", None) == frozenset()
    assert nfa.delta("q0", EPSILON) == frozenset(["q1"])


def test_invalid_start_state():
    with pytest.raises(InvalidStartState) as excinfo:
        NFA.from_table(["q0", "q1"], "a", [], "q9", [])
    assert excinfo.value.state == "q9"

    with pytest.raises(InvalidStartState):
        NFA(["q0"], "a", lambda state, label: (), "q1", [])


def test_invalid_final_states():
    with pytest.raises(InvalidFinalStates) as excinfo:
        NFA.from_table(["q0", "q1"], "a", [], "q0", ["q1", "q7", "q8"])
    assert excinfo.value.states == frozenset(["q7", "q8"])
    assert "'q7'" in str(excinfo.value)


def test_malformed_table():
    states = ["q0", "q1"]
    with pytest.raises(MalformedTransitionTable) as excinfo:
        NFA.from_table(states, "a", [("qx", "a", ["q1"])], "q0", [])
    assert excinfo.value.entry == ("qx", "a", ["q1"])

    with pytest.raises(MalformedTransitionTable):
        NFA.from_table(states, "a", [("q0", "a", ["q1", "qx"])], "q0", [])

    with pytest.raises(MalformedTransitionTable):
        NFA.from_table(states, "a", [("q0", "z", ["q1"])], "q0", [])

    with pytest.raises(MalformedTransitionTable):
        NFA.from_table(states, "a", [("q0", None, ["qx"])], "q0", [])


def test_error_kinds_are_distinct():
    assert issubclass(InvalidStartState, AutomatonError)
    assert issubclass(InvalidFinalStates, AutomatonError)
    assert issubclass(MalformedTransitionTable, AutomatonError)
    assert not issubclass(MalformedTransitionTable, InvalidStartState)
    assert not issubclass(InvalidStartState, MalformedTransitionTable)


def test_duplicates_union():
    nfa = NFA.from_table(
        ["q0", "q1"],
        "a",
        [("q0", "a", ["q0"]), ("q0", "a", ["q1"]), ("q0", None, ["q1"])],
        "q0",
        ["q1"],
    )
    assert nfa.transition("q0", "a") == frozenset(["q0", "q1"])
    assert nfa.reachable_after("a") == frozenset(["q0", "q1"])


def test_duplicates_reject():
    table = [("q0", "a", ["q0"]), ("q0", "a", ["q1"])]
    with pytest.raises(ConflictingTransition) as excinfo:
        NFA.from_table(["q0", "q1"], "a", table, "q0", [], duplicates="reject")
    assert excinfo.value.key == ("q0", "a")
    assert isinstance(excinfo.value, MalformedTransitionTable)

    # Epsilon and symbol edges from the same state are different keys
    nfa = NFA.from_table(
        ["q0", "q1"],
        "a",
        [("q0", "a", ["q1"]), ("q0", EPSILON, ["q1"])],
        "q0",
        [],
        duplicates="reject",
    )
    assert nfa.labels == frozenset(["a", EPSILON])


def test_unknown_duplicate_policy():
    with pytest.raises(ValueError):
        NFA.from_table(["q0"], "a", [], "q0", [], duplicates="last")


def test_immutable():
    nfa = exercise_a()
    with pytest.raises(AttributeError):
        nfa.initial = "q1"
    with pytest.raises(AttributeError):
        nfa.extra = 1
    with pytest.raises(AttributeError):
        del nfa._initial
    assert nfa.initial == "q0"


def test_function_delta():
    def delta(state, label):
        if label == "+" and state < 3:
            return [state + 1]
        if label == "-" and state > 0:
            return [state - 1]
        return []

    nfa = NFA(range(4), "+-", delta, 0, [3])
    assert nfa.accept("+++")
    assert nfa.accept("++-++")
    assert not nfa.accept("++")
    assert not nfa.accept("-+++")
    assert nfa.labels == frozenset("+-")


def test_table_and_triples():
    nfa = exercise_b()
    assert set(nfa.triples()) == {
        ("q0", EPSILON, "q1"),
        ("q0", "a", "q2"),
        ("q1", "a", "q1"),
        ("q1", "b", "q0"),
        ("q1", "b", "q2"),
    }
    assert nfa.table[("q1", "b")] == frozenset(["q0", "q2"])
    assert ("q2", "a") not in nfa.table
    with pytest.raises(TypeError):
        nfa.table[("q2", "a")] = frozenset(["q0"])
    assert nfa.labels == frozenset(["a", "b", EPSILON])
    assert slide_example().labels == frozenset([0, 1])


def test_equality():
    assert exercise_b() == exercise_b()
    assert exercise_b() != exercise_a()
    assert exercise_b() != exercise_b(final_states=["q2"])

    n1 = NFA.from_table(["a", "b"], "x", [("a", None, ["b"])], "a", ["b"])
    n2 = NFA.from_table(["a", "b"], "x", [("a", EPSILON, ["b"])], "a", ["b"])
    assert n1 == n2


def test_dump():
    out = StringIO()
    exercise_b().dump(out)
    assert out.getvalue() == (
        "@ 'q0'\n"
        "    'a' -> 'q2'\n"
        "    <EPSILON> -> 'q1'\n"
        "  'q1' ||\n"
        "    'a' -> 'q1'\n"
        "    'b' -> 'q0', 'q2'\n"
        "  'q2'\n"
    )


def test_repr():
    assert repr(exercise_b()) == "<NFA 3 states, 2 symbols, start='q0'>"
    assert repr(EPSILON) == "<EPSILON>"


def test_versionstring():
    assert versionstring() == "0.1.0"
    assert versionstring(build=False) == "0.1"
