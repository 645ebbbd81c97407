import pytest

from graph import Demo
from algorithms import PrimSnapshot, Phase, UndirectedGraphViolation
from engine import Stepper, StepperState, Recorder

from conftest import build_graph


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
def test_start_loads_initial_state(triangle):
    stepper = Stepper()
    stepper.start(PrimSnapshot(triangle, "A"))

    assert stepper.state is StepperState.PAUSED
    assert stepper.current_idx == 0
    assert stepper.current_step.phase is Phase.INITIALIZED


def test_next_prev_and_finish(triangle):
    seen = []
    stepper = Stepper(on_step=seen.append)
    stepper.start(PrimSnapshot(triangle, "A"))

    assert stepper.next_step()
    assert stepper.next_step()
    assert stepper.current_step.phase is Phase.COMPLETE
    # snapshot is over: no further step() is issued
    assert not stepper.next_step()
    assert stepper.is_finished

    assert stepper.prev_step()
    assert stepper.current_step.current_node == "B"
    assert [s.step_number for s in seen] == [0, 1, 2, 1]


def test_rewind_does_not_touch_snapshot(triangle):
    snap = PrimSnapshot(triangle, "A")
    stepper = Stepper()
    stepper.start(snap)
    stepper.jump_to_end()
    stepper.rewind()

    assert stepper.current_idx == 0
    assert snap.phase is Phase.COMPLETE
    assert not stepper.prev_step()


def test_goto_steps_forward_on_demand(classic):
    snap = PrimSnapshot(classic, "A")
    stepper = Stepper()
    stepper.start(snap)

    assert stepper.goto_step(3)
    assert snap.steps_taken == 3
    assert not stepper.goto_step(99)
    assert snap.is_over()


def test_start_on_finished_snapshot():
    stepper = Stepper()
    stepper.start(PrimSnapshot(build_graph("A", []), "A"))
    assert stepper.is_finished
    assert not stepper.next_step()


def test_reset():
    stepper = Stepper()
    stepper.reset()
    assert stepper.state is StepperState.IDLE
    assert stepper.current_step is None
    assert not stepper.next_step()


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
def test_recorder_metrics(classic):
    rec = Recorder()
    rec.start("prim", Demo(classic, "A"))
    metrics = rec.run_to_completion()

    assert metrics.outcome == "complete"
    assert metrics.spans_graph
    assert metrics.total_weight == 39
    assert metrics.tree_edges == 6
    assert metrics.nodes_in_tree == 7
    assert metrics.total_steps == 7
    assert rec.get_metrics() is metrics


def test_recorder_stuck_run(two_components):
    rec = Recorder()
    rec.start("prim", Demo(two_components, "C"))
    metrics = rec.run_to_completion()

    assert metrics.outcome == "stuck"
    assert not metrics.spans_graph
    assert metrics.nodes_in_tree == 2
    assert metrics.tree_edges == 1


def test_recorder_unknown_algorithm(triangle):
    with pytest.raises(ValueError, match="Unknown algorithm"):
        Recorder().start("kruskal", Demo(triangle, "A"))


def test_recorder_propagates_construction_errors():
    g = build_graph("AB", [])
    g.create_edge("A", "B", 1)
    rec = Recorder()
    with pytest.raises(UndirectedGraphViolation):
        rec.start("prim", Demo(g, "A"))
    assert rec.stepper is None


def test_run_before_start():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_export(triangle_demo):
    rec = Recorder()
    rec.start("prim", triangle_demo)
    rec.run_to_completion()
    data = rec.export()

    assert data["algo_key"] == "prim"
    assert data["demo"]["start"] == "A"
    assert len(data["steps"]) == 3
    assert data["steps"][-1]["is_final"]
    assert data["metrics"]["total_weight"] == 3
