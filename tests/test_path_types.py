from bgengine.path_types import Path, PathQueryResult, PathQueryStatus, PathStep
from bgengine.world_types import GridCoord


def test_path_step_equality():
    assert PathStep(GridCoord(1, 2)) == PathStep(GridCoord(1, 2))
    assert PathStep(GridCoord(1, 2)) != PathStep(GridCoord(2, 1))
    assert PathStep().coord == GridCoord(0, 0)


def test_path_empty_and_count():
    path = Path()
    assert path.is_empty() is True
    assert path.step_count() == 0
    path.steps.extend([PathStep(GridCoord(0, 0)), PathStep(GridCoord(1, 0))])
    assert path.is_empty() is False
    assert path.step_count() == 2


def test_path_clear():
    path = Path([PathStep(GridCoord(0, 0))])
    path.clear()
    assert path.is_empty() is True


def test_paths_do_not_share_steps():
    a = Path()
    b = Path()
    a.steps.append(PathStep())
    assert b.step_count() == 0


def test_result_defaults_to_no_path():
    result = PathQueryResult()
    assert result.status is PathQueryStatus.NO_PATH
    assert result.succeeded() is False
    assert result.path.is_empty() is True


def test_result_succeeded_and_clear():
    result = PathQueryResult(
        PathQueryStatus.SUCCESS, Path([PathStep(GridCoord(3, 3))])
    )
    assert result.succeeded() is True
    result.clear()
    assert result.status is PathQueryStatus.NO_PATH
    assert result.path.step_count() == 0


def test_status_values_follow_declaration_order():
    assert PathQueryStatus(0) is PathQueryStatus.SUCCESS
    assert PathQueryStatus(5) is PathQueryStatus.NO_PATH
    assert [s.name for s in PathQueryStatus] == [
        "SUCCESS",
        "START_OUT_OF_BOUNDS",
        "GOAL_OUT_OF_BOUNDS",
        "START_BLOCKED",
        "GOAL_BLOCKED",
        "NO_PATH",
    ]