import pytest

import qilp
from qilp import board


@pytest.fixture()
def infeasible_model():
    'One queen per row, yet only one queen on the whole board.'
    n = 4
    model = qilp.Model(n)
    model.add_matrix(board.row_constraints_matrix(n), '==', 1, 'row')
    model.add_constraint(qilp.Constraint([1]*(n*n), '==', 1, 'total'))
    return model


def check_placement(model, result):
    n = model.n
    assert len(result.values) == n*n
    assert model.valid(result.values)
    b = result.board()
    assert b.sum() == n
    assert board.attacks(b) == []
    assert sorted(result.queens()) == list(range(n))


def test_exhaustive_four_queens():
    model = qilp.queens_model(4)
    result = model.solve(solver='exhaustive')
    check_placement(model, result)
    assert result.queens() in ([1, 3, 0, 2], [2, 0, 3, 1])
    assert result.objective == 4


def test_exhaustive_variable_limit():
    with pytest.raises(qilp.SolverError):
        qilp.queens_model(5).solve(solver='exhaustive')


def test_exhaustive_infeasible(infeasible_model):
    with pytest.raises(qilp.SolverInfeasible):
        infeasible_model.solve(solver='exhaustive')


@pytest.mark.parametrize("n", [4, 8])
def test_z3(n):
    pytest.importorskip("z3")
    model = qilp.queens_model(n)
    result = model.solve(solver='z3')
    check_placement(model, result)
    assert result.objective == n
    assert 'queens' in str(result)


def test_z3_infeasible(infeasible_model):
    pytest.importorskip("z3")
    from qilp.solver import z3
    assert z3.solve(infeasible_model) is None


@pytest.mark.parametrize("n", [8, 12])
def test_highs(n):
    pytest.importorskip("highspy")
    model = qilp.queens_model(n, unique=True)
    result = model.solve(solver='highs', time_limit=60)
    check_placement(model, result)
    assert result.model_status == 'Optimal'


def test_exhaustive_time_limit():
    model = qilp.queens_model(4)
    check_placement(model, model.solve(solver='exhaustive', time_limit=60))
    with pytest.raises(qilp.SolverError):
        model.solve(solver='exhaustive', time_limit=1e-9)


def test_z3_gives_up(monkeypatch):
    z3 = pytest.importorskip("z3")
    monkeypatch.setattr(z3.Optimize, 'check', lambda self, *args: z3.unknown)
    monkeypatch.setattr(z3.Optimize, 'reason_unknown',
                        lambda self: 'timeout')
    with pytest.raises(qilp.SolverError, match='timeout'):
        qilp.queens_model(6).solve(solver='z3', time_limit=1e-6)


def test_highs_gives_up(monkeypatch):
    highspy = pytest.importorskip("highspy")
    monkeypatch.setattr(highspy.Highs, 'getModelStatus',
                        lambda self: highspy.HighsModelStatus.kTimeLimit)
    with pytest.raises(qilp.SolverError):
        qilp.queens_model(6).solve(solver='highs', time_limit=1e-6)


if __name__ == "__main__":
    pytest.main(["-v", __file__])
