import numpy as np
import pytest

import qilp
from qilp import board


def placement(cols):
    'Turn a list of 1-indexed queen columns into a flat 0/1 vector.'
    n = len(cols)
    values = np.zeros(n*n)
    for r, c in enumerate(cols):
        values[board.index(n, r, c - 1)] = 1
    return values


@pytest.mark.parametrize("n", [-1, 0, 1, 2, 3, 4.0, "8", None, True])
def test_invalid_board_sizes(n):
    with pytest.raises(qilp.InvalidBoardSize):
        qilp.queens_model(n)


def test_model_layout():
    model = qilp.queens_model(4)
    cs = model.constraints()
    assert len(cs) == 2*4 + 4*4
    assert [c.relation for c in cs] == ['==']*8 + ['<=']*16
    assert all(c.rhs == 1 for c in cs)
    assert cs[0].name == 'row[0]'
    assert cs[4].name == 'col[0]'
    assert cs[-1].name == 'diag/col[3]'
    assert model.objective.tolist() == [1]*16
    assert model.binary == list(range(16))
    assert model.maximize
    a_eq, b_eq = model.matrices('==')
    assert a_eq.shape == (8, 16)
    assert b_eq.tolist() == [1]*8


def test_unique_drops_only_duplicates():
    model = qilp.queens_model(6, unique=True)
    cs = model.constraints()
    assert len(cs) == 2*6 + 4*6 - 2
    diags = {frozenset(c.support()) for c in cs if c.relation == '<='}
    full = {frozenset(c.support())
            for c in qilp.queens_model(6).constraints()
            if c.relation == '<='}
    assert diags == full


def test_remove_duplicates():
    model = qilp.queens_model(5)
    before = [c.name for c in model.constraints()]
    assert model.remove_duplicates() == 2
    after = [c.name for c in model.constraints()]
    assert after == [name for name in before
                     if name not in ('diag\\col[0]', 'diag/col[0]')]
    assert model.remove_duplicates() == 0


def test_known_eight_queens_solution():
    model = qilp.queens_model(8)
    assert model.valid(placement([1, 5, 8, 6, 3, 7, 2, 4]))


def test_validation_reports_failures():
    model = qilp.queens_model(4)
    check = model.validation(placement([1, 2, 3, 4]))
    names = {c.name for c in check.failed}
    assert names == {'diag\\row[0]', 'diag\\col[0]'}
    assert len(check.passed) == len(model.constraints()) - 2
    assert not model.valid(np.zeros(16))


def test_constraint_checks():
    with pytest.raises(ValueError):
        qilp.Constraint([1, 1], '>=', 1)
    model = qilp.Model(4)
    with pytest.raises(ValueError):
        model.add_constraint(qilp.Constraint([1, 1], '==', 1))
    c = qilp.Constraint([0, 1, 1, 0], '<=', 1, 'pair')
    assert c.support() == [1, 2]
    assert str(c) == 'pair: x1 + x2 <= 1'
    assert c.satisfied([1, 1, 0, 0])
    assert not c.satisfied([0, 1, 1, 0])


def test_solve_passes_parameters(monkeypatch):
    seen = {}

    def fake_solve(model, **kwargs):
        seen.update(kwargs)
        return 'answer'

    monkeypatch.setattr(qilp, 'solve', fake_solve)
    monkeypatch.setenv('QILP_PARAMS', 'time_limit=2.5 threads=3 mode=fast '
                                      'quiet')
    model = qilp.queens_model(4)
    assert model.solve(threads=1) == 'answer'
    assert seen == {'time_limit': 2.5, 'threads': 1, 'mode': 'fast',
                    'quiet': True}


def test_solve_raises_when_infeasible(monkeypatch):
    monkeypatch.setattr(qilp, 'solve', lambda model: None)
    monkeypatch.delenv('QILP_PARAMS', raising=False)
    with pytest.raises(qilp.SolverInfeasible):
        qilp.queens_model(5).solve()


def test_unknown_solver():
    with pytest.raises(ValueError):
        qilp.queens_model(4).solve(solver='simplex')


if __name__ == "__main__":
    pytest.main(["-v", __file__])
