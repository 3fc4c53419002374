##############################
# qilp top-level definitions #
##############################

import qilp
from qilp import board
import logging
import numpy as np
import os
import shlex

__all__ = ['InvalidBoardSize', 'SolverInfeasible', 'SolverError',
           'Constraint', 'Model', 'validate_board_size', 'queens_model']

logger = logging.getLogger(__name__)


class InvalidBoardSize(Exception):
    'A board is too small (or not a size at all) to be modeled.'

    def __init__(self, n):
        self.n = n
        if isinstance(n, int) and not isinstance(n, bool):
            msg = 'A %d x %d board cannot be modeled; n must exceed 3' % (n, n)
        else:
            msg = 'Board size %r is not an integer' % (n,)
        super().__init__(msg)


class SolverInfeasible(Exception):
    'The solver found no assignment satisfying the model.'

    def __init__(self, n):
        self.n = n
        msg = ('The solver reports the %d-queens model as infeasible, which '
               'indicates a malformed constraint set' % n)
        super().__init__(msg)


class SolverError(Exception):
    'The solver failed to produce an answer.'


class Constraint(object):
    'Representation of a linear constraint (coeffs . x <relation> rhs).'

    relations = ('==', '<=')

    def __init__(self, coeffs, relation, rhs, name=''):
        if relation not in self.relations:
            raise ValueError('Unknown constraint relation "%s"' % relation)
        self.coeffs = np.asarray(coeffs, dtype=float)  # Dense, one per variable
        self.relation = relation
        self.rhs = float(rhs)
        self.name = name

    def support(self):
        'Return the indices of the variables that appear in the constraint.'
        return [int(i) for i in np.flatnonzero(self.coeffs)]

    def satisfied(self, values):
        'Return True if a vector of variable values satisfies the constraint.'
        lhs = float(np.dot(self.coeffs, values))
        if self.relation == '==':
            return bool(np.isclose(lhs, self.rhs))
        return lhs <= self.rhs + 1e-9

    def key(self):
        "Return a hashable value identifying the constraint's content."
        return (self.coeffs.tobytes(), self.relation, self.rhs)

    def __str__(self):
        'Return a constraint as a string.'
        terms = ' + '.join('x%d' % i for i in self.support())
        msg = '%s %s %g' % (terms, self.relation, self.rhs)
        if self.name:
            msg = '%s: %s' % (self.name, msg)
        return msg


class Model(object):
    'A 0-1 integer linear program over the cells of an n x n board.'

    def __init__(self, n):
        'Instantiate a model with an all-ones, maximized objective.'
        self.n = n
        self.num_vars = n*n
        self.objective = np.ones(self.num_vars)  # Every x_i,j counts once
        self.maximize = True
        self.binary = list(range(self.num_vars))  # All variables are 0-1
        self._constraints = []

    def add_constraint(self, constraint):
        'Append a constraint, checking that it spans every variable.'
        if len(constraint.coeffs) != self.num_vars:
            raise ValueError('Constraint has %d coefficients for %d '
                             'variable(s)' %
                             (len(constraint.coeffs), self.num_vars))
        self._constraints.append(constraint)

    def add_matrix(self, matrix, relation, rhs, name):
        'Append one constraint per row of a coefficient matrix.'
        for i, row in enumerate(matrix):
            self.add_constraint(Constraint(row, relation, rhs,
                                           '%s[%d]' % (name, i)))

    def constraints(self):
        'Return the list of constraints in the order they were added.'
        return list(self._constraints)

    def remove_duplicates(self):
        '''Drop every constraint identical to an earlier one.  Return the
        number of constraints dropped.'''
        seen = set()
        kept = []
        for c in self._constraints:
            if c.key() not in seen:
                seen.add(c.key())
                kept.append(c)
        dropped = len(self._constraints) - len(kept)
        self._constraints = kept
        return dropped

    def matrices(self, relation):
        '''Return the coefficient matrix and right-hand-side vector of every
        constraint with the given relation.'''
        cs = [c for c in self._constraints if c.relation == relation]
        if len(cs) == 0:
            return np.zeros((0, self.num_vars)), np.zeros(0)
        return (np.vstack([c.coeffs for c in cs]),
                np.array([c.rhs for c in cs]))

    def __str__(self):
        'Return a model as a single string.'
        sense = 'maximize' if self.maximize else 'minimize'
        cstr = ', '.join([str(c) for c in self._constraints])
        return '%s sum of %d binary variable(s) subject to {%s}' % \
            (sense, self.num_vars, cstr)

    def solve(self, solver=None, *args, **kwargs):
        '''Solve the model and return the solver's result verbatim.  Raise
        SolverInfeasible if the solver finds no assignment.'''
        # Parse key=value pairs in the QILP_PARAMS environment variable.
        all_kwargs = {}
        var_params = os.getenv('QILP_PARAMS')
        if var_params is not None:
            toks = shlex.split(var_params)
            for t in toks:
                try:
                    # Parse "key=value" into a key and a value.
                    eq = t.index('=')
                    k, v = t[:eq], t[eq+1:]

                    # Attempt to convert value to a number.
                    try:
                        v = int(v)
                    except ValueError:
                        try:
                            v = float(v)
                        except ValueError:
                            pass
                except ValueError:
                    k, v = t, True
                all_kwargs[k] = v

        # Invoke the solver.
        all_kwargs.update(**kwargs)
        solve_func = qilp.solve
        if solver is not None:
            solve_func = qilp._name_to_solver(solver)
        logger.info('Solving a %d-queens model with %d constraint(s)',
                    self.n, len(self._constraints))
        result = solve_func(self, *args, **all_kwargs)
        if result is None:
            raise SolverInfeasible(self.n)
        return result

    class Validation(object):
        'Encapsulate the status of a validation check.'

        def __init__(self):
            self.passed = []
            self.failed = []

    def validation(self, values):
        '''Return a Validation object that partitions constraints based on
        their pass/fail status.'''
        result = self.Validation()
        for c in self._constraints:
            if c.satisfied(values):
                result.passed.append(c)
            else:
                result.failed.append(c)
        return result

    def valid(self, values):
        'Return True if all constraints are satisfied, False otherwise.'
        return len(self.validation(values).failed) == 0


def validate_board_size(n):
    'Raise InvalidBoardSize unless n is an integer greater than 3.'
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool):
        raise InvalidBoardSize(n)
    if n <= 3:
        raise InvalidBoardSize(int(n))
    return int(n)


def queens_model(n, unique=False):
    '''Build the n-queens model: one queen per row, one per column, and at
    most one per diagonal.  With unique=True, constraints identical to an
    earlier one (the main diagonal and anti-diagonal, each produced by two
    sweeps) are dropped.'''
    n = validate_board_size(n)
    model = Model(n)
    model.add_matrix(board.row_constraints_matrix(n), '==', 1, 'row')
    model.add_matrix(board.column_constraints_matrix(n), '==', 1, 'col')
    for name, sweep in board.DIAGONAL_SWEEPS:
        model.add_matrix(sweep(n), '<=', 1, name)
    if unique:
        model.remove_duplicates()
    logger.debug('Built a %d-queens model with %d variable(s) and %d '
                 'constraint(s)', n, model.num_vars, len(model.constraints()))
    return model
