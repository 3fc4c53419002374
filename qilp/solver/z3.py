######################################
# Use the Z3 Theorem Prover to solve #
# a qilp model classically           #
######################################

import datetime
import logging
import z3
from qilp import solver
from qilp.core import SolverError

logger = logging.getLogger(__name__)


class Z3Result(solver.Result):
    'Add Z3-specific fields to a Result.'

    def __init__(self, n=None, values=None):
        super().__init__(n, values)
        self.statistics = None


def solve(model, time_limit=None):
    '''Solve a model by expressing each constraint directly in Z3.  Return
    None if the model is infeasible.'''
    # Constrain all variables to be either 0 or 1.
    s = z3.Optimize()
    if time_limit is not None:
        s.set('timeout', int(time_limit*1000))
    xs = [z3.Int('x%d' % i) for i in range(model.num_vars)]
    for i in model.binary:
        s.add(xs[i] >= 0, xs[i] <= 1)

    # Express each constraint with Z3.  Coefficients are all 0 or 1, so
    # only the participating variables need to be summed.
    for c in model.constraints():
        terms = [int(c.coeffs[i])*xs[i] for i in c.support()]
        if c.relation == '==':
            s.add(z3.Sum(terms) == int(c.rhs))
        else:
            s.add(z3.Sum(terms) <= int(c.rhs))

    # Optimize the objective function.
    obj = z3.Sum([int(w)*x for w, x in zip(model.objective, xs)])
    if model.maximize:
        s.maximize(obj)
    else:
        s.minimize(obj)

    # Solve the system of constraints, and return the value of each
    # variable in index order.
    stime1 = datetime.datetime.now()
    status = s.check()
    stime2 = datetime.datetime.now()
    logger.debug('Z3 returned %s in %s', status, stime2 - stime1)
    if status == z3.unsat:
        return None
    if status != z3.sat:
        raise SolverError('Z3 could not solve the model: %s' %
                          s.reason_unknown())
    m = s.model()
    ret = Z3Result(model.n)
    ret.values = [float(m.eval(x, model_completion=True).as_long())
                  for x in xs]
    ret.objective = sum(w*v for w, v in zip(model.objective, ret.values))
    ret.statistics = s.statistics()
    ret.solver_times = (stime1, stime2)
    return ret
