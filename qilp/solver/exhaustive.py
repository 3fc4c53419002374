#######################################
# Solve a small qilp model by testing #
# every 0-1 assignment of its         #
# variables                           #
#######################################

import datetime
import itertools
import logging
import numpy as np
from qilp import solver
from qilp.core import SolverError

logger = logging.getLogger(__name__)

# 2^20 assignments is about the most we can test in one numpy pass.
MAX_VARIABLES = 20


def solve(model, max_variables=MAX_VARIABLES, time_limit=None):
    '''Return the feasible assignment with the best objective value, or None
    if no assignment satisfies every constraint.  Raise SolverError if the
    search takes longer than time_limit seconds.'''
    nv = model.num_vars
    if nv > max_variables:
        raise SolverError('Exhaustive search is limited to %d variables '
                          'but the model has %d' % (max_variables, nv))

    # One row per candidate assignment.
    stime1 = datetime.datetime.now()
    cands = np.array(list(itertools.product((0, 1), repeat=nv)),
                     dtype=np.int8)
    feasible = np.ones(len(cands), dtype=bool)
    a_eq, b_eq = model.matrices('==')
    if len(b_eq) > 0:
        feasible &= np.all(cands @ a_eq.T == b_eq, axis=1)
    a_le, b_le = model.matrices('<=')
    if len(b_le) > 0:
        feasible &= np.all(cands @ a_le.T <= b_le, axis=1)
    logger.debug('%d of %d assignment(s) are feasible',
                 int(feasible.sum()), len(cands))
    if not feasible.any():
        return None

    # Pick the best feasible assignment.
    objs = cands[feasible] @ model.objective
    best = int(np.argmax(objs) if model.maximize else np.argmin(objs))
    stime2 = datetime.datetime.now()
    if time_limit is not None and \
            (stime2 - stime1).total_seconds() > time_limit:
        raise SolverError('Exhaustive search exceeded its %g second time '
                          'limit' % time_limit)
    ret = solver.Result(model.n)
    ret.values = [float(v) for v in cands[feasible][best]]
    ret.objective = float(objs[best])
    ret.solver_times = (stime1, stime2)
    return ret
