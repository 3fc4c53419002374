####################################
# Use HiGHS's branch-and-bound MIP #
# solver to solve a qilp model     #
####################################

import datetime
import logging
import highspy
import numpy as np
from qilp import solver
from qilp.core import SolverError

logger = logging.getLogger(__name__)


class HighsResult(solver.Result):
    'Add HiGHS-specific fields to a Result.'

    def __init__(self, n=None, values=None):
        super().__init__(n, values)
        self.model_status = None


def _add_rows(h, model):
    'Pass every constraint to HiGHS as a row of a compressed sparse matrix.'
    inf = highspy.kHighsInf
    cs = model.constraints()
    lower = np.array([c.rhs if c.relation == '==' else -inf for c in cs],
                     dtype=np.double)
    upper = np.array([c.rhs for c in cs], dtype=np.double)
    starts = []
    indices = []
    values = []
    for c in cs:
        starts.append(len(indices))
        for i in c.support():
            indices.append(i)
            values.append(c.coeffs[i])
    h.addRows(len(cs), lower, upper, len(indices),
              np.array(starts, dtype=np.int32),
              np.array(indices, dtype=np.int32),
              np.array(values, dtype=np.double))


def solve(model, time_limit=None, threads=None):
    '''Solve a model with the HiGHS MIP solver.  Return None if the model is
    infeasible.'''
    h = highspy.Highs()
    h.setOptionValue('output_flag', False)
    if time_limit is not None:
        h.setOptionValue('time_limit', float(time_limit))
    if threads is not None:
        h.setOptionValue('threads', int(threads))

    # Declare all variables binary: integer within [0, 1].
    nv = model.num_vars
    cols = np.arange(nv, dtype=np.int32)
    h.addVars(nv, np.zeros(nv), np.ones(nv))
    h.changeColsCost(nv, cols, np.asarray(model.objective, dtype=np.double))
    binary = np.array(model.binary, dtype=np.int32)
    h.changeColsIntegrality(len(binary), binary,
                            np.array([highspy.HighsVarType.kInteger] *
                                     len(binary)))
    if model.maximize:
        h.changeObjectiveSense(highspy.ObjSense.kMaximize)
    _add_rows(h, model)

    # Solve and map the model status onto the qilp conventions.
    stime1 = datetime.datetime.now()
    h.run()
    stime2 = datetime.datetime.now()
    status = h.getModelStatus()
    logger.debug('HiGHS returned %s in %s', h.modelStatusToString(status),
                 stime2 - stime1)
    if status == highspy.HighsModelStatus.kInfeasible:
        return None
    if status != highspy.HighsModelStatus.kOptimal:
        raise SolverError('HiGHS could not solve the model: %s' %
                          h.modelStatusToString(status))
    ret = HighsResult(model.n)
    ret.values = list(h.getSolution().col_value)
    ret.objective = h.getInfo().objective_function_value
    ret.model_status = h.modelStatusToString(status)
    ret.solver_times = (stime1, stime2)
    return ret
