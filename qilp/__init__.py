# Load the core qilp functionality.
from qilp.core import *
import logging
import os

logger = logging.getLogger(__name__)


def _name_to_solver(name):
    '''Map a solver name to an appropriate solve function.  Raise a ValueError
    if the name is not recognized.'''
    if name == 'z3':
        import qilp.solver.z3
        return qilp.solver.z3.solve
    elif name == 'highs':
        import qilp.solver.highs
        return qilp.solver.highs.solve
    elif name == 'exhaustive':
        import qilp.solver.exhaustive
        return qilp.solver.exhaustive.solve
    else:
        raise ValueError('"%s" is not a recognized qilp solver' % name)


# Select a solver based on the setting of the QILP_SOLVER environment
# variable.  The solver module is imported on first use.
_solver_name = os.getenv('QILP_SOLVER')
if _solver_name is None:
    _solver_name = 'z3'


def solve(model, *args, **kwargs):
    'Solve a model with the default solver.'
    logger.debug('Using the %s solver', _solver_name)
    return _name_to_solver(_solver_name)(model, *args, **kwargs)


def solver_name():
    'Return the name of the solver being used.'
    return _solver_name
