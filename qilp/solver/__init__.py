#########################################
# Define classes and functions that are #
# common across multiple solvers        #
#########################################

from qilp import board
import numpy as np


class Result():
    'Encapsulate solver results and related data.'

    def __init__(self, n=None, values=None):
        self.n = n
        self.values = values
        self.objective = None
        self.solver_times = None

    def board(self):
        'Return the solution as an n x n 0/1 board.'
        return board.decode(self.values, self.n)

    def queens(self):
        'Return the (0-indexed) column of the queen in each row.'
        return board.queen_columns(self.board())

    def _repr_dict(self):
        'Return a dictionary for use internally by __repr__.'
        ret = {}
        if self.n is not None:
            ret["board size"] = self.n
        if self.values is not None:
            ret["values"] = [int(v) for v in np.rint(self.values)]
        if self.objective is not None:
            ret["objective"] = self.objective
        if self.solver_times:
            ret["solver times"] = self.solver_times
        return ret

    def __repr__(self):
        ret = self._repr_dict()
        return 'qilp.solver.Result(%s)' % str(ret)

    def _str_dict(self):
        'Return a dictionary for use internally by __str__.'
        ret = {}
        if self.values is not None:
            ret["number of variables"] = len(self.values)
            ret["queens"] = self.queens()
        if self.objective is not None:
            ret["objective"] = self.objective
        if self.solver_times:
            ret["solver times"] = \
                (self.solver_times[0].strftime("%Y-%m-%d %H:%M:%S.%f"),
                 self.solver_times[1].strftime("%Y-%m-%d %H:%M:%S.%f"))
        return ret

    def __str__(self):
        ret = self._str_dict()
        return str(ret)
