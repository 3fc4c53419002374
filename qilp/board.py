##########################################
# Constraint matrices for the n-queens   #
# puzzle, derived by index arithmetic on #
# the flattened n*n board                #
##########################################

import numpy as np


def index(n, row, col):
    'Map a board cell to its flat (row-major) variable index.'
    return row*n + col


def cell(n, idx):
    'Map a flat variable index back to its (row, column) board cell.'
    return divmod(idx, n)


def row_constraints_matrix(n):
    '''Return an n x n^2 matrix whose row r selects every cell of board row
    r, i.e., the sum from j=1 to n of x_r,j.'''
    matrix = np.zeros((n, n*n))
    for row in range(n):
        for col in range(n):
            matrix[row, index(n, row, col)] = 1
    return matrix


def column_constraints_matrix(n):
    '''Return an n x n^2 matrix whose row c selects every cell of board
    column c, i.e., the sum from i=1 to n of x_i,c.'''
    matrix = np.zeros((n, n*n))
    for col in range(n):
        for flat in range(col, n*n, n):
            matrix[col, flat] = 1
    return matrix


def _sweep(n, starts, stride, limits):
    'Walk each diagonal from its start by a fixed stride up to its limit.'
    matrix = np.zeros((n, n*n))
    for k in range(n):
        for flat in range(starts(k), limits(k), stride):
            matrix[k, flat] = 1
    return matrix


def forward_row_sweep(n):
    '''"\\" diagonals that begin on the first row:  x_1,j + the sum of
    x_1+m,j+m for each starting column j.'''
    return _sweep(n, lambda k: k, n + 1, lambda k: n*n - k*n)


def forward_column_sweep(n):
    '''"\\" diagonals that begin on the first column:  x_i,1 + the sum of
    x_i+m,1+m for each starting row i.'''
    return _sweep(n, lambda k: k*n, n + 1, lambda k: n*n)


def backward_row_sweep(n):
    '''"/" diagonals that begin on the first row:  x_1,j + the sum of
    x_1+m,j-m for each starting column j.'''
    return _sweep(n, lambda k: k, n - 1, lambda k: k*n + 1)


def backward_column_sweep(n):
    '''"/" diagonals that begin on the last column:  x_i,n + the sum of
    x_i+m,n-m for each starting row i.'''
    matrix = _sweep(n, lambda k: (k + 1)*n - 1, n - 1, lambda k: n*n)

    # The walk down from the top-right corner steps once past the bottom-left
    # corner and lands on the bottom-right one.
    matrix[0, n*n - 1] = 0
    return matrix


# Sweeps in the order their constraints are added to a model.
DIAGONAL_SWEEPS = [
    ('diag\\row', forward_row_sweep),
    ('diag\\col', forward_column_sweep),
    ('diag/row', backward_row_sweep),
    ('diag/col', backward_column_sweep),
]


def diagonal_constraints_matrix(n):
    'Return all four diagonal sweeps stacked into a single 4n x n^2 matrix.'
    return np.vstack([sweep(n) for _, sweep in DIAGONAL_SWEEPS])


def format_constraints_matrix(matrix):
    'Render a constraint matrix as rows of space-separated integers.'
    return '\n'.join(' '.join('%d' % v for v in row) for row in matrix)


def decode(values, n):
    'Round a flat solution vector and reshape it into an n x n 0/1 board.'
    return np.rint(np.asarray(values, dtype=float)).astype(int).reshape(n, n)


def queen_columns(board):
    'Return the (0-indexed) column of the queen in each row of a board.'
    return [int(np.argmax(row)) for row in board]


def attacks(board):
    '''Return a list of pairs of queen cells that attack each other.  An
    empty list means the placement is valid.'''
    queens = [tuple(int(v) for v in rc) for rc in np.argwhere(board == 1)]
    pairs = []
    for i, (r1, c1) in enumerate(queens):
        for r2, c2 in queens[i + 1:]:
            if r1 == r2 or c1 == c2 or abs(r1 - r2) == abs(c1 - c2):
                pairs.append(((r1, c1), (r2, c2)))
    return pairs
