#! /usr/bin/env python

###################################
# Solve the n-queens problem      #
# as a 0-1 integer linear program #
###################################

import qilp
import sys

# Read the number of queens from the command line.
if len(sys.argv) < 2:
    sys.exit('Usage: %s <#queens>' % sys.argv[0])
n = int(sys.argv[1])

# Build the row, column, and diagonal constraints and solve for all
# variables in the model.
model = qilp.queens_model(n)
result = model.solve()
print('Solved with %s: %s' % (qilp.solver_name(), result))
board = result.board()
for r in range(n):
    for c in range(n):
        if board[r][c]:
            print('* ', end='')
        else:
            print('- ', end='')
    print('')
