################
# Install qilp #
################

import setuptools

long_description = ('qilp formulates the n-queens puzzle as a 0-1 integer '
                    'linear program, deriving every row, column, and '
                    'diagonal constraint by index arithmetic, and solves it '
                    'with Z3 or HiGHS.')

setuptools.setup(
    name='qilp',
    version='1.0.0',
    description='The n-queens puzzle as a 0-1 integer linear program',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Development Status :: 2 - Pre-Alpha',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'Intended Audience :: Developers'],
    keywords=[
        'linear programming',
        'integer programming',
        'optimization',
        'n-queens'],
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'z3-solver >= 4.8',
        'highspy >= 1.8',
    ],
    extras_require={
        'test': ['pytest'],
    },
    packages=setuptools.find_packages(exclude=['tests']),
    scripts=['bin/nqueens'])
