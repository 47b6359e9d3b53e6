"""Closure statistics of random catalyzed splice chemistries

The module is meant to be run from command line as

> python -m rafsim.examples.sweep --lengths 2 6 --runs 1000

see python -m rafsim.examples.sweep -h

for more information.

For every maximum polymer length and every catalysis probability on a
grid, the script samples a number of catalyzed reaction graphs with a
constant catalysis probability and a fixed food set (every polymer up
to --food-length), computes their maximal RAF sets, and records

  * P_Closure: the fraction of graphs that contain a nonempty RAF
  * Mean_Reactions: the mean number of reactions in the maximal RAF

Results are written as CSV rows, one row per length and probability.
Simulations are performed sequentially, and all trials draw from a
single random generator seeded with --seed.
"""
import sys
import csv
import logging

from collections import namedtuple

import numpy as np

import rafsim


class Stats(namedtuple('_Stats', ('length', 'probability', 'runs', 'sizes'))):
    """Closure statistics of one length/probability configuration

    sizes is an array holding the size of the maximal RAF of every run.
    """
    @property
    def closure(self):
        """Fraction of runs with a nonempty RAF"""
        return float(np.count_nonzero(self.sizes))/self.runs

    @property
    def mean(self):
        """Mean size of the maximal RAF"""
        return float(np.mean(self.sizes))

    def row(self):
        """CSV row for this configuration"""
        return [self.length, self.probability, self.closure, self.mean]


header = ['M_Polymer', 'P_Catalysis', 'P_Closure', 'Mean_Reactions']


def probabilities(pmin, pmax, pstep):
    """Grid of catalysis probabilities from pmin to pmax (inclusive)"""
    if pstep <= 0:
        raise ValueError("pstep must be positive.")
    count = int(np.floor((pmax-pmin)/pstep + 1e-9)) + 1
    return [pmin + i*pstep for i in range(max(count, 0))]


def run_configuration(scenario, probability, food, runs, rng):
    """Sample runs catalyzed graphs and collect their RAF sizes"""
    sizes = np.zeros(runs, dtype=int)
    for run in range(runs):
        sizes[run] = len(rafsim.generate(scenario, probability, food, rng=rng))
    return Stats(scenario.max_length, probability, runs, sizes)


def run_sweep(args):
    """Perform the sweep and yield Stats for every configuration"""
    rng = np.random.RandomState(args.seed)
    for length in range(args.lengths[0], args.lengths[1]+1):
        logging.info("m = %d", length)
        scenario = rafsim.build(args.alphabet, length)
        food = [p for p in scenario.polymers if len(p) <= args.food_length]
        for probability in probabilities(args.pmin, args.pmax, args.pstep):
            logging.info("p = %g", probability)
            yield run_configuration(scenario, probability, food, args.runs, rng)


def write_sweep(args, stream):
    """Write CSV results of the sweep to stream"""
    writer = csv.writer(stream, lineterminator='\n')
    writer.writerow(header)
    for stats in run_sweep(args):
        writer.writerow(stats.row())
        stream.flush()


def parse_args(argv=None):
    """Parse command line arguments"""
    import argparse

    parser = argparse.ArgumentParser(
        prog='rafsim.examples.sweep',
        description="Measure RAF closure frequencies of random catalyzed "
                    "splice chemistries.")
    parser.add_argument('--alphabet', default='AB',
                        help='monomer symbols (default: AB)')
    parser.add_argument('--lengths', nargs=2, type=int, metavar=('MIN', 'MAX'),
                        default=[2, 6],
                        help='range of maximum polymer lengths')
    parser.add_argument('--pmin', type=float, default=0.00001,
                        help='smallest catalysis probability')
    parser.add_argument('--pmax', type=float, default=0.15,
                        help='largest catalysis probability')
    parser.add_argument('--pstep', type=float, default=0.001,
                        help='catalysis probability increment')
    parser.add_argument('--runs', type=int, default=1000,
                        help='number of samples per configuration')
    parser.add_argument('--food-length', type=int, default=2,
                        help='polymers up to this length form the food set')
    parser.add_argument('--seed', type=int, default=None,
                        help='random seed')
    parser.add_argument('--output', default='',
                        help='CSV file name (default: stdout)')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='log progress (-v) or debug output (-vv)')
    args = parser.parse_args(argv)
    if args.lengths[0] <= 0 or args.lengths[0] > args.lengths[1]:
        parser.error("--lengths must be positive and increasing.")
    if args.runs <= 0:
        parser.error("--runs must be positive.")
    return args


def main(argv=None):
    args = parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level)
    if args.output:
        with open(args.output, 'w', newline='') as stream:
            write_sweep(args, stream)
    else:
        write_sweep(args, sys.stdout)


if __name__ == '__main__':
    main()
