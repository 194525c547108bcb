#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import warnings
import itertools
import numpy as np
import seaborn as sns
import matplotlib.pyplot as plt

from algs import params
from algs.prox import prox, prox_map, envelope, check_rho
from algs.golden import check_interval
from algs.prox_point import ProxPoint


# Draws a scalar objective next to its envelope and proximal operator
class ProxPlot:
    def __init__(self, objective, rho=1.0, bounds=params.PLOT_BOUNDS, search_bounds=params.DEFAULT_BOUNDS,
                 resolution=250):

        self.objective  = objective
        self.rho        = check_rho(rho)
        self.x_min, self.x_max = check_interval(*bounds)
        self.lo, self.hi       = check_interval(*search_bounds)
        self.resolution = resolution

        sns.set_style('white')

    def grid(self):
        return np.linspace(self.x_min, self.x_max, self.resolution)

    def plotEnvelope(self, u, ax=None, plot_now=False):
        if ax is None:
            fig, ax = plt.subplots()

        xs = self.grid()
        fs = np.array([self.objective(x) for x in xs])
        hs = np.array([envelope(x, u, self.rho, self.objective) for x in xs])
        u1 = prox(u, self.rho, self.objective, self.lo, self.hi)

        ax.plot(xs, fs, label='f(x)')
        ax.plot(xs, hs, label='envelope')
        ax.scatter([u], [0.0], label=r'$u_0$')
        ax.scatter([u1], [0.0], label=r'$u_1 = $prox$(u_0)$')
        ax.set_xlim((self.x_min, self.x_max))
        ax.set_xlabel('x')
        ax.legend()

        if plot_now:
            plt.show()
        return ax

    def plotProx(self, ax=None, plot_now=False):
        if ax is None:
            fig, ax = plt.subplots()

        us = self.grid()
        fs = np.array([self.objective(u) for u in us])
        ps = prox_map(us, self.rho, self.objective, self.lo, self.hi)

        ax.plot(us, fs, label='f')
        ax.plot(us, ps, label='prox(f)')
        ax.set_xlim((self.x_min, self.x_max))
        ax.set_xlabel('u')
        ax.legend()

        if plot_now:
            plt.show()
        return ax

    # Trajectories of finished proximal point runs drawn over f
    def plotPath(self, opt_algs, ax=None, plot_now=False):
        opt_algs = self.do_check(opt_algs)
        if ax is None:
            fig, ax = plt.subplots()

        xs = self.grid()
        ax.plot(xs, [self.objective(x) for x in xs], color='grey', label='f(x)')

        palette = itertools.cycle(sns.color_palette())
        markers = itertools.cycle(('o', 's', 'D', '^', 'v', '*'))
        for alg in opt_algs:
            ax.plot(alg.path_x, alg.path_fx, color=next(palette), marker=next(markers),
                    alpha=.6, label=alg.name)

        ax.set_xlabel('x')
        ax.legend()

        if plot_now:
            plt.show()
        return ax

    # Objective value by iteration
    def plotValue(self, opt_algs, ax=None, plot_now=False):
        opt_algs = self.do_check(opt_algs)
        if ax is None:
            fig, ax = plt.subplots()

        palette = itertools.cycle(sns.color_palette())
        markers = itertools.cycle(('o', 's', 'D', '^', 'v', '*'))
        for alg in opt_algs:
            if len(alg.path_fx) < 2:
                warnings.warn('{} stopped before taking a step!'.format(alg.name))
            ax.plot(np.arange(len(alg.path_fx)), alg.path_fx, color=next(palette),
                    marker=next(markers), alpha=.4, label=alg.name)

        ax.set_xlabel('Iteration')
        ax.set_ylabel('f')

        if plot_now:
            plt.legend()
            plt.show()
        return ax

    # check that every algorithm ran on this objective and has finished
    def do_check(self, opt_algs):
        if type(opt_algs) is not list:
            opt_algs = [opt_algs]

        for alg in opt_algs:
            if not isinstance(alg, ProxPoint):
                raise ValueError('Expected ProxPoint runs, got {!r}'.format(alg))
            if alg.objective is not self.objective:
                raise ValueError('{} was run on a different objective'.format(alg.name))
            if alg.opt_x is None:
                raise ValueError('Need to call optimize() on {} first!'.format(alg.name))
        return opt_algs
