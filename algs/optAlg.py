#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import math
import numpy as np


class OptAlg:
    def __init__(self, objective, max_iter = 1000, x0 = None, verbose=True):
        assert x0 is not None

        x0 = float(x0)
        if not math.isfinite(x0):
            raise ValueError('Initial point must be finite, got {}'.format(x0))

        self.max_iter   = max_iter
        self.objective  = objective

        self.x0         = x0

        self.cur_iter  = 0
        self.cur_x     = None
        self.cur_fx    = None
        self.path_x      = None
        self.path_fx     = None

        self.verbose = verbose

        self.opt_x     = None
        self.opt_fx    = None
        self.total_iter = None

        self.name = None

    def optimize(self):

        # Run the optimization algorithm until a stopping condition is hit
        while self.cur_iter < self.max_iter:
            self.step()
            if self.stop_cond():
                break

        self.opt_x = self.path_x[-1]
        self.opt_fx = self.path_fx[-1]
        self.total_iter = self.cur_iter

        if self.verbose:
            print('Optimal Value: ' + str(self.opt_fx), flush=True)
            print('Optimal Point: ' + str(self.opt_x), flush=True)

        return self.opt_x

    def step(self):
        if self.verbose:
            print('iter: ' + str(self.cur_iter) + ', obj: ' + str(self.cur_fx), flush=True)

    def stop_cond(self):
        return False

    def update_params(self):
        # Record the current iterate on the path
        self.cur_fx = float(self.objective(self.cur_x))

        if self.path_x is not None:
            self.path_x = np.append(self.path_x, self.cur_x)
            self.path_fx = np.append(self.path_fx, self.cur_fx)
        else:
            self.path_x = np.array([self.cur_x])
            self.path_fx = np.array([self.cur_fx])
