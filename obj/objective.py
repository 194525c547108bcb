#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import torch


class Objective:
    """Scalar objective f: R -> R, usable anywhere a plain callable is.

    ``obj_func`` takes a 0-d double tensor and returns a 0-d tensor. Optional
    extras describe what is known about f in closed form:

    - ``cvx_func(var)``: the same function as a cvxpy expression (convex f only)
    - ``prox_func(u, rho)``: the unconstrained proximal operator
    - ``argmin``: the unconstrained minimizer

    An Objective keeps no state between evaluations.
    """

    def __init__(self, obj_func, name=None, cvx_func=None, prox_func=None, argmin=None):
        self.obj_func  = obj_func
        self.name      = name if name is not None else getattr(obj_func, '__name__', 'objective')
        self.cvx_func  = cvx_func
        self.prox_func = prox_func
        self.argmin    = argmin

    def __call__(self, x):
        return self.call_oracle(x)

    def call_oracle(self, x):

        if type(x) != torch.Tensor:
            try:
                x = torch.tensor(float(x), dtype=torch.double)
            except (TypeError, ValueError):
                raise TypeError('Objective argument must be a real scalar, got {!r}'.format(x))

        if x.dim() != 0:
            raise ValueError('Objective argument must be a scalar, got shape {}'.format(tuple(x.shape)))

        fx = self.obj_func(x)

        if fx.dim() != 0:
            raise ValueError('Objective function must output scalar value')

        return fx.item()

    @property
    def is_convex(self):
        return self.cvx_func is not None

    def __repr__(self):
        return 'Objective({})'.format(self.name)
