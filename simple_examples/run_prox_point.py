#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Runs the proximal point iteration on the wiggly objective starting at u = 2.5

#%%
import sys
sys.path.append('..')
from obj.obj_funcs import Wiggly
from algs.prox_point import ProxPoint

#%%
optAlg = ProxPoint(Wiggly, rho=1.0, bounds=(-5, 5), x0=2.5, max_iter=20)
optAlg.optimize()

print(optAlg.path_fx)
