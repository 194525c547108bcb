#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Plots f with its envelope at u, the prox map, and proximal point paths

#%%
import sys
sys.path.append('..')
import matplotlib.pyplot as plt
from obj.obj_funcs import get_objective
from algs.prox_point import ProxPoint
from vis.visualize import ProxPlot

#%%
f = get_objective(sys.argv[1] if len(sys.argv) > 1 else 'wiggly')
rho = 1.0
u = 0.0

opt_plot = ProxPlot(f, rho=rho, bounds=(-3, 3), search_bounds=(-5, 5))

fig, axs = plt.subplots(1, 3, figsize=(15, 4))
opt_plot.plotEnvelope(u, ax=axs[0])
opt_plot.plotProx(ax=axs[1])

#%% Compare step sizes
algs = []
for r in [0.5, 1.0, 2.0]:
    alg = ProxPoint(f, rho=r, bounds=(-5, 5), x0=2.5, max_iter=30, verbose=False)
    alg.optimize()
    algs.append(alg)

opt_plot.plotPath(algs, ax=axs[2])
plt.show()
