#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# How the L1 penalty achieves sparsity: the minimizer of (x-2)^2 + lam*|x|
# slides towards 0 as lam grows and sticks there once lam >= 4

#%%
import sys
sys.path.append('..')
import numpy as np
import matplotlib.pyplot as plt
from algs.golden import minimize
from obj.obj_funcs import l1penalized

#%%
lams = np.linspace(0, 5, 51)
minimizers = [minimize(l1penalized(lam), -6, 8).x for lam in lams]

plt.plot(lams, minimizers, color='salmon', label='Penalized minimizer')
plt.axhline(2.0, color='grey', label='LS minimizer')
plt.xlabel(r'$\lambda$')
plt.legend()
plt.show()
