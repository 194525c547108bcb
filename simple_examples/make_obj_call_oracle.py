#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Defines a scalar objective and evaluates it

import sys
sys.path.append('..')
import torch
from obj.objective import Objective

# f(x) = |x| + x^2
def simple1D(x):
    return torch.abs(x) + x**2

Simple1D = Objective(simple1D)
out = Simple1D.call_oracle(-1.5)

print(out)
# 3.75
