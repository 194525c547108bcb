import matplotlib
matplotlib.use('Agg')

import pytest
import matplotlib.pyplot as plt

from obj.obj_funcs import OBJECTIVES


@pytest.fixture(params=sorted(OBJECTIVES))
def named_objective(request):
    return OBJECTIVES[request.param]


@pytest.fixture()
def close_figures():
    yield
    plt.close('all')
