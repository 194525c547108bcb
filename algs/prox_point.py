# Proximal point (majorize-minimize) iteration: u_{k+1} = prox_{rho f}(u_k)

from algs import params
from algs.prox import prox, check_rho
from algs.golden import check_interval
from algs.optAlg import OptAlg


class ProxPoint(OptAlg):
    def __init__(self, objective, rho=1.0, bounds=params.DEFAULT_BOUNDS, tol=params.STEP_TOL,
                 search_tol=params.TOL, search_iter=params.MAX_ITER, **kwargs):
        super(ProxPoint, self).__init__(objective, **kwargs)

        self.rho         = check_rho(rho)
        self.lo, self.hi = check_interval(*bounds)
        self.tol         = tol
        self.search_tol  = search_tol
        self.search_iter = search_iter
        self.x_step      = float('inf')

        self.update_name()

        self.cur_x = self.x0
        self.update_params()

    def step(self):

        super(ProxPoint, self).step()

        new_x = prox(self.cur_x, self.rho, self.objective, self.lo, self.hi,
                     tol=self.search_tol, max_iter=self.search_iter)
        self.x_step = abs(new_x - self.cur_x)
        self.cur_x = new_x
        self.cur_iter += 1

        self.update_params()

    def stop_cond(self):
        return self.x_step <= self.tol

    def update_name(self):
        self.name = 'ProxPoint'
        self.name += r' ($\rho={}$)'.format(self.rho)
