#!/usr/bin/env python3
# mohrs3d.py
# Principal stresses of a triaxial stress state by the cyclic Jacobi method.
# Input is the six independent entries of a symmetric 3x3 stress tensor.
# Only eigenvalues are computed; no principal directions are tracked.

import logging
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

MAX_ITER = 50
EPS = 1e-10


@dataclass(frozen=True)
class StressState3D:
    sigma_x: float
    sigma_y: float
    sigma_z: float
    tau_xy: float
    tau_yz: float
    tau_zx: float

    def as_tensor(self):
        return np.array([
            [self.sigma_x, self.tau_xy, self.tau_zx],
            [self.tau_xy,  self.sigma_y, self.tau_yz],
            [self.tau_zx,  self.tau_yz, self.sigma_z],
        ], dtype=float)

    @classmethod
    def from_tensor(cls, S):
        # lower and upper triangles are averaged
        S = np.asarray(S, dtype=float)
        if S.shape != (3, 3):
            raise ValueError(f"expected a 3x3 stress tensor, got shape {S.shape}")
        S = 0.5 * (S + S.T)
        return cls(
            sigma_x=float(S[0, 0]),
            sigma_y=float(S[1, 1]),
            sigma_z=float(S[2, 2]),
            tau_xy=float(S[0, 1]),
            tau_yz=float(S[1, 2]),
            tau_zx=float(S[2, 0]),
        )


@dataclass(frozen=True)
class PrincipalStresses3D:
    sigma1: float
    sigma2: float
    sigma3: float
    tau_max: float


@dataclass(frozen=True)
class JacobiResult:
    eigenvalues: tuple
    iterations: int
    converged: bool


# ---------- core helpers ----------
def jacobi_eigenvalues(matrix, max_iter=MAX_ITER, eps=EPS) -> JacobiResult:
    """
    Eigenvalues of a symmetric 3x3 matrix by classical Jacobi rotations.

    Each sweep picks the largest off-diagonal |a[p, q]| and rotates it to
    zero. Stops when that value drops below eps or after max_iter
    rotations; in the second case the diagonal is returned as a
    best-effort approximation with converged=False.

    The caller's matrix is never modified.
    """
    a = np.array(matrix, dtype=float)  # private working copy
    n = a.shape[0]
    converged = False
    iterations = 0

    for _ in range(max_iter):
        p, q = 0, 1
        max_off = abs(a[0, 1])
        for i in range(n):
            for j in range(i + 1, n):
                value = abs(a[i, j])
                if value > max_off:
                    max_off = value
                    p, q = i, j

        if max_off < eps:
            converged = True
            break

        app = a[p, p]
        aqq = a[q, q]
        apq = a[p, q]
        theta = 0.5 * np.arctan2(2 * apq, aqq - app)
        c = np.cos(theta)
        s = np.sin(theta)

        a[p, p] = c * c * app - 2 * s * c * apq + s * s * aqq
        a[q, q] = s * s * app + 2 * s * c * apq + c * c * aqq
        a[p, q] = 0.0
        a[q, p] = 0.0

        # remaining entries of rows/cols p and q
        for k in range(n):
            if k == p or k == q:
                continue
            akp = a[p, k]
            akq = a[q, k]
            a[p, k] = a[k, p] = c * akp - s * akq
            a[q, k] = a[k, q] = s * akp + c * akq

        iterations += 1
    else:
        # the last rotation may have finished the job without a final check
        converged = bool(np.max(np.abs(a[np.triu_indices(n, 1)])) < eps)

    if not converged:
        logger.debug("Jacobi solver stopped at max_iter=%d without reaching eps=%g",
                     max_iter, eps)

    return JacobiResult(
        eigenvalues=tuple(float(v) for v in np.diag(a)),
        iterations=iterations,
        converged=converged,
    )

def get_principal_stresses_3d(stress: StressState3D, max_iter=MAX_ITER, eps=EPS) -> PrincipalStresses3D:
    result = jacobi_eigenvalues(stress.as_tensor(), max_iter=max_iter, eps=eps)
    return principal_from_eigenvalues(result.eigenvalues)

def principal_from_eigenvalues(eigenvalues) -> PrincipalStresses3D:
    sigma1, sigma2, sigma3 = sorted(eigenvalues, reverse=True)
    tau_max = (sigma1 - sigma3) / 2
    return PrincipalStresses3D(sigma1=sigma1, sigma2=sigma2, sigma3=sigma3, tau_max=tau_max)

def mohr_circles_3d(principal: PrincipalStresses3D):
    # pairs (s1,s2), (s2,s3), (s1,s3); the last circle has radius tau_max
    pairs = [
        (principal.sigma1, principal.sigma2),
        (principal.sigma2, principal.sigma3),
        (principal.sigma1, principal.sigma3),
    ]
    return [((a + b) / 2, abs(a - b) / 2) for a, b in pairs]
