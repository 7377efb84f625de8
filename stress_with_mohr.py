#!/usr/bin/env python3
# stress_with_mohr.py
# Plane-stress and triaxial stress analysis with Mohr's circles: report and plot.
# 2D input is (sigma_x, sigma_y, tau_xy) and a rotation angle in degrees.
# 3D input S is a stress tensor (MPa, say); off diag terms are symmetric.
# Creates stress_report_2d.txt / stress_report_3d.txt and mohr_stress_2d.png / mohr_stress_3d.png.

import numpy as np
import matplotlib.pyplot as plt

from mohrs import (
    StressState,
    get_mohrs_circle,
    get_max_shear_angle_deg,
    get_principal_angle_deg,
    transform_stress,
)
from mohrs3d import (
    MAX_ITER,
    EPS,
    StressState3D,
    jacobi_eigenvalues,
    mohr_circles_3d,
    principal_from_eigenvalues,
)

ANGLE_STEP_DEG = 0.2

# ---------- display angle ----------
def wrap_angle_deg(angle):
    # keeps a spinning display angle in [-180, 180), as the playback loop does: 180 maps to -180
    return ((angle + 180.0) % 360.0) - 180.0

def sweep_angles(start=0.0, step=ANGLE_STEP_DEG, count=1800):
    angle = start
    for _ in range(count):
        angle = wrap_angle_deg(angle + step)
        yield angle

# ---------- core helpers ----------
def symmetrize(A, tol=1e-12):
    A = np.asarray(A, dtype=float)
    Asym = 0.5 * (A + A.T)
    if A.shape == (3, 3) and np.linalg.norm(A - A.T) > tol:
        print("[note] Input not perfectly symmetric; symmetrizing.")
    return Asym

def principal_invariants(S):
    I1 = np.trace(S)
    I2 = 0.5 * (I1**2 - np.trace(S @ S))
    I3 = np.linalg.det(S)
    return I1, I2, I3

# ---------- main analysis ----------
def run_analysis_2d(stress, angle_deg=0.0):
    circle = get_mohrs_circle(stress)
    rotated = transform_stress(stress, angle_deg)
    principal_angle = get_principal_angle_deg(stress)
    max_shear_angle = get_max_shear_angle_deg(stress)

    return {
        "kind": "2d",
        "stress": stress,
        "angle_deg": angle_deg,
        "circle": circle,
        "rotated": rotated,
        "principal_angle_deg": principal_angle,
        "max_shear_angle_deg": max_shear_angle,
    }

def run_analysis_3d(S, max_iter=MAX_ITER, eps=EPS):
    stress = StressState3D.from_tensor(symmetrize(S))
    S = stress.as_tensor()

    I1, I2, I3 = principal_invariants(S)
    jacobi     = jacobi_eigenvalues(S, max_iter=max_iter, eps=eps)
    principal  = principal_from_eigenvalues(jacobi.eigenvalues)
    circles    = mohr_circles_3d(principal)

    return {
        "kind": "3d",
        "S": S,
        "stress": stress,
        "I1": I1, "I2": I2, "I3": I3,
        "principal": principal,
        "iterations": jacobi.iterations,
        "converged": jacobi.converged,
        "mohr_centers": [c for c, _ in circles],
        "mohr_radii": [r for _, r in circles],
    }

# ---------- reporting ----------
def _format_2d(res):
    st, c, r = res["stress"], res["circle"], res["rotated"]
    lines = []
    lines.append("=== Plane Stress Analysis Report ===")
    lines.append(f"σx = {st.sigma_x:.6e}, σy = {st.sigma_y:.6e}, τxy = {st.tau_xy:.6e}")

    lines.append("\n[Mohr's circle]")
    lines.append(f"center = {c.center:.6e}")
    lines.append(f"radius = {c.radius:.6e}")
    lines.append(f"σ1     = {c.sigma1:.6e}")
    lines.append(f"σ2     = {c.sigma2:.6e}")
    lines.append(f"τ_max  = {c.tau_max:.6e}")

    lines.append(f"\n[Rotated element, θ = {res['angle_deg']:.3f}°]")
    lines.append(f"σx' = {r.sigma_x_prime:.6e}")
    lines.append(f"σy' = {r.sigma_y_prime:.6e}")
    lines.append(f"τx'y' = {r.tau_xy_prime:.6e}")

    lines.append("\n[Orientations]")
    lines.append(f"principal angle θp = {res['principal_angle_deg']:.6f}°")
    lines.append(f"max shear angle θs = {res['max_shear_angle_deg']:.6f}°")
    return "\n".join(lines)

def _format_3d(res):
    p = res["principal"]
    lines = []
    lines.append("=== Triaxial Stress Analysis Report ===")

    lines.append("\n[Principal invariants of σ]")
    lines.append(f"I1 = {res['I1']:.6e}")
    lines.append(f"I2 = {res['I2']:.6e}")
    lines.append(f"I3 = {res['I3']:.6e}")

    lines.append("\n[Principal stresses]")
    lines.append(f"σ1 = {p.sigma1:.6e}")
    lines.append(f"σ2 = {p.sigma2:.6e}")
    lines.append(f"σ3 = {p.sigma3:.6e}")
    status = "converged" if res["converged"] else "NOT converged (approximate)"
    lines.append(f"Jacobi rotations: {res['iterations']} ({status})")

    lines.append("\n[Maximum shear stress]")
    lines.append(f"τ_max = {p.tau_max:.6e}")

    centers, radii = res["mohr_centers"], res["mohr_radii"]
    lines.append("Mohr circles (centers, radii):")
    for k in range(3):
        lines.append(f"  circle {k+1}: c={centers[k]:.6e}, r={radii[k]:.6e}")
    return "\n".join(lines)

def format_report_text(res):
    if res["kind"] == "2d":
        return _format_2d(res)
    return _format_3d(res)

def save_report_text(res, path="stress_report.txt"):
    txt = format_report_text(res)
    with open(path, "w", encoding="utf-8") as f:
        f.write(txt)
    print(f"[saved] report -> {path}")

def print_report(res):
    txt = format_report_text(res)
    print(txt)

# ---------- plotting ----------
def plot_mohr_circle_2d(res, outfile="mohr_stress_2d.png", show=False):
    """
    Plot the plane-stress Mohr circle with the current rotated element.
    x-axis: normal stress σ, y-axis: shear stress τ.
    The x' face is drawn at (σx', τx'y') and the y' face at (σy', -τx'y').
    """
    c, r = res["circle"], res["rotated"]

    th = np.linspace(0, 2*np.pi, 400)
    fig, ax = plt.subplots()

    ax.plot(c.center + c.radius*np.cos(th), c.radius*np.sin(th),
            color="#9ca3af", linewidth=1.5)

    # principal points
    ax.plot([c.sigma1, c.sigma2], [0, 0], 'o', color="k", label="principal stresses")

    # rotated element diameter
    ax.plot([r.sigma_x_prime, r.sigma_y_prime], [r.tau_xy_prime, -r.tau_xy_prime],
            color="#f1c40f", linewidth=1.5)
    ax.plot(r.sigma_x_prime, r.tau_xy_prime, 'o', color="#1f77b4", label="x' face")
    ax.plot(r.sigma_y_prime, -r.tau_xy_prime, 'o', color="#d62728", label="y' face")

    ax.axhline(0, color='k', linewidth=1)
    ax.axvline(c.center, color='k', linewidth=1)

    ax.set_aspect('equal', adjustable='datalim')
    ax.set_xlabel("Normal stress σ")
    ax.set_ylabel("Shear stress τ")
    ax.set_title(f"Mohr Circle for Plane Stress (θ = {res['angle_deg']:.1f}°)")
    ax.legend(loc="best")

    plt.tight_layout()
    fig.savefig(outfile, dpi=200)
    print(f"[saved] Mohr circle figure -> {outfile}")
    if show:
        plt.show()
    plt.close(fig)

def plot_mohr_circles_3d(res, outfile="mohr_stress_3d.png", show=False):
    p = res["principal"]
    centers, radii = res["mohr_centers"], res["mohr_radii"]
    colors = ["#1f77b4", "#2ca02c", "#d62728"]

    th = np.linspace(0, 2*np.pi, 400)
    fig, ax = plt.subplots()

    for (c, r, color) in zip(centers, radii, colors):
        x = c + r*np.cos(th)
        y = r*np.sin(th)
        ax.plot(x, y, color=color, linewidth=1.5)

    # principal points
    ax.plot([p.sigma1, p.sigma2, p.sigma3], [0, 0, 0], 'o', color="k", label="principal stresses")

    # axes
    ax.axhline(0, color='k', linewidth=1)
    ax.axvline(0, color='k', linewidth=1)

    ax.set_aspect('equal', adjustable='datalim')
    ax.set_xlabel("Normal stress σ")
    ax.set_ylabel("Shear stress τ")
    ax.set_title("Mohr Circles for Stress")
    ax.legend(loc="best")

    plt.tight_layout()
    fig.savefig(outfile, dpi=200)
    print(f"[saved] Mohr circle figure -> {outfile}")
    if show:
        plt.show()
    plt.close(fig)

# ---------- example ----------
if __name__ == "__main__":
    # Plane stress (MPa), element rotated by 30 deg
    stress = StressState(sigma_x=200, sigma_y=-200, tau_xy=200)
    res2d = run_analysis_2d(stress, angle_deg=30.0)
    print_report(res2d)
    save_report_text(res2d, path="stress_report_2d.txt")
    plot_mohr_circle_2d(res2d, outfile="mohr_stress_2d.png", show=False)

    # a quarter turn of the auto-rotation, every 90th tick
    print("\n[rotation sweep]")
    for k, angle in enumerate(sweep_angles(0.0, count=450)):
        if k % 90 == 89:
            r = transform_stress(stress, angle)
            print(f"  θ = {angle:8.3f}°  σx' = {r.sigma_x_prime:9.3f}  τx'y' = {r.tau_xy_prime:9.3f}")

    # Triaxial stress tensor (MPa)
    S = np.array([
        [120,  60,  20],
        [ 60, -80, -40],
        [ 20, -40,  40]
    ], dtype=float)

    res3d = run_analysis_3d(S)
    print()
    print_report(res3d)
    save_report_text(res3d, path="stress_report_3d.txt")
    plot_mohr_circles_3d(res3d, outfile="mohr_stress_3d.png", show=False)
