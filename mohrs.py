#!/usr/bin/env python3
# mohrs.py
# Plane-stress transformation and Mohr's circle for a 2D element.
# Input is (sigma_x, sigma_y, tau_xy) plus a rotation angle in degrees.
# All functions are pure: every call starts from its input and returns a new record.

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class StressState:
    sigma_x: float
    sigma_y: float
    tau_xy: float

    def as_tensor(self):
        return np.array([
            [self.sigma_x, self.tau_xy],
            [self.tau_xy,  self.sigma_y],
        ], dtype=float)


@dataclass(frozen=True)
class MohrsCircle:
    center: float
    radius: float
    sigma1: float
    sigma2: float
    tau_max: float


@dataclass(frozen=True)
class TransformedStress:
    sigma_x_prime: float
    sigma_y_prime: float
    tau_xy_prime: float


# ---------- angle helpers ----------
def deg_to_rad(deg):
    return deg * np.pi / 180.0

def rad_to_deg(rad):
    return rad * 180.0 / np.pi


# ---------- core helpers ----------
def get_mohrs_circle(stress: StressState) -> MohrsCircle:
    # radius == 0 is a valid (point) circle: sigma_x == sigma_y and tau_xy == 0
    center = (stress.sigma_x + stress.sigma_y) / 2
    half_diff = (stress.sigma_x - stress.sigma_y) / 2
    radius = float(np.hypot(half_diff, stress.tau_xy))
    return MohrsCircle(
        center=center,
        radius=radius,
        sigma1=center + radius,
        sigma2=center - radius,
        tau_max=radius,
    )

def transform_stress(stress: StressState, angle_deg: float) -> TransformedStress:
    """
    Stresses on an element rotated counter-clockwise by angle_deg.

    Any real angle is accepted; the 2θ terms are periodic so no wrapping
    is applied here. sigma_x_prime + sigma_y_prime == sigma_x + sigma_y.
    """
    angle_rad = deg_to_rad(angle_deg)
    cos2 = float(np.cos(2 * angle_rad))
    sin2 = float(np.sin(2 * angle_rad))
    avg = (stress.sigma_x + stress.sigma_y) / 2
    half_diff = (stress.sigma_x - stress.sigma_y) / 2

    return TransformedStress(
        sigma_x_prime=avg + half_diff * cos2 + stress.tau_xy * sin2,
        sigma_y_prime=avg - half_diff * cos2 - stress.tau_xy * sin2,
        tau_xy_prime=-half_diff * sin2 + stress.tau_xy * cos2,
    )

def get_principal_angle_deg(stress: StressState) -> float:
    """
    Orientation of the maximum normal stress sigma1.

    atan2 gives one of the two zero-shear orientations; the other is 90 deg
    away. The orthogonal candidate is taken only when its sigma_x_prime is
    strictly larger, so exact ties keep the base angle.
    """
    base_angle_rad = 0.5 * np.arctan2(2 * stress.tau_xy, stress.sigma_x - stress.sigma_y)
    base_angle_deg = float(rad_to_deg(base_angle_rad))
    alt_angle_deg = base_angle_deg + 90

    base = transform_stress(stress, base_angle_deg).sigma_x_prime
    alt = transform_stress(stress, alt_angle_deg).sigma_x_prime
    return alt_angle_deg if alt > base else base_angle_deg

def get_max_shear_angle_deg(stress: StressState) -> float:
    """
    Orientation of maximum in-plane shear, 45 deg either side of principal.

    The candidate with the larger |tau_xy_prime| wins. On an exact tie the
    +45 candidate is returned when its signed shear is >= 0, otherwise -45.
    """
    principal_angle = get_principal_angle_deg(stress)
    shear1 = principal_angle + 45
    shear2 = principal_angle - 45
    tau1 = transform_stress(stress, shear1).tau_xy_prime
    tau2 = transform_stress(stress, shear2).tau_xy_prime

    if abs(tau1) > abs(tau2):
        return shear1
    if abs(tau2) > abs(tau1):
        return shear2
    return shear1 if tau1 >= 0 else shear2
