from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from btzviz.params.coupling import BlackHoleParams

ArrayLike = float | np.ndarray


@dataclass(frozen=True)
class EmbeddingCoords:
    """Point (or array of points) in flat R^{2,2} with signature (-, -, +, +)."""

    x_minus1: ArrayLike
    x0: ArrayLike
    x1: ArrayLike
    x2: ArrayLike

    def visual_axes(self) -> np.ndarray:
        """Project onto the rendered (X^-1, X^1, X^2) axes; X^0 is dropped."""
        return np.stack(
            [np.asarray(self.x_minus1), np.asarray(self.x1), np.asarray(self.x2)],
            axis=-1,
        )


def time_like_radicand(r: ArrayLike, params: BlackHoleParams) -> ArrayLike:
    return (np.asarray(r, dtype=float) ** 2) / params.mass - params.ads_radius**2


def is_clamped(r: ArrayLike, params: BlackHoleParams) -> ArrayLike:
    """True where r^2/M < l^2, i.e. where the time-like term is forced to zero."""
    return time_like_radicand(r, params) < 0.0


def embedding_coords(
    r: ArrayLike,
    phi: ArrayLike,
    t: ArrayLike,
    params: BlackHoleParams,
) -> EmbeddingCoords:
    """Embed the BTZ slice (r, phi, t) into R^{2,2}.

    Inside the horizon the radicand r^2/M - l^2 is negative; it is clamped to
    zero so the surface stays defined there. That region is an approximation,
    not part of the embedded hyperboloid.
    """
    sqrt_m = params.sqrt_mass
    r_arr = np.asarray(r, dtype=float)
    phi_arr = np.asarray(phi, dtype=float)
    t_arr = np.asarray(t, dtype=float)

    term_space = r_arr / sqrt_m
    arg_phi = sqrt_m * phi_arr
    term_time = np.sqrt(np.maximum(0.0, time_like_radicand(r_arr, params)))
    arg_t = (sqrt_m * t_arr) / params.ads_radius

    return EmbeddingCoords(
        x_minus1=term_space * np.cosh(arg_phi),
        x0=term_time * np.sinh(arg_t),
        x1=term_time * np.cosh(arg_t),
        x2=term_space * np.sinh(arg_phi),
    )


def lorentz_boost(coords: EmbeddingCoords, rapidity: float) -> EmbeddingCoords:
    ch = np.cosh(rapidity)
    sh = np.sinh(rapidity)
    return EmbeddingCoords(
        x_minus1=coords.x_minus1,
        x0=coords.x0 * ch + coords.x1 * sh,
        x1=coords.x0 * sh + coords.x1 * ch,
        x2=coords.x2,
    )


def spatial_rotation(coords: EmbeddingCoords, angle: float) -> EmbeddingCoords:
    c = np.cos(angle)
    s = np.sin(angle)
    return EmbeddingCoords(
        x_minus1=coords.x_minus1,
        x0=coords.x0,
        x1=coords.x1 * c - coords.x2 * s,
        x2=coords.x1 * s + coords.x2 * c,
    )


def embedding_invariant(coords: EmbeddingCoords) -> ArrayLike:
    """-(X^-1)^2 - (X^0)^2 + (X^1)^2 + (X^2)^2, equal to -l^2 on the surface."""
    return (
        -(coords.x_minus1**2) - (coords.x0**2) + (coords.x1**2) + (coords.x2**2)
    )


def boost_invariant(coords: EmbeddingCoords) -> ArrayLike:
    return -(coords.x0**2) + (coords.x1**2)


def rotation_invariant(coords: EmbeddingCoords) -> ArrayLike:
    return (coords.x1**2) + (coords.x2**2)


def embedding_positions(
    r: ArrayLike,
    phi: ArrayLike,
    *,
    t: float,
    rapidity: float,
    rotation: float,
    params: BlackHoleParams,
) -> np.ndarray:
    """Full embedding chain: embed, boost, then rotate the boosted X^1."""
    base = embedding_coords(r, phi, t, params)
    boosted = lorentz_boost(base, rapidity)
    rotated = spatial_rotation(boosted, rotation)
    return rotated.visual_axes()


__all__ = [
    "EmbeddingCoords",
    "time_like_radicand",
    "is_clamped",
    "embedding_coords",
    "lorentz_boost",
    "spatial_rotation",
    "embedding_invariant",
    "boost_invariant",
    "rotation_invariant",
    "embedding_positions",
]
