import math
import warnings

import numpy as np
import pytest

from orrery import ConfigurationError, ForceEvaluator, pairwise_accelerations, vectorized_accelerations

from conftest import random_state


@pytest.mark.parametrize("kernel", [pairwise_accelerations, vectorized_accelerations])
def test_isolated_body_has_exactly_zero_acceleration(kernel):
    acc = kernel(np.array([[1.0, 2.0, 3.0]]), np.array([5.0]), G=39.47, softening=1e-9)
    assert acc.shape == (1, 3)
    assert np.array_equal(acc, np.zeros((1, 3)))


@pytest.mark.parametrize("kernel", [pairwise_accelerations, vectorized_accelerations])
def test_two_bodies_attract_along_separation(kernel):
    pos = np.array([[0.0, 0.0, 0.0], [2.0, 0.0, 0.0]])
    mass = np.array([3.0, 1.0])
    acc = kernel(pos, mass, G=1.0, softening=0.0)

    np.testing.assert_allclose(acc[0], [1.0 / 4.0, 0.0, 0.0])
    np.testing.assert_allclose(acc[1], [-3.0 / 4.0, 0.0, 0.0])


def test_pairwise_and_vectorized_kernels_agree():
    state = random_state(9)
    a = pairwise_accelerations(state._pos, state._mass, G=1.3, softening=1e-3)
    b = vectorized_accelerations(state._pos, state._mass, G=1.3, softening=1e-3)
    np.testing.assert_allclose(a, b, rtol=1e-12, atol=1e-14)


def test_mass_weighted_accelerations_cancel():
    state = random_state(8)
    acc = pairwise_accelerations(state._pos, state._mass, G=39.47, softening=0.0)
    net = np.sum(state._mass[:, None] * acc, axis=0)
    scale = np.max(np.abs(state._mass[:, None] * acc))
    assert np.all(np.abs(net) <= 1e-13 * scale)


@pytest.mark.parametrize("kernel", [pairwise_accelerations, vectorized_accelerations])
@pytest.mark.parametrize("sep", [1e-12, 1e-110, 1e-160, 1e-200])
@pytest.mark.parametrize("m", [1.0, 3.0])
def test_zero_softening_near_coincident_bodies_stay_finite(kernel, sep, m):
    pos = np.array([[0.0, 0.0, 0.0], [sep, 0.0, 0.0]])
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        acc = kernel(pos, np.array([m, m]), G=39.47, softening=0.0)
    assert np.all(np.isfinite(acc))
    # whatever survives is still equal and opposite
    np.testing.assert_array_equal(acc[0], -acc[1])


@pytest.mark.parametrize("kernel", [pairwise_accelerations, vectorized_accelerations])
def test_pair_whose_force_overflows_is_skipped(kernel):
    # G / r^2 is finite here but times the mass it is not
    pos = np.array([[0.0, 0.0, 0.0], [7e-154, 0.0, 0.0]])
    acc = kernel(pos, np.array([3.0, 3.0]), G=39.47, softening=0.0)
    assert np.array_equal(acc, np.zeros((2, 3)))


@pytest.mark.parametrize("kernel", [pairwise_accelerations, vectorized_accelerations])
def test_exactly_coincident_bodies_without_softening_are_skipped(kernel):
    pos = np.array([[0.5, 0.5, 0.5], [0.5, 0.5, 0.5]])
    acc = kernel(pos, np.array([1.0, 2.0]), G=1.0, softening=0.0)
    assert np.array_equal(acc, np.zeros((2, 3)))


def test_softening_bounds_acceleration():
    eps = 1e-6
    G = 39.47
    # max over r of r / (r^2 + eps)^1.5 is 2 / (3 sqrt(3) eps)
    bound = G * 2.0 / (3.0 * math.sqrt(3.0) * eps)
    for sep in (0.0, 1e-12, 1e-6, 5.77e-4, 1e-3, 1.0):
        pos = np.array([[0.0, 0.0, 0.0], [sep, 0.0, 0.0]])
        acc = pairwise_accelerations(pos, np.array([1.0, 1.0]), G=G, softening=eps)
        assert np.all(np.isfinite(acc))
        assert np.linalg.norm(acc[0]) <= bound * (1.0 + 1e-9)


def test_evaluator_reuses_its_buffer():
    state = random_state(5)
    ev = ForceEvaluator(G=1.0, softening=1e-4)
    first = ev.evaluate(state._pos, state._mass)
    expected = first.copy()
    second = ev.evaluate(state._pos + 1.0, state._mass)

    assert second is first
    np.testing.assert_allclose(second, expected)
    assert ev.n_evaluations == 2


def test_evaluator_methods_agree():
    state = random_state(7)
    a = ForceEvaluator(2.0, 1e-4, "pairwise")(state._pos, state._mass).copy()
    b = ForceEvaluator(2.0, 1e-4, "vectorized")(state._pos, state._mass)
    np.testing.assert_allclose(a, b, rtol=1e-12, atol=1e-14)


def test_evaluator_rejects_unknown_method():
    with pytest.raises(ConfigurationError):
        ForceEvaluator(1.0, 0.0, "barnes_hut")
