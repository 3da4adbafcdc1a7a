"""Pytest configuration and shared fixtures for qfuse tests.

Provides seeded numpy and torch RNGs. The seed comes from the TEST_RNG_SEED
environment variable (default: 0).
"""

import os

import numpy as np
import pytest
import torch


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Deterministic numpy RNG."""
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Deterministic CPU torch RNG."""
    generator = torch.Generator(device="cpu")
    generator.manual_seed(_seed())
    return generator


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed the global numpy and torch RNGs before every test."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


def random_matrix(generator: torch.Generator, dim: int) -> torch.Tensor:
    """Dense complex128 matrix with standard normal entries."""
    return torch.randn(dim, dim, dtype=torch.complex128, generator=generator)


def random_unitary(generator: torch.Generator, dim: int) -> torch.Tensor:
    """Unitary from the QR decomposition of a random complex matrix."""
    q, r = torch.linalg.qr(random_matrix(generator, dim))
    phases = torch.diagonal(r) / torch.diagonal(r).abs()
    return (q * phases).contiguous()


@pytest.fixture(scope="function")
def make_matrix(torch_rng: torch.Generator):
    """Factory for random complex128 matrices: ``make_matrix(dim)``."""
    return lambda dim: random_matrix(torch_rng, dim)


@pytest.fixture(scope="function")
def make_unitary(torch_rng: torch.Generator):
    """Factory for random unitaries: ``make_unitary(dim)``."""
    return lambda dim: random_unitary(torch_rng, dim)
