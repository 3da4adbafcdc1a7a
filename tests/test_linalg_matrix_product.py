"""Tests for matrix construction helpers and the in-place product."""

from __future__ import annotations

import numpy as np
import pytest
import torch

from qfuse.core import device
from qfuse.errors import DimensionMismatchError
from qfuse.linalg import (
    DEFAULT_DTYPE,
    as_matrix,
    check_matrix,
    identity,
    matmul_into,
    zeros,
)


class TestMatrixHelpers:
    """zeros, identity, as_matrix and check_matrix."""

    def test_zeros_and_identity_defaults(self):
        """Defaults are complex128 on CPU."""
        z = zeros(4)
        eye = identity(4)
        assert z.dtype == DEFAULT_DTYPE == torch.complex128
        assert z.device.type == "cpu"
        assert torch.count_nonzero(z) == 0
        assert torch.equal(eye, torch.eye(4, dtype=torch.complex128))

    def test_device_dtype_is_used(self):
        """A Device carries its complex dtype into new matrices."""
        cpu = device("cpu")
        assert identity(2, device=cpu).dtype == cpu.complex_dtype

    def test_real_dtype_rejected(self):
        """Matrices must be complex."""
        with pytest.raises(ValueError, match="complex"):
            zeros(4, dtype=torch.float64)

    def test_as_matrix_from_nested_list(self):
        """Nested Python lists become complex tensors."""
        m = as_matrix([[0, 1], [1, 0]])
        assert m.dtype == torch.complex128
        assert m.shape == (2, 2)
        assert m[0, 1] == 1

    def test_as_matrix_from_numpy(self):
        """numpy arrays keep their values."""
        arr = np.array([[1j, 2.0], [3.0, 4.0 - 1j]])
        m = as_matrix(arr)
        assert m.dtype == torch.complex128
        assert np.array_equal(m.numpy(), arr)

    def test_as_matrix_converts_tensor_dtype(self):
        """complex64 tensors are widened to the requested dtype."""
        m = as_matrix(torch.eye(2, dtype=torch.complex64))
        assert m.dtype == torch.complex128

    @pytest.mark.parametrize("shape", [(4,), (2, 3), (2, 2, 2)])
    def test_as_matrix_rejects_non_square(self, shape):
        """Only square 2-D inputs are accepted."""
        with pytest.raises(DimensionMismatchError):
            as_matrix(np.zeros(shape))

    def test_check_matrix_reports_index(self):
        """The error names the operation index and both shapes."""
        with pytest.raises(DimensionMismatchError, match="operation 3") as excinfo:
            check_matrix(zeros(2), 4, index=3)
        assert excinfo.value.expected == (4, 4)
        assert excinfo.value.actual == (2, 2)


class TestMatmulInto:
    """matmul_into writes the product into a preallocated buffer."""

    def test_product_written_into_destination(self, make_matrix):
        """dst holds lhs @ rhs and is returned."""
        lhs, rhs = make_matrix(4), make_matrix(4)
        dst = zeros(4)
        out = matmul_into(dst, lhs, rhs)
        assert out is dst
        assert torch.allclose(dst, lhs @ rhs, atol=1e-12, rtol=0)

    def test_previous_contents_ignored(self, make_matrix):
        """Stale (even NaN) contents of dst do not leak into the result."""
        lhs, rhs = make_matrix(4), make_matrix(4)
        dst = torch.full((4, 4), float("nan"), dtype=torch.complex128)
        matmul_into(dst, lhs, rhs)
        assert bool(torch.isfinite(dst).all())
        assert torch.allclose(dst, lhs @ rhs, atol=1e-12, rtol=0)

    def test_destination_storage_reused(self, make_matrix):
        """No new storage is allocated for the destination."""
        dst = zeros(4)
        ptr = dst.data_ptr()
        matmul_into(dst, make_matrix(4), make_matrix(4))
        assert dst.data_ptr() == ptr

    def test_aliasing_rejected(self, make_matrix):
        """The destination may not be one of the operands."""
        a = make_matrix(4)
        with pytest.raises(ValueError, match="alias"):
            matmul_into(a, a, make_matrix(4))
        with pytest.raises(ValueError, match="alias"):
            matmul_into(a, make_matrix(4), a)

    def test_shape_checked(self, make_matrix):
        """All three arguments must be 4x4."""
        with pytest.raises(DimensionMismatchError):
            matmul_into(zeros(2), make_matrix(4), make_matrix(4))
        with pytest.raises(DimensionMismatchError):
            matmul_into(zeros(4), make_matrix(2), make_matrix(4))
