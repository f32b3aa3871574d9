"""Tests for B-spline filter node grid, basis and system matrices."""

import warnings

import numpy
import pytest
import torch

from torchbspline.spline import (
    BOUNDARY_ZERO_CURVATURE,
    BOUNDARY_ZERO_SLOPE,
    BOUNDARY_ZERO_VALUE,
    DomainError,
    NodeSpacingWarning,
    b_spline_filter_basis,
    b_spline_filter_data_matrix,
    b_spline_filter_domain,
    b_spline_filter_penalty_matrix,
    node_intervals,
)
from torchbspline.spline._b_spline_filter._b_spline_filter_basis import _basis


def gram_matrix(
    intervals: int,
    boundary_condition: int,
    order: int,
) -> torch.Tensor:
    """Gauss-Legendre Gram matrix of basis derivatives over [0, M]."""
    points, weights = numpy.polynomial.legendre.leggauss(4)

    points = torch.from_numpy(points)
    weights = torch.from_numpy(weights)

    u = torch.cat([m + 0.5 * (points + 1.0) for m in range(intervals)])
    w = torch.cat([0.5 * weights] * intervals)

    m = torch.arange(intervals + 1)

    phi = _basis(u.unsqueeze(-1), m, intervals, boundary_condition, order)

    return phi.T @ (w.unsqueeze(-1) * phi)


def band_mask(n: int, bands: int = 3) -> torch.Tensor:
    i = torch.arange(n)

    return (i.unsqueeze(0) - i.unsqueeze(1)).abs() <= bands


class TestNodeIntervals:
    """Tests for node_intervals."""

    def test_reference_grid(self):
        """100 unit-spaced samples with cutoff 20 give 49 intervals."""
        intervals, spacing = node_intervals(100, 99.0, 20.0)

        assert intervals == 49
        assert spacing == pytest.approx(99.0 / 49)

    def test_deterministic(self):
        """Same inputs should give the same grid."""
        assert node_intervals(137, 12.5, 3.0) == node_intervals(137, 12.5, 3.0)

    def test_nodes_per_wavelength_capped(self):
        """Dense samples should stop at fifteen nodes per wavelength."""
        intervals, spacing = node_intervals(10000, 100.0, 100.0)

        assert intervals == 15
        assert spacing == pytest.approx(100.0 / 15)

    def test_at_least_one_sample_per_interval(self):
        """Should never use more intervals than samples allow."""
        for sample_count in [11, 30, 55, 200]:
            intervals, _ = node_intervals(sample_count, 10.0, 5.0)

            assert sample_count / (intervals + 1) >= 1.0

    def test_sparse_samples_raise(self):
        """Too few samples to reach two nodes per wavelength is invalid."""
        with pytest.raises(DomainError):
            node_intervals(5, 100.0, 10.0)

    @pytest.mark.parametrize("sample_count", [2, 10])
    def test_fewer_samples_than_minimum_grid_raise(self, sample_count):
        """The ten-interval starting grid needs eleven samples."""
        with pytest.raises(DomainError):
            node_intervals(sample_count, 1.0, 1.0)

    def test_coarse_grid_warns(self):
        """A valid grid below four nodes per wavelength should warn."""
        with pytest.warns(NodeSpacingWarning):
            intervals, spacing = node_intervals(30, 100.0, 10.0)

        assert intervals == 29
        assert spacing == pytest.approx(100.0 / 29)

    def test_dense_grid_does_not_warn(self):
        """The reference grid resolves the cutoff without a warning."""
        with warnings.catch_warnings():
            warnings.simplefilter("error", NodeSpacingWarning)

            node_intervals(100, 99.0, 20.0)

    def test_wavelength_above_span_raises(self):
        """Cutoff wavelength longer than the span is invalid."""
        with pytest.raises(DomainError):
            node_intervals(100, 99.0, 100.0)

    @pytest.mark.parametrize("wavelength", [0.0, -1.0, float("nan")])
    def test_non_positive_wavelength_raises(self, wavelength):
        """Cutoff wavelength must be positive."""
        with pytest.raises(DomainError):
            node_intervals(100, 99.0, wavelength)

    def test_too_few_samples_raises(self):
        """A single sample has no span."""
        with pytest.raises(DomainError):
            node_intervals(1, 1.0, 1.0)

    def test_zero_span_raises(self):
        """Coincident samples have no span."""
        with pytest.raises(DomainError):
            node_intervals(10, 0.0, 1.0)


class TestBSplineFilterBasis:
    """Tests for the boundary-adjusted basis."""

    @pytest.fixture
    def domain(self):
        x = torch.arange(100, dtype=torch.float64)

        return b_spline_filter_domain(x, 20.0)

    def test_kernel_values(self, domain):
        """Interior basis is 1 at its node, 1/4 one node away, 0 at two."""
        nodes = domain.nodes

        t = nodes[[20, 21, 22, 19, 18]]

        values = b_spline_filter_basis(domain, 20, t)

        torch.testing.assert_close(
            values,
            torch.tensor([1.0, 0.25, 0.0, 0.25, 0.0], dtype=torch.float64),
            rtol=0,
            atol=1e-12,
        )

    def test_kernel_midpoint(self, domain):
        """Half a node away the kernel is 23/32."""
        t = domain.nodes[20] + 0.5 * domain.spacing

        value = b_spline_filter_basis(domain, 20, t)

        assert float(value) == pytest.approx(23.0 / 32.0)

    def test_compact_support(self, domain):
        """Basis vanishes two or more node spacings away."""
        t = torch.linspace(
            float(domain.nodes[30]),
            float(domain.nodes[40]),
            50,
            dtype=torch.float64,
        )

        values = b_spline_filter_basis(domain, 20, t)

        assert (values == 0).all()

    def test_tensor_node_indices(self, domain):
        """Node index tensors broadcast against query points."""
        t = domain.nodes[:3].unsqueeze(-1)
        m = torch.arange(domain.intervals + 1)

        values = b_spline_filter_basis(domain, m, t)

        assert values.shape == (3, domain.intervals + 1)

    def test_derivative_matches_finite_difference(self, domain):
        """First derivative should match central differences."""
        t = torch.tensor([0.3, 1.7, 50.2, 97.9], dtype=torch.float64)
        h = 1e-6

        for m in [0, 1, 25, domain.intervals - 1, domain.intervals]:
            derivative = b_spline_filter_basis(domain, m, t, order=1)

            expected = (
                b_spline_filter_basis(domain, m, t + h)
                - b_spline_filter_basis(domain, m, t - h)
            ) / (2 * h)

            torch.testing.assert_close(
                derivative,
                expected,
                rtol=1e-5,
                atol=1e-7,
            )

    def test_invalid_order_raises(self, domain):
        """Only orders 0, 1 and 2 exist."""
        with pytest.raises(ValueError):
            b_spline_filter_basis(domain, 0, torch.tensor(0.0), order=3)

    def test_zero_value_boundary(self):
        """With the zero value condition all basis functions vanish at the ends."""
        u = torch.tensor([[0.0], [6.0]], dtype=torch.float64)
        m = torch.arange(7)

        values = _basis(u, m, 6, BOUNDARY_ZERO_VALUE)

        torch.testing.assert_close(
            values,
            torch.zeros(2, 7, dtype=torch.float64),
            rtol=0,
            atol=1e-15,
        )

    def test_zero_slope_boundary(self):
        """With the zero slope condition all slopes vanish at the ends."""
        u = torch.tensor([[0.0], [6.0]], dtype=torch.float64)
        m = torch.arange(7)

        values = _basis(u, m, 6, BOUNDARY_ZERO_SLOPE, order=1)

        torch.testing.assert_close(
            values,
            torch.zeros(2, 7, dtype=torch.float64),
            rtol=0,
            atol=1e-15,
        )

    def test_zero_curvature_boundary(self):
        """With the zero curvature condition all curvatures vanish at the ends."""
        u = torch.tensor([[0.0], [6.0]], dtype=torch.float64)
        m = torch.arange(7)

        values = _basis(u, m, 6, BOUNDARY_ZERO_CURVATURE, order=2)

        torch.testing.assert_close(
            values,
            torch.zeros(2, 7, dtype=torch.float64),
            rtol=0,
            atol=1e-15,
        )

    @pytest.mark.parametrize("boundary_condition", [1, 2])
    def test_constant_reproduction(self, boundary_condition):
        """Sum of all basis functions is constant on [0, M]."""
        u = torch.linspace(0, 5, 101, dtype=torch.float64).unsqueeze(-1)
        m = torch.arange(6)

        total = _basis(u, m, 5, boundary_condition).sum(dim=-1)

        torch.testing.assert_close(total, torch.full_like(total, 1.5))


class TestBSplineFilterPenaltyMatrix:
    """Tests for b_spline_filter_penalty_matrix."""

    @pytest.mark.parametrize("intervals", [1, 2, 3, 4, 5, 8, 20])
    @pytest.mark.parametrize("boundary_condition", [0, 1, 2])
    @pytest.mark.parametrize("derivative_order", [1, 2, 3])
    def test_symmetric_and_banded(
        self, intervals, boundary_condition, derivative_order
    ):
        """Q is exactly symmetric and zero outside three diagonals."""
        Q = b_spline_filter_penalty_matrix(
            intervals,
            1.7,
            2.5,
            derivative_order,
            boundary_condition,
            dtype=torch.float64,
        )

        assert Q.shape == (intervals + 1, intervals + 1)
        assert torch.equal(Q, Q.T)
        assert (Q[~band_mask(intervals + 1)] == 0).all()

    @pytest.mark.parametrize("intervals", [1, 2, 3, 4, 7, 12])
    @pytest.mark.parametrize("boundary_condition", [0, 1, 2])
    @pytest.mark.parametrize("derivative_order", [1, 2])
    def test_matches_quadrature(
        self, intervals, boundary_condition, derivative_order
    ):
        """Q equals the Gram matrix of basis derivatives over [0, M]."""
        Q = b_spline_filter_penalty_matrix(
            intervals,
            1.0,
            1.0,
            derivative_order,
            boundary_condition,
            dtype=torch.float64,
        )

        expected = gram_matrix(intervals, boundary_condition, derivative_order)

        torch.testing.assert_close(Q, expected, rtol=1e-10, atol=1e-10)

    def test_scaling(self):
        """Q scales with spacing times alpha."""
        Q = b_spline_filter_penalty_matrix(10, 1.0, 1.0, dtype=torch.float64)
        scaled = b_spline_filter_penalty_matrix(
            10, 2.0, 3.0, dtype=torch.float64
        )

        torch.testing.assert_close(scaled, 6.0 * Q)

    @pytest.mark.parametrize("boundary_condition", [1, 2])
    @pytest.mark.parametrize("derivative_order", [1, 2, 3])
    def test_constants_not_penalised(
        self, boundary_condition, derivative_order
    ):
        """A constant curve has no derivative to penalise."""
        Q = b_spline_filter_penalty_matrix(
            12,
            1.0,
            1.0,
            derivative_order,
            boundary_condition,
            dtype=torch.float64,
        )

        ones = torch.ones(13, dtype=torch.float64)

        torch.testing.assert_close(
            Q @ ones,
            torch.zeros(13, dtype=torch.float64),
            rtol=0,
            atol=1e-12,
        )

    @pytest.mark.parametrize("derivative_order", [2, 3])
    def test_lines_not_penalised_with_zero_curvature(self, derivative_order):
        """Straight lines fit the zero curvature condition unpenalised."""
        Q = b_spline_filter_penalty_matrix(
            12,
            1.0,
            1.0,
            derivative_order,
            BOUNDARY_ZERO_CURVATURE,
            dtype=torch.float64,
        )

        line = torch.arange(13, dtype=torch.float64)

        torch.testing.assert_close(
            Q @ line,
            torch.zeros(13, dtype=torch.float64),
            rtol=0,
            atol=1e-10,
        )

    def test_zero_value_positive_definite(self):
        """The zero value condition leaves nothing unpenalised."""
        Q = b_spline_filter_penalty_matrix(
            12,
            1.0,
            1.0,
            1,
            BOUNDARY_ZERO_VALUE,
            dtype=torch.float64,
        )

        assert torch.linalg.eigvalsh(Q).min() > 0

    def test_invalid_arguments_raise(self):
        """Unsupported orders, conditions and grids are rejected."""
        with pytest.raises(ValueError):
            b_spline_filter_penalty_matrix(10, 1.0, 1.0, derivative_order=4)

        with pytest.raises(ValueError):
            b_spline_filter_penalty_matrix(10, 1.0, 1.0, boundary_condition=3)

        with pytest.raises(ValueError):
            b_spline_filter_penalty_matrix(0, 1.0, 1.0)


class TestBSplineFilterDataMatrix:
    """Tests for b_spline_filter_data_matrix."""

    @pytest.mark.parametrize("boundary_condition", [0, 1, 2])
    def test_matches_dense(self, boundary_condition):
        """P equals spacing times the dense basis product over samples."""
        torch.manual_seed(0)

        x = torch.sort(torch.rand(60, dtype=torch.float64) * 30.0).values
        x[0], x[-1] = 0.0, 30.0

        intervals, spacing = 10, 3.0

        P = b_spline_filter_data_matrix(
            x, 0.0, intervals, spacing, boundary_condition
        )

        m = torch.arange(intervals + 1)
        u = (x / spacing).unsqueeze(-1)
        phi = _basis(u, m, intervals, boundary_condition)

        torch.testing.assert_close(P, spacing * phi.T @ phi)

    @pytest.mark.parametrize("intervals", [1, 2, 3, 6, 15])
    def test_symmetric_and_banded(self, intervals):
        """P is exactly symmetric and zero outside three diagonals."""
        x = torch.linspace(0.0, 1.0, 40, dtype=torch.float64)

        P = b_spline_filter_data_matrix(x, 0.0, intervals, 1.0 / intervals)

        assert torch.equal(P, P.T)
        assert (P[~band_mask(intervals + 1)] == 0).all()

    def test_sample_order_irrelevant(self):
        """Shuffling samples should not change P beyond rounding."""
        x = torch.linspace(0.0, 10.0, 33, dtype=torch.float64)

        P = b_spline_filter_data_matrix(x, 0.0, 5, 2.0)
        shuffled = b_spline_filter_data_matrix(
            x[torch.randperm(33)], 0.0, 5, 2.0
        )

        torch.testing.assert_close(P, shuffled)
