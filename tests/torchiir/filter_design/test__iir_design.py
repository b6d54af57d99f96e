"""Tests for iir_design."""

import importlib
import math
import warnings

import pytest
import torch
from scipy import signal as scipy_signal

from torchiir.filter_analysis import frequency_response, frequency_response_sos
from torchiir.filter_design import (
    BAND_TYPES,
    FILTER_TYPES,
    ConjugatePairWarning,
    FilterDesignError,
    InvalidCutoffError,
    InvalidFilterTypeError,
    InvalidOrderError,
    SpecificationError,
    iir_design,
    iir_is_stable,
)

_SCIPY_DESIGNS = {
    "butterworth": lambda n, wn, btype: scipy_signal.butter(n, wn, btype),
    "chebyshev_type_1": lambda n, wn, btype: scipy_signal.cheby1(
        n, 1.0, wn, btype
    ),
    "chebyshev_type_2": lambda n, wn, btype: scipy_signal.cheby2(
        n, 40.0, wn, btype
    ),
    "elliptic": lambda n, wn, btype: scipy_signal.ellip(
        n, 1.0, 40.0, wn, btype
    ),
    "bessel": lambda n, wn, btype: scipy_signal.bessel(n, wn, btype),
}


def _magnitude_db(numerator, denominator, frequencies) -> torch.Tensor:
    _, response = frequency_response_sos(
        numerator,
        denominator,
        torch.tensor(frequencies, dtype=torch.float64),
    )
    return 20 * torch.log10(response.abs())


class TestIirDesignValidation:
    """Argument validation happens before any design work."""

    @pytest.fixture(autouse=True)
    def no_prototype(self, monkeypatch):
        module = importlib.import_module("torchiir.filter_design._iir_design")

        def fail(*args, **kwargs):
            raise AssertionError("analog prototype should not be designed")

        monkeypatch.setattr(module, "analog_prototype", fail)

    @pytest.mark.parametrize("order", [0, -1, 2.5, "4", True])
    def test_invalid_order(self, order) -> None:
        """Orders must be positive integers."""
        with pytest.raises(InvalidOrderError):
            iir_design(order, 0.2)

    @pytest.mark.parametrize("cutoff", [0.0, 0.5, -0.1, 0.7])
    def test_invalid_cutoff(self, cutoff: float) -> None:
        """Cutoff must lie strictly between 0 and Nyquist."""
        with pytest.raises(InvalidCutoffError):
            iir_design(4, cutoff)

    @pytest.mark.parametrize("center", [-0.1, 0.6])
    def test_invalid_center(self, center: float) -> None:
        """Center frequency must lie in [0, 0.5]."""
        with pytest.raises(InvalidCutoffError):
            iir_design(4, 0.1, center_frequency=center, band_type="bandpass")

    @pytest.mark.parametrize("band_type", ["bandpass", "bandstop"])
    def test_cutoff_equal_to_center(self, band_type: str) -> None:
        """A degenerate pre-warping factor is rejected."""
        with pytest.raises(InvalidCutoffError):
            iir_design(
                4, 0.2, center_frequency=0.2, band_type=band_type
            )

    def test_invalid_ripple(self) -> None:
        """Passband ripple must be positive."""
        with pytest.raises(SpecificationError):
            iir_design(
                4, 0.2, passband_ripple_db=0.0, filter_type="chebyshev_type_1"
            )

    def test_invalid_attenuation(self) -> None:
        """Stopband attenuation must be positive."""
        with pytest.raises(SpecificationError):
            iir_design(
                4,
                0.2,
                stopband_attenuation_db=-3.0,
                filter_type="chebyshev_type_2",
            )

    def test_specs_checked_for_every_family(self) -> None:
        """Ripple and attenuation are validated even when unused."""
        with pytest.raises(SpecificationError):
            iir_design(4, 0.2, passband_ripple_db=-1.0)

    def test_invalid_filter_type(self) -> None:
        """Unknown filter families are rejected."""
        with pytest.raises(InvalidFilterTypeError):
            iir_design(4, 0.2, filter_type="gaussian")

    def test_invalid_band_type(self) -> None:
        """Unknown band types are rejected."""
        with pytest.raises(InvalidFilterTypeError):
            iir_design(4, 0.2, band_type="allpass")

    def test_invalid_output(self) -> None:
        """Unknown output formats are rejected."""
        with pytest.raises(InvalidFilterTypeError):
            iir_design(4, 0.2, output="zpk")

    def test_errors_share_base_class(self) -> None:
        """All design errors derive from FilterDesignError."""
        with pytest.raises(FilterDesignError):
            iir_design(0, 0.2)
        with pytest.raises(FilterDesignError):
            iir_design(4, 0.9)


class TestIirDesign:
    """Tests for iir_design."""

    def test_butterworth_lowpass_sos(self) -> None:
        """A 4th order Butterworth lowpass gives two stable sections."""
        numerator, denominator = iir_design(4, 0.2)

        assert numerator.shape == (2, 3)
        assert denominator.shape == (2, 3)
        assert iir_is_stable(numerator, denominator)

        dc = numerator.sum(-1).prod() / denominator.sum(-1).prod()
        assert abs(20 * math.log10(dc.item())) < 0.1

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5])
    @pytest.mark.parametrize("band_type", BAND_TYPES)
    def test_output_sizes(self, order: int, band_type: str) -> None:
        """Bandpass and bandstop designs double the order."""
        n = order if band_type in ("lowpass", "highpass") else 2 * order

        b, a = iir_design(
            order, 0.1, 0.25, band_type=band_type, output="ba"
        )
        numerator, denominator = iir_design(
            order, 0.1, 0.25, band_type=band_type, output="sos"
        )

        assert b.shape == (n + 1,)
        assert a.shape == (n + 1,)
        assert numerator.shape == (n // 2 + n % 2, 3)
        assert denominator.shape == (n // 2 + n % 2, 3)

    @pytest.mark.parametrize("filter_type", FILTER_TYPES)
    @pytest.mark.parametrize("band_type", BAND_TYPES)
    @pytest.mark.parametrize("order", [3, 4])
    def test_sos_matches_transfer_function(
        self, filter_type: str, band_type: str, order: int
    ) -> None:
        """Both output formats describe the same filter."""
        kwargs = dict(
            center_frequency=0.3,
            filter_type=filter_type,
            band_type=band_type,
            dtype=torch.float64,
        )
        b, a = iir_design(order, 0.15, output="ba", **kwargs)
        numerator, denominator = iir_design(order, 0.15, output="sos", **kwargs)

        _, h_ba = frequency_response(b, a, 256)
        _, h_sos = frequency_response_sos(numerator, denominator, 256)

        torch.testing.assert_close(h_sos, h_ba, rtol=1e-6, atol=1e-8)

    @pytest.mark.parametrize("filter_type", FILTER_TYPES)
    @pytest.mark.parametrize("band_type", BAND_TYPES)
    def test_stable(self, filter_type: str, band_type: str) -> None:
        """Every design has its poles inside the unit circle."""
        numerator, denominator = iir_design(
            6,
            0.1,
            0.2,
            filter_type=filter_type,
            band_type=band_type,
            dtype=torch.float64,
        )

        assert iir_is_stable(numerator, denominator)

    @pytest.mark.parametrize("filter_type", FILTER_TYPES)
    @pytest.mark.parametrize("band_type", BAND_TYPES)
    def test_no_conjugate_pair_warning(
        self, filter_type: str, band_type: str
    ) -> None:
        """Designed roots always pair up."""
        with warnings.catch_warnings():
            warnings.simplefilter("error", ConjugatePairWarning)
            iir_design(
                7,
                0.12,
                0.3,
                filter_type=filter_type,
                band_type=band_type,
                dtype=torch.float64,
            )

    @pytest.mark.parametrize("filter_type", FILTER_TYPES)
    @pytest.mark.parametrize("btype", ["lowpass", "highpass"])
    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6])
    def test_matches_scipy(
        self, filter_type: str, btype: str, order: int
    ) -> None:
        """Lowpass and highpass coefficients match scipy.signal."""
        cutoff = 0.15

        b, a = iir_design(
            order,
            cutoff,
            passband_ripple_db=1.0,
            stopband_attenuation_db=40.0,
            filter_type=filter_type,
            band_type=btype,
            output="ba",
            dtype=torch.float64,
        )

        b_sp, a_sp = _SCIPY_DESIGNS[filter_type](order, 2 * cutoff, btype)

        torch.testing.assert_close(
            b, torch.tensor(b_sp, dtype=torch.float64), rtol=1e-7, atol=1e-10
        )
        torch.testing.assert_close(
            a, torch.tensor(a_sp, dtype=torch.float64), rtol=1e-7, atol=1e-10
        )

    @pytest.mark.parametrize("order", [2, 3, 5, 8])
    @pytest.mark.parametrize("cutoff", [0.05, 0.2, 0.4])
    def test_butterworth_half_power_at_cutoff(
        self, order: int, cutoff: float
    ) -> None:
        """Butterworth lowpass and highpass are -3 dB at the cutoff."""
        for band_type in ("lowpass", "highpass"):
            numerator, denominator = iir_design(
                order, cutoff, band_type=band_type, dtype=torch.float64
            )

            magnitude_db = _magnitude_db(numerator, denominator, [cutoff])

            assert magnitude_db.item() == pytest.approx(
                -10 * math.log10(2), abs=1e-8
            )

    def test_lowpass_and_highpass_reference_gain(self) -> None:
        """Unit gain at DC for lowpass and at Nyquist for highpass."""
        lowpass = iir_design(5, 0.1, dtype=torch.float64)
        highpass = iir_design(5, 0.1, band_type="highpass", dtype=torch.float64)

        assert _magnitude_db(*lowpass, [0.0]).item() == pytest.approx(
            0.0, abs=1e-10
        )
        assert _magnitude_db(*highpass, [0.5]).item() == pytest.approx(
            0.0, abs=1e-10
        )

    @pytest.mark.parametrize("filter_type", FILTER_TYPES)
    @pytest.mark.parametrize("center", [0.1, 0.25, 0.35])
    def test_bandpass_reference_gain(
        self, filter_type: str, center: float
    ) -> None:
        """The bandpass response at the center frequency is the nominal gain."""
        numerator, denominator = iir_design(
            3,
            0.05,
            center,
            filter_type=filter_type,
            band_type="bandpass",
            dtype=torch.float64,
        )

        magnitude_db = _magnitude_db(numerator, denominator, [center, 0.0, 0.5])

        assert magnitude_db[0].item() == pytest.approx(0.0, abs=1e-8)
        assert magnitude_db[1].item() < -20
        assert magnitude_db[2].item() < -20

    def test_butterworth_bandpass_half_power_at_edge(self) -> None:
        """The Butterworth bandpass is -3 dB at the cutoff frequency."""
        numerator, denominator = iir_design(
            4, 0.15, 0.25, band_type="bandpass", dtype=torch.float64
        )

        magnitude_db = _magnitude_db(numerator, denominator, [0.15])

        assert magnitude_db.item() == pytest.approx(
            -10 * math.log10(2), abs=1e-6
        )

    @pytest.mark.parametrize("filter_type", FILTER_TYPES)
    def test_bandstop_reference_gain(self, filter_type: str) -> None:
        """Bandstop passes DC and Nyquist and rejects the center."""
        numerator, denominator = iir_design(
            3,
            0.1,
            0.25,
            filter_type=filter_type,
            band_type="bandstop",
            dtype=torch.float64,
        )

        magnitude_db = _magnitude_db(numerator, denominator, [0.0, 0.5, 0.25])

        assert magnitude_db[0].item() == pytest.approx(0.0, abs=1e-8)
        assert magnitude_db[1].item() == pytest.approx(0.0, abs=1e-8)
        assert magnitude_db[2].item() < -20

    @pytest.mark.parametrize("filter_type", ["chebyshev_type_1", "elliptic"])
    @pytest.mark.parametrize("ripple", [0.5, 2.0])
    def test_even_order_equiripple_dc_gain(
        self, filter_type: str, ripple: float
    ) -> None:
        """Even order equiripple designs start at the bottom of the ripple."""
        even = iir_design(
            4,
            0.2,
            passband_ripple_db=ripple,
            filter_type=filter_type,
            dtype=torch.float64,
        )
        odd = iir_design(
            5,
            0.2,
            passband_ripple_db=ripple,
            filter_type=filter_type,
            dtype=torch.float64,
        )

        assert _magnitude_db(*even, [0.0]).item() == pytest.approx(
            -ripple, abs=1e-8
        )
        assert _magnitude_db(*odd, [0.0]).item() == pytest.approx(
            0.0, abs=1e-8
        )

    @pytest.mark.parametrize("order", [3, 4])
    def test_band_edges(self, order: int) -> None:
        """Cutoff is the passband edge, or the stopband edge for Type II."""
        cutoff = 0.2

        cheby1 = iir_design(
            order,
            cutoff,
            passband_ripple_db=1.0,
            filter_type="chebyshev_type_1",
            dtype=torch.float64,
        )
        ellip = iir_design(
            order,
            cutoff,
            passband_ripple_db=1.0,
            stopband_attenuation_db=40.0,
            filter_type="elliptic",
            dtype=torch.float64,
        )
        cheby2 = iir_design(
            order,
            cutoff,
            stopband_attenuation_db=40.0,
            filter_type="chebyshev_type_2",
            dtype=torch.float64,
        )

        assert _magnitude_db(*cheby1, [cutoff]).item() == pytest.approx(
            -1.0, abs=1e-8
        )
        assert _magnitude_db(*ellip, [cutoff]).item() == pytest.approx(
            -1.0, abs=1e-6
        )
        assert _magnitude_db(*cheby2, [cutoff]).item() == pytest.approx(
            -40.0, abs=1e-6
        )

    def test_trace_stages(self) -> None:
        """The trace callback sees every stage in pipeline order."""
        stages = []
        values = {}

        def trace(stage, value):
            stages.append(stage)
            values[stage] = value

        iir_design(
            3,
            0.1,
            0.25,
            filter_type="elliptic",
            band_type="bandpass",
            trace=trace,
        )

        assert stages == [
            "analog_zeros",
            "analog_poles",
            "analog_gain",
            "warp_factor",
            "digital_zeros",
            "digital_poles",
            "digital_gain",
            "zeros",
            "poles",
            "numerator",
            "denominator",
        ]
        assert values["analog_poles"].numel() == 3
        assert values["digital_zeros"].numel() == 3
        assert values["poles"].numel() == 6
        assert values["numerator"].shape == (3, 3)
        assert values["analog_poles"].dtype == torch.complex128
        assert values["warp_factor"].item() == pytest.approx(
            abs(
                (math.cos(2 * math.pi * 0.1) - math.cos(2 * math.pi * 0.25))
                / math.sin(2 * math.pi * 0.1)
            )
        )

    def test_default_dtype(self) -> None:
        """Output uses the default dtype unless one is given."""
        numerator, denominator = iir_design(4, 0.2)

        assert numerator.dtype == torch.get_default_dtype()
        assert denominator.dtype == torch.get_default_dtype()

    @pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
    @pytest.mark.parametrize("output", ["ba", "sos"])
    def test_dtype(self, dtype: torch.dtype, output: str) -> None:
        """Single and double precision outputs agree."""
        numerator, denominator = iir_design(
            4, 0.2, output=output, dtype=dtype
        )
        reference = iir_design(4, 0.2, output=output, dtype=torch.float64)

        assert numerator.dtype == dtype
        assert denominator.dtype == dtype
        torch.testing.assert_close(
            numerator.to(torch.float64), reference[0], rtol=1e-6, atol=1e-7
        )
        torch.testing.assert_close(
            denominator.to(torch.float64), reference[1], rtol=1e-6, atol=1e-7
        )

    def test_deterministic(self) -> None:
        """Repeated designs are identical."""
        first = iir_design(
            5, 0.1, 0.3, filter_type="elliptic", band_type="bandstop"
        )
        second = iir_design(
            5, 0.1, 0.3, filter_type="elliptic", band_type="bandstop"
        )

        assert torch.equal(first[0], second[0])
        assert torch.equal(first[1], second[1])

