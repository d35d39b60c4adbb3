import numpy as np
import pytest

from sine_spectrum.gen_signal import SineComponent, generate


def test_generate_lengths_and_start():
    waves = generate(64, 8, 27)

    for series in waves:
        assert len(series) == 64
    assert waves.a[0] == 0.0
    assert waves.total[0] == pytest.approx(0.25)


def test_sum_is_elementwise_sum():
    waves = generate(1260, 52, 15)
    np.testing.assert_allclose(waves.total, waves.a + waves.b, atol=1e-6)


def test_component_shapes():
    waves = generate(64, 8, 27)
    x = np.arange(64)

    np.testing.assert_allclose(waves.a, np.sin(2 * np.pi * x / 8), atol=1e-12)
    np.testing.assert_allclose(waves.b, np.sin(2 * np.pi * x / 27 + np.pi / 2) / 4, atol=1e-12)
    assert np.max(np.abs(waves.b)) <= 0.25
    # one full period of A later the signal repeats
    np.testing.assert_allclose(waves.a[8:16], waves.a[0:8], atol=1e-12)


@pytest.mark.parametrize("n", [0, 1])
def test_degenerate_sizes(n):
    waves = generate(n, 8, 27)
    assert len(waves.total) == n


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        generate(-1, 8, 27)


def test_sine_component_sample():
    wave = SineComponent(period=4, amplitude=2.0)
    assert wave.sample(1) == pytest.approx(2.0)
    assert wave.sample(2) == pytest.approx(0.0, abs=1e-12)
